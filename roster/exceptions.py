"""
Exception hierarchy for the employee roster.

Store operations report I/O problems through result objects rather than
exceptions; the classes here cover the cases where raising is the contract
(e.g., the decoder under the ``abort`` malformed-record policy).
"""

from __future__ import annotations

from typing import Optional


class RosterError(Exception):
    """Root exception for all employee-roster errors."""


class RecordParseError(RosterError):
    """Raised when a record block in the backing file cannot be decoded."""

    def __init__(self, reason: str, line_no: Optional[int] = None) -> None:
        self.reason = reason
        self.line_no = line_no
        location = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{location}{reason}")


__all__ = ["RosterError", "RecordParseError"]
