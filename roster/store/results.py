"""
Result contracts for the record store's load and save primitives.

`load_all` and `save_all` never raise for I/O or parse problems; they return
these values so callers can tell an empty roster from one that failed to load
and a completed write from a failed one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from roster.domain.models import Employee


class StoreErrorKind(str, Enum):
    READ = "read"
    WRITE = "write"
    PARSE = "parse"


@dataclass(frozen=True)
class StoreFailure:
    """Why a load or save did not complete."""

    kind: StoreErrorKind
    message: str
    line_no: Optional[int] = None

    def __str__(self) -> str:
        location = f" (line {self.line_no})" if self.line_no is not None else ""
        return f"{self.kind.value} error{location}: {self.message}"


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of reading the backing file.

    On a READ failure `records` holds whatever was decoded before the error;
    on a PARSE failure it is empty. `skipped` counts malformed blocks dropped
    under the skip policy.
    """

    records: Tuple[Employee, ...] = ()
    error: Optional[StoreFailure] = None
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class SaveResult:
    """Outcome of rewriting the backing file."""

    records_written: int = 0
    error: Optional[StoreFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["LoadResult", "SaveResult", "StoreErrorKind", "StoreFailure"]
