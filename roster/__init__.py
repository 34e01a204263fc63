"""
Employee Roster - a small employee database kept in a plain text file.

This package provides:

- An immutable `Employee` record model
- A field-prefix text codec (``ID: ``, ``Name: ``, ``Department: ``, ``Salary: ``)
- A record store that re-reads the file on every operation and rewrites it
  in full on every add, update or delete
- An interactive menu and one-shot CLI commands on top of the store
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from roster.config import MalformedPolicy, Settings, get_settings
from roster.domain.models import Employee
from roster.exceptions import RecordParseError, RosterError
from roster.store import (
    AbstractRecordStore,
    LoadResult,
    RecordStore,
    SaveResult,
    StoreErrorKind,
    StoreFailure,
    TextFileRecordStore,
)
from roster.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "MalformedPolicy",
    "Settings",
    "get_settings",
    # Domain
    "Employee",
    # Errors
    "RecordParseError",
    "RosterError",
    # Store
    "AbstractRecordStore",
    "LoadResult",
    "RecordStore",
    "SaveResult",
    "StoreErrorKind",
    "StoreFailure",
    "TextFileRecordStore",
    # Logging
    "configure_logging",
    "get_logger",
]
