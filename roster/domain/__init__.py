"""
Domain package for the employee roster.

Exports the core domain models used by the record store, the shell and the CLI.
Keep this package focused on data definitions and validation concerns.
"""

from roster.domain.models import Employee

__all__ = [
    "Employee",
]
