"""
Domain models for the employee roster.

Defines the employee record persisted by the record store. Records are
immutable values: changing an employee means building a new `Employee` and
replacing the old one in the roster.
"""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Employee(BaseModel):
    """
    A single employee in the roster.
    """

    id: int = Field(..., description="Caller-supplied identifier, unique within the roster.")
    name: str = Field(..., description="Employee name.")
    department: str = Field(..., description="Department the employee works in.")
    salary: float = Field(..., description="Salary; no currency or precision rules.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("name", "department")
    @classmethod
    def _single_line(cls, value: str) -> str:
        # The backing file stores one field per line.
        if "\n" in value or "\r" in value:
            raise ValueError("must not contain line breaks")
        return value


__all__ = ["Employee"]
