"""
Abstract record store interfaces for the employee roster.

The shell and CLI depend only on the `RecordStore` protocol. Concrete stores
subclass `AbstractRecordStore`, which builds add/find/update/delete purely on
top of the two primitives `load_all` and `save_all`. No records are cached
between calls: every operation re-reads the backing resource.
"""

from __future__ import annotations

import abc
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from pydantic import ValidationError

from roster.domain.models import Employee
from roster.store.results import LoadResult, SaveResult
from roster.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class RecordStore(Protocol):
    """
    Caller contract of the record store.

    `drop_malformed` tells whether mutations may rewrite a roster whose load
    skipped malformed blocks (losing them) or must refuse.
    """

    drop_malformed: bool

    def load_all(self) -> LoadResult:
        """Read every employee from the backing resource, in stored order."""
        ...

    def save_all(self, records: Iterable[Employee]) -> SaveResult:
        """Replace the backing resource's content with `records`, in order."""
        ...

    def add(self, employee_id: int, name: str, department: str, salary: float) -> bool:
        ...

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        ...

    def update_by_id(
        self, employee_id: int, name: str, department: str, salary: float
    ) -> bool:
        ...

    def delete_by_id(self, employee_id: int) -> bool:
        ...


class AbstractRecordStore(abc.ABC):
    """
    Derived CRUD operations over a load-all/save-all pair.

    Mutations never save after a failed load, so a partially read roster
    cannot overwrite the complete one on disk. Unless `drop_malformed` is set
    they also refuse to save when the load skipped malformed blocks.
    """

    drop_malformed: bool = False

    @abc.abstractmethod
    def load_all(self) -> LoadResult:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def save_all(self, records: Iterable[Employee]) -> SaveResult:  # pragma: no cover
        raise NotImplementedError

    def _load_for_update(self, operation: str, employee_id: int) -> Optional[List[Employee]]:
        result = self.load_all()
        if not result.ok:
            log.error(
                f"Not running {operation}: roster could not be loaded ({result.error})",
                extra={"employee_id": employee_id},
            )
            return None
        if result.skipped and not self.drop_malformed:
            log.error(
                f"Not running {operation}: saving would discard {result.skipped} "
                "malformed record block(s); repair the file or enable drop_malformed",
                extra={"employee_id": employee_id, "skipped": result.skipped},
            )
            return None
        return list(result.records)

    def add(self, employee_id: int, name: str, department: str, salary: float) -> bool:
        """
        Append a new employee. Fails if `employee_id` is already present.
        """
        try:
            employee = Employee(id=employee_id, name=name, department=department, salary=salary)
        except ValidationError as exc:
            log.warning(f"Rejected employee {employee_id}: {exc}", extra={"employee_id": employee_id})
            return False

        employees = self._load_for_update("add", employee_id)
        if employees is None:
            return False

        if any(emp.id == employee_id for emp in employees):
            log.warning(
                f"Employee with ID {employee_id} already exists.",
                extra={"employee_id": employee_id},
            )
            return False

        employees.append(employee)
        saved = self.save_all(employees)
        if saved.ok:
            log.info(f"Added employee {employee_id}", extra={"employee_id": employee_id})
        return saved.ok

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the first employee with `employee_id`, or None."""
        result = self.load_all()
        return next((emp for emp in result.records if emp.id == employee_id), None)

    def update_by_id(
        self, employee_id: int, name: str, department: str, salary: float
    ) -> bool:
        """
        Replace name, department and salary of the first employee with
        `employee_id`. Other records keep their values and positions.
        """
        try:
            replacement = Employee(
                id=employee_id, name=name, department=department, salary=salary
            )
        except ValidationError as exc:
            log.warning(f"Rejected update of {employee_id}: {exc}", extra={"employee_id": employee_id})
            return False

        employees = self._load_for_update("update", employee_id)
        if employees is None:
            return False

        for index, emp in enumerate(employees):
            if emp.id == employee_id:
                employees[index] = replacement
                break
        else:
            log.info(f"No employee with ID {employee_id} to update", extra={"employee_id": employee_id})
            return False

        saved = self.save_all(employees)
        if saved.ok:
            log.info(f"Updated employee {employee_id}", extra={"employee_id": employee_id})
        return saved.ok

    def delete_by_id(self, employee_id: int) -> bool:
        """Remove every employee with `employee_id`."""
        employees = self._load_for_update("delete", employee_id)
        if employees is None:
            return False

        remaining = [emp for emp in employees if emp.id != employee_id]
        if len(remaining) == len(employees):
            log.info(f"No employee with ID {employee_id} to delete", extra={"employee_id": employee_id})
            return False

        saved = self.save_all(remaining)
        if saved.ok:
            log.info(
                f"Deleted employee {employee_id}",
                extra={"employee_id": employee_id, "removed": len(employees) - len(remaining)},
            )
        return saved.ok


__all__ = ["AbstractRecordStore", "RecordStore"]
