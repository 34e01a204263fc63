"""
Field-prefix text encoding for employee records.

Each employee is written as a record block:

    ID: 1
    Name: Ann
    Department: Eng
    Salary: 50000.0
    ----------------------------

Only the four prefixed field lines are interpreted when reading; the separator
and any other line are ignored. Prefixes are exact and case-sensitive, and the
value is the raw remainder of the line.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from roster.config import MalformedPolicy
from roster.domain.models import Employee
from roster.exceptions import RecordParseError
from roster.utils.logging import get_logger

log = get_logger(__name__)

ID_PREFIX = "ID: "
NAME_PREFIX = "Name: "
DEPARTMENT_PREFIX = "Department: "
SALARY_PREFIX = "Salary: "

# Order matters: blocks must present their fields in exactly this sequence.
FIELD_PREFIXES = (ID_PREFIX, NAME_PREFIX, DEPARTMENT_PREFIX, SALARY_PREFIX)
FIELD_NAMES = ("id", "name", "department", "salary")

RECORD_SEPARATOR = "-" * 28


def encode_record(employee: Employee) -> str:
    """Render one employee as a newline-terminated record block."""
    return (
        f"{ID_PREFIX}{employee.id}\n"
        f"{NAME_PREFIX}{employee.name}\n"
        f"{DEPARTMENT_PREFIX}{employee.department}\n"
        f"{SALARY_PREFIX}{float(employee.salary)!r}\n"
        f"{RECORD_SEPARATOR}\n"
    )


def encode_records(employees: Iterable[Employee]) -> str:
    """Render employees, in order, as the full content of a roster file."""
    return "".join(encode_record(emp) for emp in employees)


def _classify(line: str) -> Optional[int]:
    for index, prefix in enumerate(FIELD_PREFIXES):
        if line.startswith(prefix):
            return index
    return None


class RecordDecoder:
    """
    Incremental decoder turning roster file lines into `Employee` values.

    Lines are fed one at a time so a caller reading from a file keeps every
    record completed before an I/O error. Malformed blocks are handled per
    `policy`: dropped with a warning (SKIP) or raised as `RecordParseError`
    (ABORT). After a dropped block, field lines are ignored until the next
    ``ID:`` line.
    """

    def __init__(self, policy: MalformedPolicy = MalformedPolicy.SKIP) -> None:
        self.policy = MalformedPolicy(policy)
        self.skipped = 0
        self._fields: Dict[str, str] = {}
        self._expected: Optional[int] = None
        self._block_start: Optional[int] = None
        self._resyncing = False

    @property
    def in_block(self) -> bool:
        return self._expected is not None

    def _reset(self) -> None:
        self._fields = {}
        self._expected = None
        self._block_start = None

    def _malformed(self, line_no: int, reason: str) -> None:
        if self.policy is MalformedPolicy.ABORT:
            raise RecordParseError(reason, line_no=line_no)
        self.skipped += 1
        log.warning(
            f"Skipping malformed record block at line {line_no}: {reason}",
            extra={"line_no": line_no, "block_start": self._block_start},
        )
        self._reset()
        self._resyncing = True

    def feed(self, line_no: int, line: str) -> Optional[Employee]:
        """
        Consume one line. Returns the employee completed by this line, if any.
        """
        line = line.rstrip("\r\n")
        index = _classify(line)
        if index is None:
            return None

        value = line[len(FIELD_PREFIXES[index]):]

        if index == 0:
            if self.in_block:
                self._malformed(
                    line_no,
                    f"record starting at line {self._block_start} is missing "
                    f"'{FIELD_NAMES[self._expected]}'",
                )
            self._resyncing = False
            self._fields = {"id": value}
            self._expected = 1
            self._block_start = line_no
            return None

        if self._resyncing:
            return None

        if not self.in_block:
            self._malformed(line_no, f"'{FIELD_NAMES[index]}' line outside of a record block")
            return None

        if index != self._expected:
            self._malformed(
                line_no,
                f"expected '{FIELD_NAMES[self._expected]}' line, found '{FIELD_NAMES[index]}'",
            )
            return None

        self._fields[FIELD_NAMES[index]] = value
        if index < len(FIELD_PREFIXES) - 1:
            self._expected = index + 1
            return None

        try:
            employee = Employee.model_validate(self._fields)
        except ValidationError as exc:
            err = exc.errors()[0]
            field = ".".join(str(part) for part in err["loc"]) or "record"
            self._malformed(line_no, f"invalid {field}: {err['msg']}")
            return None

        self._reset()
        return employee

    def finish(self, line_no: int) -> None:
        """Signal end of input; a block still open there is truncated."""
        if self.in_block:
            self._malformed(
                line_no,
                f"record starting at line {self._block_start} is truncated",
            )
        self._resyncing = False


def decode_lines(
    lines: Iterable[str], policy: MalformedPolicy = MalformedPolicy.SKIP
) -> List[Employee]:
    """Decode an iterable of roster file lines into employees, in order."""
    decoder = RecordDecoder(policy)
    employees: List[Employee] = []
    line_no = 0
    for line_no, line in enumerate(lines, start=1):
        employee = decoder.feed(line_no, line)
        if employee is not None:
            employees.append(employee)
    decoder.finish(line_no)
    return employees


__all__ = [
    "FIELD_PREFIXES",
    "RECORD_SEPARATOR",
    "RecordDecoder",
    "decode_lines",
    "encode_record",
    "encode_records",
]
