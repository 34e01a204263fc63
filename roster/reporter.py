from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from roster.domain.models import Employee


def format_salary(salary: float) -> str:
    return f"{salary:,.2f}"


def print_employees(employees: Sequence[Employee], console: Optional[Console] = None) -> None:
    """
    Render employees as a rich table, in the order given (file order).
    """
    console = console or Console()

    if not employees:
        console.print("No employees found.")
        return

    table = Table(title="Employee List", box=box.ROUNDED)
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Department", style="green")
    table.add_column("Salary", justify="right", style="bold yellow")

    for emp in employees:
        table.add_row(str(emp.id), Text(emp.name), Text(emp.department), format_salary(emp.salary))

    console.print(table)


def print_employee(employee: Employee, console: Optional[Console] = None) -> None:
    """Render a single employee as a two-column field/value table."""
    console = console or Console()

    table = Table(box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("ID", str(employee.id))
    table.add_row("Name", Text(employee.name))
    table.add_row("Department", Text(employee.department))
    table.add_row("Salary", format_salary(employee.salary))

    console.print(table)


__all__ = ["format_salary", "print_employee", "print_employees"]
