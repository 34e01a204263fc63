"""
Interactive menu for managing the employee roster.

Each menu choice maps onto one record store operation. The shell prompts for
field values (re-prompting on invalid numbers), calls the store and prints the
outcome; it never touches the backing file itself.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import typer
from rich.console import Console

from roster.reporter import print_employee, print_employees
from roster.store.abstract import RecordStore
from roster.utils.logging import get_logger

log = get_logger(__name__)

MENU_RULE = "=" * 32
MENU = "\n".join(
    [
        MENU_RULE,
        "Employee Management System",
        "1. Add a new employee.",
        "2. View all employees.",
        "3. Search for an employee by ID.",
        "4. Update employee details.",
        "5. Delete an employee.",
        "6. Exit.",
        MENU_RULE,
    ]
)


def _explain_refusal(store: RecordStore) -> None:
    """Tell the user when a mutation failed because the file has damaged blocks."""
    if store.drop_malformed:
        return
    skipped = store.load_all().skipped
    if skipped:
        typer.echo(
            f"The roster file has {skipped} damaged record block(s); "
            "changes are not saved until they are repaired "
            "(or ROSTER_DROP_MALFORMED=true is set)."
        )


def _add_employee(store: RecordStore, console: Console) -> None:
    employee_id = typer.prompt("Enter Employee ID", type=int)
    name = typer.prompt("Enter Employee Name")
    department = typer.prompt("Enter Employee Department")
    salary = typer.prompt("Enter Employee Salary", type=float)

    if store.add(employee_id, name, department, salary):
        typer.echo("Employee added successfully!")
    else:
        typer.echo("Failed to add employee. Employee ID may already exist.")
        _explain_refusal(store)


def _view_all_employees(store: RecordStore, console: Console) -> None:
    result = store.load_all()
    if not result.ok:
        typer.echo(f"Could not read employee records: {result.error}")
        return
    print_employees(result.records, console=console)


def _search_employee(store: RecordStore, console: Console) -> None:
    employee_id = typer.prompt("Enter Employee ID", type=int)
    employee = store.find_by_id(employee_id)
    if employee is None:
        typer.echo(f"Employee with ID {employee_id} not found.")
        return
    print_employee(employee, console=console)


def _update_employee(store: RecordStore, console: Console) -> None:
    employee_id = typer.prompt("Enter Employee ID to update", type=int)
    name = typer.prompt("Enter New Name")
    department = typer.prompt("Enter New Department")
    salary = typer.prompt("Enter New Salary", type=float)

    if store.update_by_id(employee_id, name, department, salary):
        typer.echo("Employee details updated successfully!")
    else:
        typer.echo("Failed to update employee. Please check the ID and try again.")
        _explain_refusal(store)


def _delete_employee(store: RecordStore, console: Console) -> None:
    employee_id = typer.prompt("Enter Employee ID to delete", type=int)
    if store.delete_by_id(employee_id):
        typer.echo("Employee deleted successfully!")
    else:
        typer.echo("Failed to delete employee. Please check the ID and try again.")
        _explain_refusal(store)


_ACTIONS: Dict[int, Callable[[RecordStore, Console], None]] = {
    1: _add_employee,
    2: _view_all_employees,
    3: _search_employee,
    4: _update_employee,
    5: _delete_employee,
}
EXIT_CHOICE = 6


def run_shell(store: RecordStore, console: Optional[Console] = None) -> None:
    """
    Run the menu loop until the user confirms exit or input ends.
    """
    console = console or Console()
    log.debug("Starting interactive shell", extra={"store": repr(store)})

    while True:
        typer.echo(MENU)
        try:
            choice = typer.prompt("Enter your choice", type=int)
            if choice == EXIT_CHOICE:
                if typer.confirm("Are you sure you want to exit?", default=False):
                    return
                continue
            action = _ACTIONS.get(choice)
            if action is None:
                typer.echo("Invalid option! Please try again.")
                continue
            action(store, console)
        except typer.Abort:
            # stdin closed (EOF) or Ctrl-C inside a prompt
            typer.echo("\nExiting.")
            return


__all__ = ["MENU", "run_shell"]
