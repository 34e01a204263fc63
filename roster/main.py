from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from roster.config import get_settings
from roster.reporter import print_employee, print_employees
from roster.shell import run_shell
from roster.store.text_file import TextFileRecordStore
from roster.utils.logging import configure_logging

app = typer.Typer(help="Employee roster backed by a plain text file.")


def _store(ctx: typer.Context) -> TextFileRecordStore:
    return ctx.obj


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-f",
        help="Roster file to use (default from settings: ROSTER_DATA_FILE).",
    ),
) -> None:
    """
    Manage the employee roster. Without a command, starts the interactive menu.
    """
    settings = get_settings()
    configure_logging(
        level=settings.log_level, json_logs=settings.json_logs, log_file=settings.log_file
    )
    if data_file is not None:
        settings = settings.model_copy(update={"data_file": data_file})
    ctx.obj = TextFileRecordStore.from_settings(settings)

    if ctx.invoked_subcommand is None:
        run_shell(ctx.obj)


@app.command()
def shell(ctx: typer.Context) -> None:
    """
    Start the interactive menu.
    """
    run_shell(_store(ctx))


@app.command()
def info(ctx: typer.Context) -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    store = _store(ctx)
    typer.echo(
        f"data_file={store.path} | atomic_writes={settings.atomic_writes} "
        f"on_malformed={settings.on_malformed.value} drop_malformed={settings.drop_malformed} "
        f"encoding={settings.encoding} | "
        f"log_level={settings.log_level} json_logs={settings.json_logs}"
    )


@app.command("list")
def list_employees(ctx: typer.Context) -> None:
    """
    List all employees in stored order.
    """
    result = _store(ctx).load_all()
    if not result.ok:
        typer.echo(f"Could not read employee records: {result.error}", err=True)
        raise typer.Exit(code=1)
    print_employees(result.records)


@app.command()
def show(
    ctx: typer.Context,
    employee_id: int = typer.Argument(..., help="Employee ID to look up."),
) -> None:
    """
    Show one employee. Use `roster show -- -1` for a negative ID.
    """
    employee = _store(ctx).find_by_id(employee_id)
    if employee is None:
        typer.echo(f"Employee with ID {employee_id} not found.", err=True)
        raise typer.Exit(code=1)
    print_employee(employee)


@app.command()
def add(
    ctx: typer.Context,
    employee_id: int = typer.Argument(..., help="New, unique employee ID."),
    name: str = typer.Argument(...),
    department: str = typer.Argument(...),
    salary: float = typer.Argument(...),
) -> None:
    """
    Add an employee.

    Put -- before the arguments when a value is negative:
    roster add -- 7 Ann Eng -5.0
    """
    if not _store(ctx).add(employee_id, name, department, salary):
        typer.echo("Failed to add employee. Employee ID may already exist.", err=True)
        raise typer.Exit(code=1)
    typer.echo("Employee added successfully!")


@app.command()
def update(
    ctx: typer.Context,
    employee_id: int = typer.Argument(..., help="ID of the employee to update."),
    name: str = typer.Argument(...),
    department: str = typer.Argument(...),
    salary: float = typer.Argument(...),
) -> None:
    """
    Replace name, department and salary of an employee.

    Put -- before the arguments when a value is negative:
    roster update -- 7 Ann Eng -5.0
    """
    if not _store(ctx).update_by_id(employee_id, name, department, salary):
        typer.echo("Failed to update employee. Please check the ID and try again.", err=True)
        raise typer.Exit(code=1)
    typer.echo("Employee details updated successfully!")


@app.command()
def delete(
    ctx: typer.Context,
    employee_id: int = typer.Argument(..., help="ID of the employee to delete."),
) -> None:
    """
    Delete an employee. Use `roster delete -- -1` for a negative ID.
    """
    if not _store(ctx).delete_by_id(employee_id):
        typer.echo("Failed to delete employee. Please check the ID and try again.", err=True)
        raise typer.Exit(code=1)
    typer.echo("Employee deleted successfully!")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
