"""
Synthetic roster generator for the employee roster.

Writes a deterministic set of employees (ids 1..N, seeded names, departments
and salaries) to a roster file through the record store, so the file uses the
same encoding the application reads.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import List

import typer

from roster.config import get_settings
from roster.domain.models import Employee
from roster.store.text_file import TextFileRecordStore

app = typer.Typer(help="Generate a synthetic employee roster file.")

FIRST_NAMES = ["Ann", "Bob", "Chen", "Dana", "Emil", "Fatima", "Goran", "Hana", "Ivo", "Jun"]
LAST_NAMES = ["Silva", "Novak", "Okafor", "Larsen", "Ito", "Moreau", "Haddad", "Kowalski"]
DEPARTMENTS = ["Engineering", "Sales", "Finance", "R&D", "Support", "Operations"]


def _generate_employees(rows: int, seed: int) -> List[Employee]:
    rng = random.Random(seed)
    employees: List[Employee] = []
    for employee_id in range(1, rows + 1):
        employees.append(
            Employee(
                id=employee_id,
                name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                department=rng.choice(DEPARTMENTS),
                salary=round(rng.uniform(30_000, 150_000), 2),
            )
        )
    return employees


@app.command()
def main(
    rows: int = typer.Option(
        50,
        "--rows",
        "-r",
        min=0,
        help="Number of employees to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Roster file to write (default from settings: ROSTER_DATA_FILE).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing roster file.",
    ),
) -> None:
    """
    Generate employees and write them as a roster file.
    """
    settings = get_settings()
    target = output or settings.data_file
    if target.exists() and not force:
        typer.echo(f"{target} already exists; pass --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} employees -> {target} (seed={seed})")
    employees = _generate_employees(rows, seed)

    store = TextFileRecordStore(
        target, atomic_writes=settings.atomic_writes, encoding=settings.encoding
    )
    result = store.save_all(employees)
    if not result.ok:
        typer.echo(f"Could not write roster: {result.error}", err=True)
        raise typer.Exit(code=1)

    duration = time.perf_counter() - start
    typer.echo(f"Wrote {result.records_written:,} employees in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
