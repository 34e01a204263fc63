"""
Interactive menu tests, driven through the CLI with scripted stdin.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from roster.domain.models import Employee
from roster.main import app
from roster.store.text_file import TextFileRecordStore

MENU_TITLE = "Employee Management System"
EXIT = "6\ny\n"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _run(runner: CliRunner, data_file: Path, script: str):
    return runner.invoke(app, ["--data-file", str(data_file), "shell"], input=script)


def test_menu_lists_all_choices(runner, data_file):
    result = _run(runner, data_file, EXIT)
    assert result.exit_code == 0
    for label in (
        "1. Add a new employee.",
        "2. View all employees.",
        "3. Search for an employee by ID.",
        "4. Update employee details.",
        "5. Delete an employee.",
        "6. Exit.",
    ):
        assert label in result.output


def test_no_subcommand_starts_shell(runner, data_file):
    result = runner.invoke(app, ["--data-file", str(data_file)], input=EXIT)
    assert result.exit_code == 0
    assert MENU_TITLE in result.output


def test_add_employee(runner, data_file):
    result = _run(runner, data_file, "1\n1\nAnn\nEng\n50000\n" + EXIT)
    assert result.exit_code == 0
    assert "Employee added successfully!" in result.output
    assert TextFileRecordStore(data_file).find_by_id(1) == Employee(
        id=1, name="Ann", department="Eng", salary=50000.0
    )


def test_add_duplicate_reports_failure(runner, data_file):
    TextFileRecordStore(data_file).add(1, "Ann", "Eng", 50000.0)
    result = _run(runner, data_file, "1\n1\nBob\nSales\n1000\n" + EXIT)
    assert "Failed to add employee. Employee ID may already exist." in result.output
    assert TextFileRecordStore(data_file).find_by_id(1).name == "Ann"


def test_refused_change_explains_damaged_blocks(runner, data_file, write_roster):
    original = "ID: 9\nName: X\nDepartment: Y\nSalary: n/a\n"
    write_roster(original)
    result = _run(runner, data_file, "1\n1\nAnn\nEng\n1\n5\n9\n" + EXIT)
    assert result.exit_code == 0
    assert "Failed to add employee." in result.output
    assert result.output.count("The roster file has 1 damaged record block(s)") == 2
    assert data_file.read_text(encoding="utf-8") == original


def test_failed_change_without_damage_has_no_note(runner, data_file):
    result = _run(runner, data_file, "5\n9\n" + EXIT)
    assert "Failed to delete employee." in result.output
    assert "damaged record block" not in result.output


def test_invalid_numbers_are_reprompted(runner, data_file):
    result = _run(runner, data_file, "one\n1\nx\n7\nDana\nOps\nlots\n123.5\n" + EXIT)
    assert result.exit_code == 0
    # one complaint per rejected value; click varies the type wording across releases
    assert result.output.count("is not a valid") >= 3
    assert TextFileRecordStore(data_file).find_by_id(7).salary == 123.5


def test_view_all_empty(runner, data_file):
    result = _run(runner, data_file, "2\n" + EXIT)
    assert "No employees found." in result.output


def test_view_all_lists_in_file_order(runner, data_file):
    store = TextFileRecordStore(data_file)
    store.add(2, "Bob", "Sales", 1000.0)
    store.add(1, "Ann", "Eng", 50000.0)
    result = _run(runner, data_file, "2\n" + EXIT)
    assert "Employee List" in result.output
    assert result.output.index("Bob") < result.output.index("Ann")
    assert "50,000.00" in result.output


def test_view_all_reports_read_failure(runner, tmp_path):
    directory = tmp_path / "roster-dir"
    directory.mkdir()
    result = _run(runner, directory, "2\n" + EXIT)
    assert result.exit_code == 0
    assert "Could not read employee records" in result.output


def test_search_found_and_missing(runner, data_file):
    TextFileRecordStore(data_file).add(1, "Ann", "Eng", 50000.0)
    result = _run(runner, data_file, "3\n1\n3\n9\n" + EXIT)
    assert "Ann" in result.output
    assert "Employee with ID 9 not found." in result.output


def test_update_employee(runner, data_file):
    TextFileRecordStore(data_file).add(1, "Ann", "Eng", 50000.0)
    result = _run(runner, data_file, "4\n1\nAnn B\nR&D\n60000\n4\n5\nX\nY\n1\n" + EXIT)
    assert "Employee details updated successfully!" in result.output
    assert "Failed to update employee. Please check the ID and try again." in result.output
    assert TextFileRecordStore(data_file).find_by_id(1) == Employee(
        id=1, name="Ann B", department="R&D", salary=60000.0
    )


def test_delete_employee(runner, data_file):
    TextFileRecordStore(data_file).add(1, "Ann", "Eng", 50000.0)
    result = _run(runner, data_file, "5\n1\n5\n1\n" + EXIT)
    assert "Employee deleted successfully!" in result.output
    assert "Failed to delete employee. Please check the ID and try again." in result.output
    assert TextFileRecordStore(data_file).find_by_id(1) is None


def test_invalid_option(runner, data_file):
    result = _run(runner, data_file, "9\n" + EXIT)
    assert "Invalid option! Please try again." in result.output


def test_exit_requires_confirmation(runner, data_file):
    result = _run(runner, data_file, "6\nn\n" + EXIT)
    assert result.exit_code == 0
    assert result.output.count(MENU_TITLE) == 2


def test_end_of_input_exits_cleanly(runner, data_file):
    result = _run(runner, data_file, "2\n")
    assert result.exit_code == 0
    assert "Exiting." in result.output
