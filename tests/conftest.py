"""
Pytest configuration for the employee roster.

Provides fixtures for:
- A temporary roster file and a store bound to it
- Writing raw roster text for decoder/store tests
- Isolating settings from the developer's environment
- Undoing logging configuration installed by CLI invocations
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from roster.config import get_settings
from roster.store.text_file import TextFileRecordStore

SETTINGS_ENV_VARS = (
    "ROSTER_DATA_FILE",
    "ROSTER_ATOMIC_WRITES",
    "ROSTER_ON_MALFORMED",
    "ROSTER_ENCODING",
    "ROSTER_DROP_MALFORMED",
    "ROSTER_JSON_LOGS",
    "ROSTER_LOG_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Clear roster env vars and the settings cache around every test.

    Runs from an empty working directory so a developer's `.env` is never read.
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """
    Drop handlers installed by `configure_logging` during a test.

    CLI invocations bind a stderr handler to the runner's temporary stream;
    leaving it on the root logger would break logging in later tests.
    """
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a roster file that does not exist yet."""
    return tmp_path / "data" / "employee.txt"


@pytest.fixture
def store(data_file: Path) -> TextFileRecordStore:
    """Fresh store backed by a temporary roster file."""
    return TextFileRecordStore(data_file)


@pytest.fixture
def write_roster(data_file: Path) -> Callable[[str], Path]:
    """Write raw text to the roster file and return its path."""

    def _write(text: str) -> Path:
        data_file.parent.mkdir(parents=True, exist_ok=True)
        data_file.write_text(text, encoding="utf-8")
        return data_file

    return _write
