"""Shared fixtures for the test suite."""

import io
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def console() -> Console:
    """A console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def weblog_file(tmp_path: Path) -> Path:
    """A small weblog file with hours 0,0,1,23,23,23 over three months."""
    path = tmp_path / "weblog.log"
    path.write_text(
        "2018 01 01 00 10\n"
        "2018 01 02 00 20\n"
        "2018 02 03 01 30\n"
        "2018 02 04 23 40\n"
        "2018 03 05 23 50\n"
        "2018 03 06 23 55\n"
    )
    return path
