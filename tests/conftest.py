"""Shared test fixtures — sample report documents."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_REPORT = """\
[Stations]
0 1001 1002
1 1003
2 1004

[Charger Availability Reports]
1001 0 50000 true
1001 50000 100000 true
1002 50000 100000 true
1003 25000 75000 false
1004 0 50000 true
1004 100000 200000 true
"""

SAMPLE_OUTPUT = "0 100\n1 0\n2 75\n"


@pytest.fixture
def sample_report() -> str:
    return SAMPLE_REPORT


@pytest.fixture
def sample_output() -> str:
    return SAMPLE_OUTPUT


@pytest.fixture
def write_input(tmp_path: Path):
    """Write a report document to a temp file and return its path."""

    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
