"""
Shared fixtures for AZMet tests.
"""

import io
from typing import List

import pytest

MEASUREMENTS = [
    "10.5",
    "45.2",
    "0.7",
    "0.0",
    "0.0",
    "12.3",
    "15.1",
    "1.2",
    "1.0",
    "180.0",
    "25.5",
    "3.4",
    "0.05",
    "0.9",
    "-1.5",
]


def make_row(year: int = 2023, day: int = 1, hour: int = 0) -> List[str]:
    """Build a well-formed 18 field row."""
    return [str(year), str(day), str(hour)] + list(MEASUREMENTS)


def make_csv(rows: List[List[str]]) -> bytes:
    return "".join(",".join(row) + "\r\n" for row in rows).encode("ascii")


@pytest.fixture
def valid_row():
    return make_row()


@pytest.fixture
def three_row_stream():
    rows = [make_row(2023, 1, 1), make_row(2023, 1, 2), make_row(2023, 1, 3)]
    return io.BytesIO(make_csv(rows))
