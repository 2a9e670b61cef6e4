# ABOUTME: Shared pytest fixtures for bookenrich tests.
# ABOUTME: Provides sample input workbooks built with openpyxl.

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

INPUT_HEADER = ["ISBN", "Author", "Title", "Condition"]


def build_workbook(path: Path, rows: Sequence[Sequence[Any]], sheet: str = "Book Sheet") -> Path:
    """Write a workbook with the given rows under the input header."""
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet
    worksheet.append(INPUT_HEADER)
    for row in rows:
        worksheet.append(list(row))
    workbook.save(path)
    return path


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Factory for input workbooks in tmp_path."""

    def _make(
        rows: Sequence[Sequence[Any]], name: str = "books.xlsx", sheet: str = "Book Sheet"
    ) -> Path:
        return build_workbook(tmp_path / name, rows, sheet=sheet)

    return _make


@pytest.fixture
def sample_workbook(make_workbook: Callable[..., Path]) -> Path:
    """A small book list mixing ISBN rows, title-only rows, and a numeric ISBN cell."""
    return make_workbook(
        [
            ["978-0-13-468599-1", "Joshua Bloch", "Effective Java", "Like new"],
            ["", "J.R.R. Tolkien", "The Hobbit", "Worn"],
            [9780553804577, "David Vise", "The Google Story", "Good"],
            ["", "Nobody", "Unfindable Book", "Poor"],
        ]
    )
