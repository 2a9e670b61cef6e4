# ABOUTME: Excel workbook row source and row sink for the enrichment pipeline.
# ABOUTME: Reads 4-column book rows from a sheet and writes the 10-column enriched table.

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from bookenrich.core.reducer import OUTPUT_HEADER
from bookenrich.metadata.types import InputRow, OutputRow

logger = logging.getLogger(__name__)

DEFAULT_INPUT_SHEET = "Book Sheet"
DEFAULT_OUTPUT_SHEET = "Sheet1"

_INPUT_COLUMNS = 4


class SheetReadError(Exception):
    """Raised when an input workbook cannot be read as a book list."""


def _cell_text(value: Any) -> str:
    """Render a cell value as text.

    Numeric ISBN cells come back as int or float; integral floats are
    written without the trailing ".0" so "9780134685991.0" never reaches
    a provider.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_input_rows(path: Path, sheet: str = DEFAULT_INPUT_SHEET) -> list[InputRow]:
    """Read book rows (ISBN, author, title, condition) from a workbook sheet.

    The first row is a header and is skipped, as are fully empty rows.

    Raises:
        SheetReadError: If the file is not a readable workbook, the sheet is
            missing, or the sheet has fewer than four columns.
    """
    try:
        workbook = load_workbook(path, data_only=True)
    except (OSError, BadZipFile, InvalidFileException, KeyError) as exc:
        raise SheetReadError(f"Cannot read workbook {path}: {exc}") from exc

    try:
        if sheet not in workbook.sheetnames:
            raise SheetReadError(f"Sheet {sheet!r} not found in {path}")

        worksheet = workbook[sheet]
        rows: list[InputRow] = []
        for cells in worksheet.iter_rows(min_row=2, values_only=True):
            if all(cell in (None, "") for cell in cells):
                continue
            if len(cells) < _INPUT_COLUMNS:
                raise SheetReadError(
                    f"Sheet {sheet!r} has {len(cells)} column(s), expected {_INPUT_COLUMNS}"
                )
            isbn, author, title, condition = (_cell_text(c) for c in cells[:_INPUT_COLUMNS])
            rows.append(InputRow(isbn=isbn, author=author, title=title, condition=condition))
    finally:
        workbook.close()

    logger.info("Read %d row(s) from %s [%s]", len(rows), path, sheet)
    return rows


def write_output_rows(
    path: Path, rows: Sequence[OutputRow], sheet: str = DEFAULT_OUTPUT_SHEET
) -> None:
    """Write the enriched table, header first, replacing any existing file."""
    if path.exists():
        logger.info("Output file %s already exists, replacing it", path)

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet
    worksheet.append(list(OUTPUT_HEADER))
    for row in rows:
        worksheet.append(row.cells())

    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    logger.info("Enriched book data saved to %s", path)
