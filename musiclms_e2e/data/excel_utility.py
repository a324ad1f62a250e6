"""Spreadsheet access for data-driven tests.

Reads ``.xlsx`` workbooks through openpyxl and ``.csv`` files through the
standard library.  Every cell is returned as its display string; an absent
row or cell reads as ``""``.
"""

from __future__ import annotations

import csv
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import Any

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..errors import DataSourceError
from ..utils.logging_utils import get_logger

logger = get_logger("data")

SUPPORTED_SUFFIXES = (".xlsx", ".xlsm", ".csv")


def format_cell(value: Any) -> str:
    """Render a raw cell value the way the spreadsheet would display it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _is_blank(row: list[Any]) -> bool:
    return all(cell in (None, "") for cell in row)


def _trim_trailing_blank(rows: list[list[Any]]) -> list[list[Any]]:
    # Interior blank rows are kept so row positions match the source file.
    while rows and _is_blank(rows[-1]):
        rows.pop()
    return rows


class ExcelUtility:
    """Row/cell access to one workbook file.

    Row and column numbers are zero-based; row 0 is the header row.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        if self.path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise DataSourceError(f"Unsupported data file type: {self.path}")
        if not self.path.is_file():
            raise DataSourceError(f"Data file not found: {self.path}")
        self._sheets = self._load()

    def _load(self) -> dict[str, list[list[Any]]]:
        if self.path.suffix.lower() == ".csv":
            try:
                with self.path.open(newline="", encoding="utf-8-sig") as handle:
                    return {self.path.stem: _trim_trailing_blank([list(row) for row in csv.reader(handle)])}
            except (OSError, UnicodeDecodeError, csv.Error) as exc:
                raise DataSourceError(f"Could not read {self.path}: {exc}") from exc

        try:
            workbook = load_workbook(self.path, read_only=True, data_only=True)
        except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as exc:
            raise DataSourceError(f"Could not open workbook {self.path}: {exc}") from exc
        try:
            return {
                sheet.title: _trim_trailing_blank([list(row) for row in sheet.iter_rows(values_only=True)])
                for sheet in workbook.worksheets
            }
        finally:
            workbook.close()

    @property
    def sheet_names(self) -> list[str]:
        return list(self._sheets)

    def _rows(self, sheet_name: str | None) -> list[list[Any]]:
        if sheet_name is None:
            return next(iter(self._sheets.values()), [])
        try:
            return self._sheets[sheet_name]
        except KeyError:
            raise DataSourceError(f"Sheet '{sheet_name}' not found in {self.path}") from None

    def row_count(self, sheet_name: str | None = None) -> int:
        """Number of rows including the header."""
        return len(self._rows(sheet_name))

    def cell_count(self, sheet_name: str | None = None, row_num: int = 0) -> int:
        rows = self._rows(sheet_name)
        if row_num >= len(rows):
            return 0
        row = rows[row_num]
        # Trailing empty cells do not count toward the row width.
        while row and row[-1] in (None, ""):
            row = row[:-1]
        return len(row)

    def cell_data(self, sheet_name: str | None, row_num: int, col_num: int) -> str:
        rows = self._rows(sheet_name)
        if row_num >= len(rows) or col_num >= len(rows[row_num]):
            return ""
        return format_cell(rows[row_num][col_num])

    def is_data_present(self, sheet_name: str | None, data: str) -> bool:
        return self.row_number(sheet_name, None, data) >= 0

    def row_number(self, sheet_name: str | None, col_num: int | None, data: str) -> int:
        """First row holding *data* (in *col_num*, or any column when ``None``); -1 if absent."""
        for index, row in enumerate(self._rows(sheet_name)):
            columns = range(len(row)) if col_num is None else (col_num,)
            if any(self.cell_data(sheet_name, index, col) == data for col in columns):
                return index
        return -1

    def data_rows(self, sheet_name: str | None = None) -> list[tuple[str, ...]]:
        """All rows after the header, padded to the header's width."""
        width = self.cell_count(sheet_name, 0)
        return [
            tuple(self.cell_data(sheet_name, row_num, col) for col in range(width))
            for row_num in range(1, self.row_count(sheet_name))
        ]


def read_rows(path: str | Path, sheet_name: str | None = None) -> list[tuple[str, ...]]:
    """Read the data rows of a tabular file, excluding its header row."""
    rows = ExcelUtility(path).data_rows(sheet_name)
    logger.debug("Loaded %d rows from %s", len(rows), path)
    return rows


def set_cell_data(path: str | Path, sheet_name: str, row_num: int, col_num: int, data: str) -> None:
    """Write *data* into an ``.xlsx`` cell, creating the workbook or sheet if needed."""
    target = Path(path)
    if target.suffix.lower() not in (".xlsx", ".xlsm"):
        raise DataSourceError(f"Only workbooks can be written: {target}")
    try:
        workbook = load_workbook(target) if target.is_file() else Workbook()
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise DataSourceError(f"Could not open workbook {target}: {exc}") from exc

    if sheet_name in workbook.sheetnames:
        sheet = workbook[sheet_name]
    elif not target.is_file():
        sheet = workbook.active
        sheet.title = sheet_name
    else:
        sheet = workbook.create_sheet(sheet_name)
    sheet.cell(row=row_num + 1, column=col_num + 1, value=data)
    try:
        workbook.save(target)
    except OSError as exc:
        raise DataSourceError(f"Could not write workbook {target}: {exc}") from exc
