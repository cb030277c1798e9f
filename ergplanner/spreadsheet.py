"""
Spreadsheet access for Erg Planner.

Wraps a pandas ExcelFile so the rest of the application only sees sheet
names and typed cells. Every cell is classified once into a Cell whose
kind is one of NUMBER, STRING, EMPTY or OTHER.
"""

import os
import numbers
import logging
from collections import namedtuple
from enum import Enum

import numpy as np
import pandas as pd

from .constants import EXCEL_EXTENSIONS
from .exceptions import WorkbookError


class CellKind(Enum):
    """Kind of value held by a worksheet cell."""
    NUMBER = 'number'
    STRING = 'string'
    EMPTY = 'empty'
    OTHER = 'other'


class Cell(namedtuple('Cell', ['kind', 'value'])):
    """A worksheet cell tagged with its kind."""

    __slots__ = ()

    @classmethod
    def from_value(cls, value):
        """
        Classify a raw value read from a workbook.

        Args:
            value: Value as returned by pandas/openpyxl

        Returns:
            Cell instance. Numbers are stored as float.
        """
        if value is None:
            return EMPTY_CELL
        if isinstance(value, str):
            if value == '':
                return EMPTY_CELL
            return cls(CellKind.STRING, value)
        # bool is an int subclass, but TRUE/FALSE is not a number in a sheet
        if isinstance(value, (bool, np.bool_)):
            return cls(CellKind.OTHER, value)
        if isinstance(value, numbers.Real):
            if pd.isna(value):
                return EMPTY_CELL
            return cls(CellKind.NUMBER, float(value))
        if pd.isna(value):
            return EMPTY_CELL
        return cls(CellKind.OTHER, value)

    @property
    def is_number(self):
        return self.kind is CellKind.NUMBER

    @property
    def is_empty(self):
        return self.kind is CellKind.EMPTY


EMPTY_CELL = Cell(CellKind.EMPTY, None)


class Sheet:
    """Cells of one worksheet, addressed by zero-based row and column."""

    def __init__(self, name, rows):
        """
        Args:
            name: Worksheet name
            rows: List of rows, each a list of Cell
        """
        self.name = name
        self._rows = rows

    @classmethod
    def from_values(cls, name, values):
        """Build a sheet from raw row values (lists of Python values)."""
        return cls(name, [[Cell.from_value(v) for v in row] for row in values])

    def get_value(self, row, col):
        """
        Get the cell at a position.

        Args:
            row: Zero-based row index
            col: Zero-based column index

        Returns:
            Cell at that position, or an empty cell outside the used range
        """
        if row < 0 or col < 0 or row >= len(self._rows):
            return EMPTY_CELL
        cells = self._rows[row]
        if col >= len(cells):
            return EMPTY_CELL
        return cells[col]

    def rows(self, start=0):
        """Iterate over rows starting at the given zero-based index."""
        for cells in self._rows[start:]:
            yield list(cells)


class Workbook:
    """Read-only view over an Excel workbook."""

    def __init__(self, path, excel_file):
        self.path = path
        self._excel_file = excel_file

    @classmethod
    def open(cls, path):
        """
        Open a workbook.

        Args:
            path: Path to the .xlsx file

        Returns:
            Workbook instance

        Raises:
            WorkbookError: If the file does not exist, is not an .xlsx/.xlsm
                file or cannot be read
        """
        if not os.path.exists(path):
            raise WorkbookError(f"Workbook {path} does not exist")

        extension = os.path.splitext(str(path))[1].lower()
        if extension not in EXCEL_EXTENSIONS:
            raise WorkbookError(f"Workbook {path} is not an Excel file "
                                f"(expected one of {', '.join(EXCEL_EXTENSIONS)})")

        try:
            excel_file = pd.ExcelFile(path, engine='openpyxl')
        except Exception as e:
            raise WorkbookError(f"Couldn't open workbook {path}: {e}") from e

        logging.debug(f"Opened workbook {path}")
        return cls(path, excel_file)

    def sheet_names(self):
        """
        Get the worksheet names in workbook order.

        Raises:
            WorkbookError: If the sheet list cannot be read
        """
        try:
            return list(self._excel_file.sheet_names)
        except Exception as e:
            raise WorkbookError(f"Couldn't get worksheets of {self.path}: {e}") from e

    def sheet(self, name):
        """
        Read one worksheet.

        Args:
            name: Worksheet name

        Returns:
            Sheet with every cell classified

        Raises:
            WorkbookError: If the sheet is missing or cannot be read
        """
        if name not in self.sheet_names():
            raise WorkbookError(f"Workbook {self.path} has no sheet '{name}'")

        try:
            # dtype=object keeps text cells such as "250" as strings
            df = self._excel_file.parse(name, header=None, dtype=object,
                                        keep_default_na=False)
        except Exception as e:
            raise WorkbookError(f"Couldn't read sheet '{name}' of {self.path}: {e}") from e

        return Sheet.from_values(name, df.values.tolist())

    def close(self):
        self._excel_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
