"""
Workbook to ERG conversion.

Every worksheet except the reserved rider sheet is parsed into a workout and
written as an ERG file. Sheets are handled in name order, one at a time; a
sheet that fails is reported and the remaining sheets are still converted.
"""

import os
import logging

from .config import get_config
from .erg_writer import write_erg_file
from .exceptions import (WorkbookError, WorkoutParseError, ErgWriteError,
                         DuplicateFileNameError)
from .parser import parse_workout
from .spreadsheet import Workbook

# Errors that fail a single sheet without stopping the run
SHEET_ERRORS = (WorkbookError, WorkoutParseError, DuplicateFileNameError, ErgWriteError)


class SheetResult:
    """Outcome of converting one worksheet."""

    def __init__(self, sheet_name, workout=None, output_path=None, error=None):
        self.sheet_name = sheet_name
        self.workout = workout
        self.output_path = output_path
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        status = 'ok' if self.ok else f'error={self.error}'
        return f"SheetResult({self.sheet_name!r}, {status})"


def workout_sheet_names(sheet_names, reserved_sheet):
    """
    Sort sheet names and drop the reserved sheet.

    Args:
        sheet_names: Names as listed in the workbook
        reserved_sheet: Name of the sheet that is not a workout

    Returns:
        Sorted list of sheet names to convert
    """
    return [name for name in sorted(sheet_names) if name != reserved_sheet]


def convert_sheet(workbook, sheet_name, output_dir, claimed_files):
    """
    Convert one worksheet.

    Args:
        workbook: Open Workbook
        sheet_name: Sheet to convert
        output_dir: Directory for the ERG file
        claimed_files: Dict of normalized output path -> sheet name, updated
            when the sheet is written

    Returns:
        SheetResult
    """
    workout = None
    try:
        workout = parse_workout(workbook.sheet(sheet_name), sheet_name)

        key = os.path.normcase(os.path.abspath(os.path.join(output_dir, workout.file_name)))
        if key in claimed_files:
            raise DuplicateFileNameError(sheet_name, workout.file_name, claimed_files[key])

        output_path = write_erg_file(workout, output_dir)
        claimed_files[key] = sheet_name
    except SHEET_ERRORS as e:
        logging.error(f"Failed to convert sheet '{sheet_name}': {e}")
        return SheetResult(sheet_name, workout=workout, error=e)

    return SheetResult(sheet_name, workout=workout, output_path=output_path)


def convert_workbook(path, reserved_sheet=None, output_dir=None):
    """
    Convert every workout sheet of a workbook to an ERG file.

    Args:
        path: Path of the workbook
        reserved_sheet: Sheet to skip, defaults to the configured one
        output_dir: Directory for ERG files, defaults to the configured one

    Returns:
        List of SheetResult in processing order

    Raises:
        WorkbookError: If the workbook cannot be opened or its sheets listed
    """
    config = get_config()
    if reserved_sheet is None:
        reserved_sheet = config.get_reserved_sheet()
    if output_dir is None:
        output_dir = config.get_output_dir()

    results = []
    claimed_files = {}

    with Workbook.open(path) as workbook:
        sheet_names = workout_sheet_names(workbook.sheet_names(), reserved_sheet)
        logging.info(f"Converting {len(sheet_names)} sheets from {path}")

        for sheet_name in sheet_names:
            results.append(convert_sheet(workbook, sheet_name, output_dir, claimed_files))

    return results


def report(results, width=None):
    """
    Print one line per sheet: the workout summary, or the failure.

    Args:
        results: List of SheetResult
        width: Padding of the file name column, defaults to the configured one
    """
    if width is None:
        width = get_config().get_summary_name_width()

    for result in results:
        if result.ok:
            print(result.workout.summary_line(width))
        else:
            print(f"{result.sheet_name:{width}} | FAILED | {result.error}")
