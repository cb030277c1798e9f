"""
Worksheet to Workout parser.

A workout sheet has a fixed header block (FTP, file name, description in
column B of the first three rows) followed, from row 5, by rows of
(time in minutes, intensity as a fraction of FTP). A row whose time and
intensity cells are both empty, or the end of the sheet, ends the data.
"""

import logging

from .constants import (FTP_CELL, FILE_NAME_CELL, DESCRIPTION_CELL,
                        DATA_START_ROW, TIME_COLUMN, INTENSITY_COLUMN)
from .exceptions import WorkoutParseError, UnpairedDataPointError
from .metrics import pair_intervals, total_training_stress
from .spreadsheet import CellKind, EMPTY_CELL
from .workout import DataPoint, Workout

# Row classification results
ROW_DATA = 'data'
ROW_END = 'end'
ROW_MALFORMED = 'malformed'


def cell_label(row, col):
    """Spreadsheet style label of a zero-based position, e.g. (0, 1) -> 'B1'."""
    letters = ''
    col += 1
    while col:
        col, remainder = divmod(col - 1, 26)
        letters = chr(ord('A') + remainder) + letters
    return f"{letters}{row + 1}"


def _header_value(sheet, sheet_name, position, kind, default):
    cell = sheet.get_value(*position)
    if cell.kind is kind:
        return cell.value

    logging.warning(f"Sheet '{sheet_name}': expected {kind.value} in cell "
                    f"{cell_label(*position)}, found {cell.kind.value}; using {default!r}")
    return default


def _cell_at(cells, index):
    return cells[index] if index < len(cells) else EMPTY_CELL


def classify_row(cells):
    """
    Classify a data row.

    Args:
        cells: List of Cell for the row

    Returns:
        ROW_END when the time and intensity cells are both empty, whatever
        the other columns hold; ROW_DATA when both are numbers and nothing
        else is filled in; ROW_MALFORMED otherwise
    """
    time_cell = _cell_at(cells, TIME_COLUMN)
    intensity_cell = _cell_at(cells, INTENSITY_COLUMN)

    if time_cell.is_empty and intensity_cell.is_empty:
        return ROW_END

    extra = [cell for i, cell in enumerate(cells)
             if i not in (TIME_COLUMN, INTENSITY_COLUMN) and not cell.is_empty]
    if extra:
        return ROW_MALFORMED

    if time_cell.is_number and intensity_cell.is_number:
        return ROW_DATA

    return ROW_MALFORMED


def read_data_points(sheet, sheet_name):
    """
    Read the (time, intensity) rows of a workout sheet.

    Malformed rows are logged and skipped. Time must never go backwards.

    Args:
        sheet: Sheet to read
        sheet_name: Name used in log and error messages

    Returns:
        List of DataPoint in sheet order

    Raises:
        WorkoutParseError: If a data point is earlier than the previous one
    """
    data_points = []

    for offset, cells in enumerate(sheet.rows(DATA_START_ROW)):
        row_number = DATA_START_ROW + offset + 1
        row_type = classify_row(cells)

        if row_type == ROW_END:
            logging.debug(f"Sheet '{sheet_name}': end of data at row {row_number}")
            break

        if row_type == ROW_MALFORMED:
            values = ', '.join(repr(cell.value) for cell in cells)
            logging.warning(f"Sheet '{sheet_name}': skipping malformed row {row_number}: [{values}]")
            continue

        point = DataPoint(cells[TIME_COLUMN].value, cells[INTENSITY_COLUMN].value)
        if data_points and point.time < data_points[-1].time:
            raise WorkoutParseError(
                sheet_name,
                f"time goes backwards at row {row_number} "
                f"({data_points[-1].time:g} -> {point.time:g} minutes)")
        data_points.append(point)

    return data_points


def parse_workout(sheet, sheet_name=None):
    """
    Parse a worksheet into a Workout.

    Args:
        sheet: Sheet holding one workout
        sheet_name: Name used in messages, defaults to sheet.name

    Returns:
        Workout with data points, intervals and total training stress

    Raises:
        WorkoutParseError: If the FTP is missing, the file name is empty or
            the data is not a valid sequence of intervals
        UnpairedDataPointError: If the number of data points is odd
    """
    sheet_name = sheet_name or sheet.name

    threshold_power = _header_value(sheet, sheet_name, FTP_CELL, CellKind.NUMBER, 0.0)
    file_name = _header_value(sheet, sheet_name, FILE_NAME_CELL, CellKind.STRING, '')
    description = _header_value(sheet, sheet_name, DESCRIPTION_CELL, CellKind.STRING, '')

    if threshold_power <= 0:
        raise WorkoutParseError(
            sheet_name, f"threshold power in {cell_label(*FTP_CELL)} must be positive")
    if not file_name.strip():
        raise WorkoutParseError(
            sheet_name, f"no output file name in {cell_label(*FILE_NAME_CELL)}")

    data_points = read_data_points(sheet, sheet_name)
    if len(data_points) % 2 != 0:
        raise UnpairedDataPointError(sheet_name, len(data_points))

    intervals = pair_intervals(data_points, threshold_power)

    workout = Workout(
        threshold_power,
        file_name,
        description,
        data_points=data_points,
        intervals=intervals,
        total_training_stress=total_training_stress(intervals),
        sheet_name=sheet_name,
    )
    logging.debug(f"Sheet '{sheet_name}': {len(data_points)} data points, "
                  f"{len(intervals)} intervals, {workout.duration:g} minutes")
    return workout
