from __future__ import annotations

import logging

import pytest

from ergplanner.exceptions import UnpairedDataPointError, WorkoutParseError
from ergplanner.parser import (ROW_DATA, ROW_END, ROW_MALFORMED, cell_label,
                               classify_row, parse_workout)
from ergplanner.spreadsheet import Cell, Sheet
from ergplanner.workout import DataPoint


def make_sheet(rows, name="Workout"):
    return Sheet.from_values(name, rows)


def test_parse_workout_reads_header_and_points(workout_rows) -> None:
    sheet = make_sheet(workout_rows(250, "test.erg", "Test",
                                    [(0, 0.5), (5, 0.5), (5, 0.8), (10, 0.8)]))

    workout = parse_workout(sheet)

    assert workout.threshold_power == 250
    assert workout.file_name == "test.erg"
    assert workout.description == "Test"
    assert workout.sheet_name == "Workout"
    assert workout.data_points == (DataPoint(0, 0.5), DataPoint(5, 0.5),
                                   DataPoint(5, 0.8), DataPoint(10, 0.8))
    assert len(workout.intervals) == 2
    assert workout.total_training_stress == pytest.approx(
        sum(i.training_stress for i in workout.intervals))
    assert workout.duration == 10


def test_parse_workout_stops_at_empty_row(workout_rows) -> None:
    sheet = make_sheet(workout_rows(200, "a.erg", "A", [(0, 0.5), (10, 0.5)],
                                    trailing=[[None, None], [20, 0.9], [30, 0.9]]))

    workout = parse_workout(sheet)

    assert len(workout.data_points) == 2


def test_parse_workout_skips_malformed_row(workout_rows, caplog) -> None:
    sheet = make_sheet(workout_rows(200, "a.erg", "A",
                                    [(0, 0.5), (5, "oops"), (10, 0.5)],
                                    trailing=[[None, None], [99, 1.0]]))

    with caplog.at_level(logging.WARNING):
        workout = parse_workout(sheet)

    assert workout.data_points == (DataPoint(0, 0.5), DataPoint(10, 0.5))
    assert "malformed row 6" in caplog.text
    assert "'Workout'" in caplog.text


def test_malformed_row_leaves_odd_sequence(workout_rows) -> None:
    sheet = make_sheet(workout_rows(200, "a.erg", "A",
                                    [(0, 0.5), (5, 0.5), ("x", 0.8), (10, 0.8)]))

    with pytest.raises(UnpairedDataPointError) as excinfo:
        parse_workout(sheet)

    assert excinfo.value.count == 3
    assert excinfo.value.sheet_name == "Workout"


def test_odd_number_of_points_is_fatal(workout_rows) -> None:
    sheet = make_sheet(workout_rows(200, "a.erg", "A", [(0, 0.5), (5, 0.5), (5, 0.8)]),
                       name="Odd")

    with pytest.raises(UnpairedDataPointError, match="Sheet 'Odd'"):
        parse_workout(sheet)


def test_time_going_backwards_is_fatal(workout_rows) -> None:
    sheet = make_sheet(workout_rows(200, "a.erg", "A", [(10, 0.5), (5, 0.5)]))

    with pytest.raises(WorkoutParseError, match="backwards at row 6"):
        parse_workout(sheet)


def test_wrong_header_type_warns_and_zero_ftp_fails(workout_rows, caplog) -> None:
    sheet = make_sheet(workout_rows("two fifty", "a.erg", "A", [(0, 0.5), (5, 0.5)]))

    with caplog.at_level(logging.WARNING):
        with pytest.raises(WorkoutParseError, match="threshold power in B1"):
            parse_workout(sheet)

    assert "expected number in cell B1" in caplog.text


def test_missing_file_name_fails(workout_rows) -> None:
    sheet = make_sheet(workout_rows(200, 42, "A", [(0, 0.5), (5, 0.5)]))

    with pytest.raises(WorkoutParseError, match="no output file name in B2"):
        parse_workout(sheet)


def test_non_string_description_defaults_to_empty(workout_rows, caplog) -> None:
    sheet = make_sheet(workout_rows(200, "a.erg", 3.5, [(0, 0.5), (5, 0.5)]))

    with caplog.at_level(logging.WARNING):
        workout = parse_workout(sheet)

    assert workout.description == ""
    assert "cell B3" in caplog.text


def test_sheet_without_data_has_no_intervals(workout_rows) -> None:
    workout = parse_workout(make_sheet(workout_rows(200, "a.erg", "A", [])))

    assert workout.data_points == ()
    assert workout.intervals == ()
    assert workout.total_training_stress == 0


def test_classify_row() -> None:
    def cells(*values):
        return [Cell.from_value(v) for v in values]

    assert classify_row(cells(0, 0.5)) == ROW_DATA
    assert classify_row(cells(0, 0.5, None)) == ROW_DATA
    assert classify_row(cells(None, None)) == ROW_END
    assert classify_row(cells(None, None, "notes")) == ROW_END
    assert classify_row([]) == ROW_END
    assert classify_row(cells(0, "x")) == ROW_MALFORMED
    assert classify_row(cells(None, 0.5)) == ROW_MALFORMED
    assert classify_row(cells(0, 0.5, "note")) == ROW_MALFORMED
    assert classify_row(cells(0)) == ROW_MALFORMED
    assert classify_row(cells(True, 0.5)) == ROW_MALFORMED


def test_cell_label() -> None:
    assert cell_label(0, 1) == "B1"
    assert cell_label(4, 0) == "A5"
    assert cell_label(9, 26) == "AA10"


def test_note_beside_empty_row_still_ends_data(workout_rows, caplog) -> None:
    sheet = make_sheet(workout_rows(200, "a.erg", "A", [(0, 0.5), (10, 0.5)],
                                    trailing=[[None, None, "notes"], [20, 0.9]]))

    with caplog.at_level(logging.WARNING):
        workout = parse_workout(sheet)

    assert workout.data_points == (DataPoint(0, 0.5), DataPoint(10, 0.5))
    assert "malformed" not in caplog.text
