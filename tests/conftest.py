from __future__ import annotations

from pathlib import Path

import openpyxl
import pytest

from ergplanner.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep the user's ~/.erg_planner/config.yaml out of the tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Config, "_instance", None)
    yield home
    Config._instance = None


def workout_rows(ftp, file_name, description, points, trailing=None):
    """Rows of a workout sheet in the layout read by the parser."""
    rows = [
        ["FTP", ftp],
        ["File name", file_name],
        ["Description", description],
        [None, None],
    ]
    rows.extend([list(point) for point in points])
    if trailing:
        rows.extend(trailing)
    return rows


def build_workbook(path: Path, sheets: dict) -> Path:
    """Write a workbook with one sheet per (name -> rows) entry."""
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        sheet = wb.create_sheet(name)
        for r, row in enumerate(rows, start=1):
            for c, value in enumerate(row, start=1):
                if value is not None:
                    sheet.cell(row=r, column=c, value=value)
    wb.save(path)
    return path


@pytest.fixture
def make_workbook(tmp_path: Path):
    def _make(sheets: dict, name: str = "workouts.xlsx") -> Path:
        return build_workbook(tmp_path / name, sheets)

    return _make


@pytest.fixture(name="workout_rows")
def workout_rows_fixture():
    return workout_rows
