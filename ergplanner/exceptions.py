"""
Exceptions raised by Erg Planner.

Sheet-level errors (parse, duplicate name, write) are caught by the
converter and reported per sheet; workbook-level errors abort the run.
"""


class ErgPlannerError(Exception):
    """Base class for all Erg Planner errors."""


class WorkbookError(ErgPlannerError):
    """Raised when a workbook or one of its sheets cannot be read."""


class WorkoutParseError(ErgPlannerError, ValueError):
    """Raised when a worksheet does not describe a valid workout."""

    def __init__(self, sheet_name, message):
        super().__init__(f"Sheet '{sheet_name}': {message}")
        self.sheet_name = sheet_name


class UnpairedDataPointError(WorkoutParseError):
    """Raised when a worksheet holds an odd number of data points."""

    def __init__(self, sheet_name, count):
        super().__init__(
            sheet_name,
            f"{count} data points cannot be paired into intervals "
            f"(trailing point or missing final point)")
        self.count = count


class DuplicateFileNameError(ErgPlannerError):
    """Raised when two sheets target the same output file."""

    def __init__(self, sheet_name, file_name, first_sheet):
        super().__init__(
            f"Sheet '{sheet_name}': file name '{file_name}' is already "
            f"used by sheet '{first_sheet}'")
        self.sheet_name = sheet_name
        self.file_name = file_name
        self.first_sheet = first_sheet


class ErgWriteError(ErgPlannerError):
    """Raised when an ERG file cannot be written."""

    def __init__(self, sheet_name, path, error):
        super().__init__(f"Sheet '{sheet_name}': could not write {path}: {error}")
        self.sheet_name = sheet_name
        self.path = path
