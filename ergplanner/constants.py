"""
Constants module for Erg Planner.

This module defines constants used throughout the Erg Planner application.
"""

# Version information
VERSION = '1.0.0'

# Worksheet that holds rider details instead of a workout
RESERVED_SHEET = 'Rider'

# Header cells of a workout sheet (zero-based row, column)
FTP_CELL = (0, 1)
FILE_NAME_CELL = (1, 1)
DESCRIPTION_CELL = (2, 1)

# First row of (time, intensity) pairs, after the header block
DATA_START_ROW = 4

# Columns holding time (minutes) and intensity (fraction of FTP)
TIME_COLUMN = 0
INTENSITY_COLUMN = 1

# File extensions
EXCEL_EXTENSIONS = ['.xlsx', '.xlsm']

# ERG course header
ERG_VERSION = 2
ERG_UNITS = 'ENGLISH'
ERG_COLUMNS = 'MINUTES WATTS'

# Width of the file name column in the summary report
SUMMARY_NAME_WIDTH = 24
