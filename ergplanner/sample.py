"""
Sample workbook generator.

Creates a workbook with the layout expected by the converter: a rider cover
sheet and a few workout sheets.
"""

import logging

import openpyxl
from openpyxl.styles import Font

from .constants import (RESERVED_SHEET, FTP_CELL, FILE_NAME_CELL,
                        DESCRIPTION_CELL, DATA_START_ROW)

# Sheet name -> (file name, description, [(minutes, intensity), ...])
SAMPLE_WORKOUTS = {
    'Endurance': ('endurance.erg', 'Endurance 60 min', [
        (0, 0.5), (10, 0.65),
        (10, 0.65), (50, 0.65),
        (50, 0.65), (60, 0.5),
    ]),
    'Sweet Spot': ('sweet_spot.erg', 'Sweet spot 3x10 min', [
        (0, 0.5), (10, 0.7),
        (10, 0.88), (20, 0.88),
        (20, 0.55), (25, 0.55),
        (25, 0.88), (35, 0.88),
        (35, 0.55), (40, 0.55),
        (40, 0.88), (50, 0.88),
        (50, 0.6), (60, 0.45),
    ]),
}


def auto_adjust_column_widths(worksheet):
    """
    Automatically adjust column widths based on content.

    Args:
        worksheet: openpyxl worksheet object
    """
    for column in worksheet.columns:
        max_length = 0
        column_letter = column[0].column_letter

        for cell in column:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))

        worksheet.column_dimensions[column_letter].width = min(max(max_length + 2, 8), 60)


def _write_workout_sheet(wb, sheet_name, ftp, file_name, description, points):
    sheet = wb.create_sheet(sheet_name)
    bold = Font(bold=True)

    header = [
        (FTP_CELL, 'FTP', ftp),
        (FILE_NAME_CELL, 'File name', file_name),
        (DESCRIPTION_CELL, 'Description', description),
    ]
    for (row, col), label, value in header:
        label_cell = sheet.cell(row=row + 1, column=col, value=label)
        label_cell.font = bold
        sheet.cell(row=row + 1, column=col + 1, value=value)

    sheet.cell(row=DATA_START_ROW, column=1, value='Minutes').font = bold
    sheet.cell(row=DATA_START_ROW, column=2, value='Intensity').font = bold

    for i, (minutes, intensity) in enumerate(points):
        sheet.cell(row=DATA_START_ROW + 1 + i, column=1, value=minutes)
        sheet.cell(row=DATA_START_ROW + 1 + i, column=2, value=intensity)

    auto_adjust_column_widths(sheet)


def create_sample_workbook(output_file='sample_workouts.xlsx', ftp=250):
    """
    Create a sample workbook with the expected structure.

    Args:
        output_file: Path for the output Excel file
        ftp: Threshold power written in every workout sheet

    Returns:
        Path to the created workbook
    """
    logging.info(f"Creating sample workbook: {output_file}")

    wb = openpyxl.Workbook()

    rider = wb.active
    rider.title = RESERVED_SHEET
    rider['A1'] = 'Rider'
    rider['A1'].font = Font(bold=True)
    rider['B1'] = 'Sample Rider'
    rider['A2'] = 'FTP'
    rider['A2'].font = Font(bold=True)
    rider['B2'] = ftp
    auto_adjust_column_widths(rider)

    for sheet_name, (file_name, description, points) in SAMPLE_WORKOUTS.items():
        _write_workout_sheet(wb, sheet_name, ftp, file_name, description, points)

    wb.save(output_file)
    logging.info(f"Sample workbook created with {len(SAMPLE_WORKOUTS)} workouts: {output_file}")
    return output_file
