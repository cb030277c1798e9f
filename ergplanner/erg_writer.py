# File: ergplanner/erg_writer.py

"""
ERG file writer.

An ERG file is a plain-text course: a header naming the workout and its FTP
followed by one "<minutes>\\t<watts>" line per breakpoint.
"""

import os
import logging

from .constants import ERG_VERSION, ERG_UNITS, ERG_COLUMNS
from .exceptions import ErgWriteError
from .utils import atomic_write, format_number, round_half_away


def format_erg(workout):
    """
    Render a workout as the text of an ERG file.

    Args:
        workout: Workout to render

    Returns:
        The file content, every line terminated by '\\n'
    """
    lines = [
        '[COURSE HEADER]',
        f'VERSION = {ERG_VERSION}',
        f'UNITS = {ERG_UNITS}',
        f'DESCRIPTION = {workout.description}',
        f'FILE NAME = {workout.file_name}',
        f'FTP = {format_number(workout.threshold_power)}',
        ERG_COLUMNS,
        '[END COURSE HEADER]',
        '[COURSE DATA]',
    ]

    for point in workout.data_points:
        watts = round_half_away(point.intensity * workout.threshold_power)
        lines.append(f'{point.time:.2f}\t{watts}')

    lines.append('[END COURSE DATA]')
    return '\n'.join(lines) + '\n'


def erg_path(workout, output_dir='.'):
    """Path of the ERG file for a workout inside output_dir."""
    return os.path.join(output_dir, workout.file_name)


def write_erg_file(workout, output_dir='.'):
    """
    Write the ERG file of a workout.

    The file is written atomically: on failure no partial file is left and
    an existing file with the same name is untouched.

    Args:
        workout: Workout to write
        output_dir: Directory the file is created in

    Returns:
        Path of the written file

    Raises:
        ErgWriteError: If the file cannot be created or written
    """
    path = erg_path(workout, output_dir)
    content = format_erg(workout)

    try:
        with atomic_write(path) as f:
            f.write(content)
    except OSError as e:
        raise ErgWriteError(workout.sheet_name, path, e) from e

    logging.info(f"Sheet '{workout.sheet_name}': wrote {len(workout.data_points)} "
                 f"data points to {path}")
    return path
