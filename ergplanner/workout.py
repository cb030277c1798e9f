"""
Workout module - Classes describing a workout read from one worksheet.

A workout is a header (FTP, output file name, description) followed by
intensity breakpoints. Consecutive breakpoints are paired into intervals
which carry the training load of the workout.
"""

from collections import namedtuple

from .constants import SUMMARY_NAME_WIDTH
from .utils import round_half_away

# Breakpoint of a workout: time in minutes, intensity as a fraction of FTP
DataPoint = namedtuple('DataPoint', ['time', 'intensity'])

# Segment between two breakpoints
Interval = namedtuple('Interval', ['duration', 'average_power', 'intensity_factor', 'training_stress'])


class Workout:
    """
    Represents a workout parsed from one worksheet.

    Data points and intervals are stored as tuples; the parser builds the
    workout once and nothing mutates it afterwards.
    """

    def __init__(self, threshold_power, file_name, description,
                 data_points=(), intervals=(), total_training_stress=0.0,
                 sheet_name=None):
        """
        Initialize a new workout.

        Args:
            threshold_power: Functional threshold power in watts
            file_name: Name of the ERG file to write
            description: Free text description
            data_points: Sequence of DataPoint in sheet order
            intervals: Sequence of Interval, one per pair of data points
            total_training_stress: Sum of the interval training stress
            sheet_name: Worksheet the workout was read from
        """
        self.threshold_power = threshold_power
        self.file_name = file_name
        self.description = description
        self.data_points = tuple(data_points)
        self.intervals = tuple(intervals)
        self.total_training_stress = total_training_stress
        self.sheet_name = sheet_name

    @property
    def duration(self):
        """Total duration in minutes covered by the intervals."""
        return sum(interval.duration for interval in self.intervals)

    def summary_line(self, width=SUMMARY_NAME_WIDTH):
        """
        One-line report of the workout.

        Args:
            width: Padding of the file name column

        Returns:
            "<file name> | TSS: <total> | <description>"
        """
        tss = round_half_away(self.total_training_stress)
        return f"{self.file_name:{width}} | TSS: {tss:5} | {self.description}"

    def __repr__(self):
        return (f"Workout(file_name={self.file_name!r}, "
                f"threshold_power={self.threshold_power!r}, "
                f"data_points={len(self.data_points)}, "
                f"tss={self.total_training_stress:.2f})")
