"""
Training load calculations for workout intervals.
"""

from .workout import Interval


def compute_interval(p1, p2, threshold_power):
    """
    Compute the metrics of the interval between two data points.

    The power between the two breakpoints is taken as a linear ramp, so the
    average power is the mean of both intensities scaled by FTP. Training
    stress applies the TSS formula to that mean intensity:
    hours * IF^2 * 100.

    Args:
        p1: First DataPoint
        p2: Second DataPoint, not earlier than p1
        threshold_power: FTP in watts

    Returns:
        Interval

    Raises:
        ValueError: If threshold_power is not positive
    """
    if threshold_power <= 0:
        raise ValueError(f"Threshold power must be positive, got {threshold_power}")

    duration = p2.time - p1.time
    average_power = (p1.intensity + p2.intensity) / 2 * threshold_power
    intensity_factor = average_power / threshold_power
    training_stress = (duration / 60) * intensity_factor ** 2 * 100

    return Interval(duration, average_power, intensity_factor, training_stress)


def pair_intervals(data_points, threshold_power):
    """
    Build one interval from each pair of data points (0,1), (2,3), ...

    Args:
        data_points: Sequence of DataPoint of even length
        threshold_power: FTP in watts

    Returns:
        List of Interval, half as long as data_points

    Raises:
        ValueError: If data_points has odd length
    """
    if len(data_points) % 2 != 0:
        raise ValueError(f"Cannot pair {len(data_points)} data points into intervals")

    return [compute_interval(data_points[i], data_points[i + 1], threshold_power)
            for i in range(0, len(data_points), 2)]


def total_training_stress(intervals):
    """Sum the training stress of a sequence of intervals."""
    return sum(interval.training_stress for interval in intervals)
