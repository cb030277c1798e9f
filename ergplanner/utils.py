import os
import math
import stat
import tempfile
from contextlib import contextmanager


def _target_mode(target_path):
    """Mode of the existing target, or 0666 masked by the process umask."""
    try:
        return stat.S_IMODE(os.stat(target_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@contextmanager
def atomic_write(target_path, encoding='utf-8'):
    """Context manager for atomic text file writes.

    Writes to a temp file in the target directory first, then moves it
    over the target. If an exception occurs the temp file is removed and
    the target is left unchanged.

    Args:
        target_path: Final destination path.
        encoding: Text encoding of the file.

    Yields:
        A text file object opened for writing with '\\n' line endings.
    """
    target_dir = os.path.dirname(os.path.abspath(target_path))
    os.makedirs(target_dir, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(
        dir=target_dir,
        prefix=f'.{os.path.basename(target_path)}.',
        suffix='.tmp'
    )

    try:
        with os.fdopen(fd, 'w', encoding=encoding, newline='\n') as f:
            yield f
        # mkstemp creates the file 0600; give it the mode a plain open() would
        os.chmod(temp_path, _target_mode(target_path))
        os.replace(temp_path, target_path)
    except BaseException:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


def format_number(value):
    """Formats a number without a trailing '.0' when it is integral.

    Args:
        value: The number to format (int or float).

    Returns:
        "250" for 250.0, "262.5" for 262.5.

    Raises:
        TypeError: If the input is not a number (int or float).
    """
    if not isinstance(value, (int, float)):
        raise TypeError("Input must be a number.")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def round_half_away(value):
    """Rounds a number to the nearest integer, halves away from zero.

    Args:
        value: The number to round (int or float).

    Returns:
        The rounded value as an int (e.g., 2.5 -> 3, -2.5 -> -3).
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
