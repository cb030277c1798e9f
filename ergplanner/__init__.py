"""
Erg Planner - convert workout sheets of an Excel workbook to ERG files.
"""

from .constants import VERSION

__version__ = VERSION
