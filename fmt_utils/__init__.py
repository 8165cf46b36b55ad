"""
fmt-utils - Small formatting helpers for dates and file sizes
"""

from .__version__ import __version__
from .formatters import format_date, format_file_size, parse_date

__all__ = ["format_date", "format_file_size", "parse_date", "__version__"]
