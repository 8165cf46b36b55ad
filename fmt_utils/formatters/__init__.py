"""Formatting utilities for fmt-utils.

This package provides the formatting functions, organized into modules:
- date: Calendar date formatting
- size: Byte count formatting
"""

# Date formatters
from .date import format_date, parse_date

# Size formatters
from .size import format_file_size

__all__ = [
    # Date
    "format_date",
    "parse_date",
    # Size
    "format_file_size",
]
