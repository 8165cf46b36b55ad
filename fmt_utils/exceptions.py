"""Custom exceptions for fmt-utils"""

from typing import Any, Optional


class FmtUtilsError(Exception):
    """Base exception for all fmt-utils errors."""
    pass


class InvalidInputError(FmtUtilsError):
    """Exception raised when a formatter receives a value it cannot format."""

    def __init__(self, formatter: str, value: Any, message: Optional[str] = None):
        self.formatter = formatter
        self.value = value
        self.message = message

        error_msg = f"Cannot {formatter} {value!r}"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
