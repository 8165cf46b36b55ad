"""Date formatting utilities."""

import math
from datetime import date, datetime
from typing import Any

from fmt_utils.constants import INVALID_DATE
from fmt_utils.exceptions import InvalidInputError
from fmt_utils.logging_config import get_logger

logger = get_logger(__name__)


def parse_date(value: Any) -> date:
    """
    Convert a date-like value to a calendar date in local time.

    Args:
        value: datetime, date, ISO-8601 string or Unix timestamp in seconds

    Returns:
        The local calendar date

    Raises:
        InvalidInputError: If the value does not describe a valid date
    """
    if isinstance(value, datetime):
        # Aware values are moved to the local calendar, naive ones already are
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, bool):
        raise InvalidInputError("parse date", value, "booleans are not timestamps")

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidInputError("parse date", value, "timestamp is not finite")
        try:
            return datetime.fromtimestamp(value).date()
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInputError("parse date", value, str(e)) from e

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidInputError("parse date", value, "empty string")
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidInputError("parse date", value, str(e)) from e
        return parse_date(parsed)

    raise InvalidInputError("parse date", value, f"unsupported type {type(value).__name__}")


def format_date(value: Any, strict: bool = False) -> str:
    """
    Format a date-like value as a YYYY-MM-DD string.

    Invalid input yields "NaN-NaN-NaN" unless strict is set.

    Args:
        value: datetime, date, ISO-8601 string or Unix timestamp in seconds
        strict: Raise InvalidInputError instead of returning the sentinel

    Returns:
        Formatted date string
    """
    try:
        parsed = parse_date(value)
    except InvalidInputError as e:
        if strict:
            raise
        logger.debug(f"Falling back to {INVALID_DATE}: {e}")
        return INVALID_DATE

    # strftime does not zero-pad years below 1000 on every platform
    return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"
