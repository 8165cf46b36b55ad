"""Byte count formatting utilities."""

import math
from fractions import Fraction
from numbers import Rational, Real
from typing import Any

from fmt_utils.constants import (
    INVALID_SIZE_VALUE,
    SIZE_BASE,
    SIZE_PRECISION,
    SIZE_UNITS,
)
from fmt_utils.exceptions import InvalidInputError
from fmt_utils.logging_config import get_logger

logger = get_logger(__name__)


def _validate_byte_count(num_bytes: Any, allow_negative: bool) -> None:
    """Raise InvalidInputError unless num_bytes is a usable byte count."""
    if isinstance(num_bytes, bool) or not isinstance(num_bytes, Real):
        raise InvalidInputError(
            "format file size", num_bytes, f"expected a number, got {type(num_bytes).__name__}"
        )
    # Rationals are always finite and may be too large for a float
    if not isinstance(num_bytes, Rational) and not math.isfinite(num_bytes):
        raise InvalidInputError("format file size", num_bytes, "byte count is not finite")
    if num_bytes < 0 and not allow_negative:
        raise InvalidInputError("format file size", num_bytes, "byte count is negative")


def _round_half_up(value: Fraction, places: int) -> str:
    """Render a non-negative value with at most `places` decimals, ties rounded up."""
    scale = 10 ** places
    scaled = math.floor(value * scale + Fraction(1, 2))
    whole, fraction = divmod(scaled, scale)
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{places}d}".rstrip("0")


def format_file_size(num_bytes: Any, strict: bool = False) -> str:
    """
    Format a byte count as a human-readable size such as ``1.5 KB``.

    Values are scaled by powers of 1024 up to GB and rounded to two
    decimals with trailing zeros removed. Larger counts stay in GB and
    negative counts keep their sign. Non-numeric or non-finite input
    yields "NaN B" unless strict is set.

    Args:
        num_bytes: Byte count
        strict: Raise InvalidInputError on non-numeric, non-finite or negative input

    Returns:
        Formatted size string
    """
    try:
        _validate_byte_count(num_bytes, allow_negative=not strict)
    except InvalidInputError as e:
        if strict:
            raise
        logger.debug(f"Falling back to {INVALID_SIZE_VALUE} {SIZE_UNITS[0]}: {e}")
        return f"{INVALID_SIZE_VALUE} {SIZE_UNITS[0]}"

    if num_bytes == 0:
        return f"0 {SIZE_UNITS[0]}"

    # Exact arithmetic: no float overflow and ties are seen as ties
    if isinstance(num_bytes, (Rational, float)):
        value = abs(Fraction(num_bytes))
    else:
        value = abs(Fraction(float(num_bytes)))
    index = 0
    while value >= SIZE_BASE and index < len(SIZE_UNITS) - 1:
        value /= SIZE_BASE
        index += 1

    scaled = _round_half_up(value, SIZE_PRECISION)
    sign = "-" if num_bytes < 0 and scaled != "0" else ""
    return f"{sign}{scaled} {SIZE_UNITS[index]}"
