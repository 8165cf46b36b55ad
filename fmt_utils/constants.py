"""Shared constants for fmt-utils."""

from typing import Tuple


# Byte size units, indexed by power of SIZE_BASE
SIZE_BASE = 1024
SIZE_UNITS: Tuple[str, ...] = ("B", "KB", "MB", "GB")
SIZE_PRECISION = 2

# Sentinels returned for invalid input in lenient mode
INVALID_DATE = "NaN-NaN-NaN"
INVALID_SIZE_VALUE = "NaN"

# Output modes supported by the CLI
OUTPUT_FORMATS = ["text", "json"]
