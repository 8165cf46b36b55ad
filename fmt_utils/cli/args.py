"""Command-line argument parsing for fmt-utils."""

import argparse
from typing import List, Optional, Union

from fmt_utils.__version__ import __version__


def byte_count(text: str) -> Union[int, float, str]:
    """Convert a size argument to int or float, leaving other text untouched."""
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="fmt-utils",
        description="Format dates as YYYY-MM-DD and byte counts as human-readable sizes",
    )
    parser.add_argument("--version", action="version", version=f"fmt-utils {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on invalid input instead of printing a NaN placeholder",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--log-file", metavar="PATH", help="Also write debug logs to this file"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    date_parser = subparsers.add_parser("date", help="Format dates as YYYY-MM-DD")
    date_parser.add_argument(
        "values", nargs="+", metavar="DATE", help="ISO-8601 date or datetime"
    )

    size_parser = subparsers.add_parser("size", help="Format byte counts as B/KB/MB/GB")
    size_parser.add_argument(
        "values", nargs="+", type=byte_count, metavar="BYTES", help="Byte count"
    )

    return parser.parse_args(argv)
