"""Command-line entry point for fmt-utils"""

import math
import sys
from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape

from fmt_utils.cli.args import parse_args
from fmt_utils.config import Config
from fmt_utils.exceptions import FmtUtilsError
from fmt_utils.formatters import format_date, format_file_size
from fmt_utils.logging_config import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)

FORMATTERS = {
    "date": format_date,
    "size": format_file_size,
}


def _json_input(value: Any) -> Any:
    """Keep numbers as numbers, but spell out NaN and infinities, which JSON lacks."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        config = Config.from_dict(
            {**vars(parsed_args), "output": "json" if parsed_args.json else "text"}
        )
        setup_logging(verbose=config.verbose, debug=config.debug, log_file=config.log_file)
        logger.debug(f"Configuration: {config.to_dict()}")

        formatter = FORMATTERS[parsed_args.command]
        results = [
            {"input": _json_input(value), "output": formatter(value, strict=config.strict)}
            for value in parsed_args.values
        ]
        logger.info(f"Formatted {len(results)} {parsed_args.command} value(s)")

        if config.output == "json":
            console.print_json(data=results)
        else:
            for result in results:
                console.print(result["output"], markup=False, highlight=False, soft_wrap=True)

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except (FmtUtilsError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
