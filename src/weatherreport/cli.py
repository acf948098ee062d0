# connects the report file and settings to the interactive menu

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from . import __version__
from .config import LOG_LEVELS, get_settings
from .loader import ReportParseError, load_reports
from .menu import ReportMenu

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s:%(name)s - %(message)s"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-report",
        description="View, filter, convert and summarize weather reports from a file",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--file", default=None, help="report file (default: WEATHER_DATA_FILE or weather_data.txt)")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="stop at the first malformed line instead of skipping it")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="logging level (default: WEATHER_LOG_LEVEL or WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    settings = get_settings()

    # command line flags win over settings
    data_file = args.file or settings.data_file
    strict = settings.strict_parse if args.strict is None else args.strict
    logging.basicConfig(level=args.log_level or settings.log_level, format=LOG_FORMAT)

    try:
        reports = load_reports(data_file, strict=strict)
    except ReportParseError as exc:
        logger.error("Could not load reports: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Welcome to the Weather Report System!")
    ReportMenu().run(reports)
    return 0


if __name__ == "__main__":
    sys.exit(main())
