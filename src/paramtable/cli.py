"""Command-line entry point.

Usage:
    paramtable                                   # info.json -> info.md, source order
    paramtable --in params.json --sort ascending
    paramtable --in params.json --out docs/params.md --raw-html
    paramtable --in params.json --key-order upstream.json   # reuse another document's key order
"""

import argparse
import logging
import sys

from paramtable.config import DEFAULT_INPUT_FILE, DEFAULT_LOG_LEVEL, DEFAULT_SORT, default_output_path
from paramtable.errors import OutputError, ParamTableError
from paramtable.ordering import KeyOrderIndex, SortMode
from paramtable.pipeline import run

logger = logging.getLogger(__name__)

SORT_CHOICES = [mode.value for mode in SortMode]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the converter."""
    parser = argparse.ArgumentParser(
        prog="paramtable",
        description="Render a nested JSON parameter document as an HTML table with merged cells",
    )
    parser.add_argument("--in", dest="input", default=DEFAULT_INPUT_FILE, help=f"Input JSON file (default: {DEFAULT_INPUT_FILE})")
    parser.add_argument("--out", dest="output", default=None, help="Output file (default: input path with a .md extension)")
    parser.add_argument("--sort", choices=SORT_CHOICES, default=DEFAULT_SORT, help=f"Key order (default: {DEFAULT_SORT})")
    parser.add_argument("--raw-html", action="store_true", help="Pass keys and text through without HTML escaping")
    parser.add_argument("--key-order", default=None, help="JSON file whose key order is used in source-order mode (default: the input document itself)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=DEFAULT_LOG_LEVEL, help=f"Logging level (default: {DEFAULT_LOG_LEVEL})")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the conversion, and return a process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse does not check choices against a default taken from the environment
    if args.sort not in SORT_CHOICES:
        parser.error(f"argument --sort: invalid choice: '{args.sort}' (choose from {', '.join(SORT_CHOICES)})")
    if args.log_level not in LOG_LEVELS:
        parser.error(f"argument --log-level: invalid choice: '{args.log_level}' (choose from {', '.join(LOG_LEVELS)})")

    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    output = args.output or default_output_path(args.input)
    try:
        index = KeyOrderIndex.from_file(args.key_order) if args.key_order else None
        written = run(args.input, output, mode=SortMode(args.sort), index=index, escape=not args.raw_html)
    except OutputError as exc:
        logger.error("%s", exc)
        # Surface the computed table so it is not lost
        sys.stdout.write(exc.markup)
        return 1
    except ParamTableError as exc:
        logger.error("%s", exc)
        return 1

    print(f"Created parameter table: {written}")
    return 0
