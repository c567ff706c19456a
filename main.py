# main.py

"""Entry point for bazaar_feed: snapshot the bazaar feed and export CSV."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging

logger = logging.getLogger("bazaar_feed.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bazaar_feed",
        description=(
            "Snapshot the bazaar price feed to JSON and export the "
            "newest snapshot as CSV."
        ),
    )
    stage = parser.add_mutually_exclusive_group()
    stage.add_argument(
        "--fetch-only",
        action="store_true",
        default=False,
        dest="fetch_only",
        help="Fetch and store a snapshot without exporting CSV.",
    )
    stage.add_argument(
        "--export-only",
        action="store_true",
        default=False,
        dest="export_only",
        help="Export the newest stored snapshot without fetching.",
    )
    parser.add_argument(
        "-r",
        "--raw-dir",
        default=None,
        dest="raw_dir",
        help="Snapshot directory (default: raw/).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="CSV output file (default: bazaar.csv).",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Override the feed URL.",
    )
    parser.add_argument(
        "--sorted",
        action="store_true",
        default=False,
        dest="sort_rows",
        help="Sort CSV rows by product id instead of feed order.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Echo INFO log lines to the terminal.",
    )
    return parser


def main() -> None:
    """Parse arguments and run the requested pipeline stages."""
    parser = _build_parser()
    args = parser.parse_args()

    log_file = setup_logging(verbose=args.verbose)
    logger.info("bazaar_feed starting, log file: %s", log_file)

    from src.cli.runner import run_pipeline

    exit_code = run_pipeline(
        fetch=not args.export_only,
        export=not args.fetch_only,
        raw_dir=args.raw_dir,
        output=args.output,
        url=args.url,
        sort_rows=args.sort_rows,
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
