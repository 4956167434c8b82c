"""
Command-line entry point.

    actionlog2csv <log_dir> <output_csv> [workers]

Exits 0 when the CSV was written, 1 when the run failed (no file written),
and 2 on invalid arguments.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from actionlog.core.config import config
from actionlog.core.exceptions import ActionLogError
from actionlog.core.logging_config import setup_logging
from actionlog.pipeline import run


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"worker count must be a positive integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"worker count must be a positive integer: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="actionlog2csv",
        description="Extract firewall connection events from a log tree into a deduplicated CSV",
    )
    parser.add_argument("log_dir", help="Directory of log files to scan recursively")
    parser.add_argument("output", help="CSV file to write")
    parser.add_argument(
        "workers",
        nargs="?",
        type=_positive_int,
        default=config.pipeline.workers,
        help=f"Number of concurrent workers (default {config.pipeline.workers})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging()

    try:
        summary = run(args.log_dir, args.output, args.workers)
    except ActionLogError as e:
        logger.error(f"Run failed, no output written: {e}")
        return 1

    logger.info(
        f"Done. {summary.records} records from {summary.files_processed} files "
        f"written to {summary.output}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
