"""Process a file of comma separated trades and store the valid ones."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import IO, Sequence

from trade_processor import TradeProcessor
from trade_processor.db import DEFAULT_SQLITE_DB_PATH
from trade_processor.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["open_source", "parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Trade file to process; reads standard input when omitted or '-'",
    )
    parser.add_argument(
        "--db-url",
        dest="db_url",
        default=None,
        help=(
            "Database URL (sqlite:///, postgresql://, mysql://, mongodb://). "
            f"Defaults to the bundled SQLite file at {DEFAULT_SQLITE_DB_PATH}"
        ),
    )
    return parser.parse_args(argv)


def open_source(location: str) -> IO[bytes]:
    """Open ``location`` for reading, treating ``-`` as standard input."""

    if location == "-":
        # Leave the process-wide stdin descriptor open when the reader closes this.
        return open(sys.stdin.fileno(), "rb", closefd=False)
    return Path(location).open("rb")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    processor = TradeProcessor(args.db_url)
    result = processor.process_trades(open_source(args.input))
    LOGGER.info("Stored %s trades from %s", result.inserted, args.input)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
