"""
Command-line ledger analyzer.

Reads a ledger database, prints the graph listing and the statistics report.

Usage:
  python scripts/ledger_stats.py database1.txt
  python scripts/ledger_stats.py --no-render
"""

import argparse
import logging
import os
import sys

# Resolve project imports no matter where the script is run from.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import LEDGER_DATABASE_PATH, LOG_LEVEL
from core.errors import LedgerError
from core.output.stats_formatter import format_stats
from services.processing_pipeline import LedgerStatsService

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Compute Tangle ledger statistics.")
    parser.add_argument(
        "path",
        nargs="?",
        default=LEDGER_DATABASE_PATH,
        help=f"Ledger database file (default: {LEDGER_DATABASE_PATH}).",
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Skip the per-vertex graph listing.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")

    if not os.path.exists(args.path):
        print(f"Error: file not found: {args.path}")
        return 1

    try:
        graph, stats = LedgerStatsService().analyze_file(args.path)
    except LedgerError as e:
        logger.error("Analysis failed: %s", e)
        print(f"Error: {e}")
        return 1

    if not args.no_render:
        print(graph.render())
        print()
    print(format_stats(stats))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
