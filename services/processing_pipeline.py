"""
Processing Pipeline — Ledger Analysis Orchestrator.

Coordinates the full analysis:
   1. Parse database text into (N, records)
   2. Build the Tangle graph
   3. Compute the five ledger statistics
   4. Compute structural diagnostics
   5. Format JSON output

Any failure aborts the run; no partial statistics are returned.
"""

import contextlib
import logging
import time
from typing import Any, Dict, Sequence, Tuple

from app.config import MAX_TRANSACTIONS, RENDER_MAX_VERTICES
from core.errors import InvalidArgument
from core.graph.graph_builder import Record, build_graph
from core.graph.graph_metrics import compute_graph_summary
from core.graph.tangle_graph import TangleGraph
from core.output.stats_formatter import format_output
from core.stats.ledger_stats import compute_ledger_stats
from utils.loader import load_database, parse_database

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Stage [%s] took %.4f seconds", label, elapsed)


class LedgerStatsService:
    """Builds the transaction graph and derives its statistics."""

    def __init__(self, max_transactions: int = MAX_TRANSACTIONS):
        self.max_transactions = max_transactions

    def analyze(
        self, transaction_count: int, records: Sequence[Record]
    ) -> Tuple[TangleGraph, Dict[str, float]]:
        """Return the finished graph and its statistics."""
        if transaction_count > self.max_transactions:
            raise InvalidArgument(
                f"{transaction_count} transactions exceed the limit of {self.max_transactions}"
            )

        with log_timer("build_graph"):
            graph = build_graph(transaction_count, records)

        with log_timer("ledger_stats"):
            stats = compute_ledger_stats(graph)

        return graph, stats

    def process(
        self,
        transaction_count: int,
        records: Sequence[Record],
        render: bool = False,
    ) -> Dict[str, Any]:
        """
        Run the full pipeline on parsed records.

        With render=True the text listing is added under "render" (None
        when the graph exceeds RENDER_MAX_VERTICES).

        Returns:
            JSON-compatible dict with statistics, graph, summary
        """
        start_time = time.time()
        graph, stats = self.analyze(transaction_count, records)

        with log_timer("graph_summary"):
            graph_summary = compute_graph_summary(graph)

        result = format_output(stats, graph_summary, time.time() - start_time)
        if render:
            if graph.vertex_count() <= RENDER_MAX_VERTICES:
                result["render"] = graph.render()
            else:
                result["render"] = None
                logger.info("Skipping render for %d vertices.", graph.vertex_count())

        logger.info(
            "Analyzed %d transactions: %s",
            graph.transaction_count(),
            result["statistics"],
        )
        return result

    def process_text(self, text: str, render: bool = False) -> Dict[str, Any]:
        with log_timer("parse_database"):
            transaction_count, records = parse_database(text)
        return self.process(transaction_count, records, render=render)

    def analyze_file(self, path: str) -> Tuple[TangleGraph, Dict[str, float]]:
        with log_timer("load_database"):
            transaction_count, records = load_database(path)
        return self.analyze(transaction_count, records)
