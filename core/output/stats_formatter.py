"""
Stats Formatter — text report and JSON output for ledger statistics.

Output structure:
{
    "statistics": {...},
    "graph": {...},
    "summary": {...}
}
"""

from typing import Any, Dict

from core.stats.ledger_stats import STAT_LABELS

# (key, report label, decimals)
_REPORT_LINES = [
    ("avg_dag_depth", "AVG DAG DEPTH", 2),
    ("avg_txn_per_depth", "AVG TXS PER DEPTH", 2),
    ("avg_ref", "AVG REF", 3),
    ("incoming_rate", "TRANSACTION RATE ()", 2),
    ("inter_txn_delay", "TRANSACTION DELAY (h)", 1),
]


def format_stats(stats: Dict[str, float]) -> str:
    """Render the statistics as the classic line-per-metric report."""
    return "\n".join(
        f"{label}: {stats[key]:.{decimals}f}" for key, label, decimals in _REPORT_LINES
    )


def format_output(
    stats: Dict[str, float],
    graph_summary: Dict[str, Any],
    processing_time: float = 0.0,
) -> Dict[str, Any]:
    """Build the final JSON-compatible output dict."""
    return {
        "statistics": {STAT_LABELS[key]: float(value) for key, value in stats.items()},
        "graph": graph_summary,
        "summary": {
            "total_vertices": graph_summary.get("total_vertices", 0),
            "total_transactions": graph_summary.get("total_transactions", 0),
            "processing_time_seconds": round(processing_time, 4),
        },
    }
