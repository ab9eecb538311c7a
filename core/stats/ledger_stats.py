"""
Ledger Statistics — five read-only metrics over a finished Tangle graph.

    avg_dag_depth      mean twin-walk depth per transaction
    avg_txn_per_depth  transactions per depth level of the newest vertex
    avg_ref            parent references per transaction (2.0 when well-formed)
    incoming_rate      transactions per summed time unit
    inter_txn_delay    timestamp gap between the two newest transactions

Precondition: the highest-numbered vertex is the transaction farthest from
genesis. The graph does not verify this; it follows from time-ordered input.

None of the functions mutate the graph, so they may run in any order.

Time Complexity: O(V × L) for avg_dag_depth, O(V) for the rest
Memory: O(V)
"""

from typing import Dict

import numpy as np

from core.errors import DivisionUndefined, EmptyInput
from core.graph.tangle_graph import GENESIS_ID, TangleGraph
from core.structural.twin_walk_depth import twin_walk_depth

GENESIS_TIMESTAMP = 0

STAT_LABELS = {
    "avg_dag_depth": "AvgDagDepth",
    "avg_txn_per_depth": "AvgTxnPerDepth",
    "avg_ref": "AvgRef",
    "incoming_rate": "IncomingRate",
    "inter_txn_delay": "InterTxnDelay",
}


def _require_transactions(graph: TangleGraph, metric: str) -> int:
    count = graph.transaction_count()
    if count == 0:
        raise DivisionUndefined(f"{metric} is undefined for a ledger with no transactions")
    return count


def avg_dag_depth(graph: TangleGraph) -> float:
    """Sum of twin-walk depths over all vertices divided by the transaction count."""
    count = _require_transactions(graph, "AvgDagDepth")
    depths = np.fromiter(
        (twin_walk_depth(graph, v) for v in graph.vertices()),
        dtype=np.int64,
        count=graph.size(),
    )
    return float(depths.sum()) / count


def avg_txn_per_depth(graph: TangleGraph) -> float:
    """Non-genesis transactions divided by the depth of the newest vertex."""
    depth = twin_walk_depth(graph, graph.last_vertex()) if graph.size() else 0
    if depth == 0:
        raise DivisionUndefined("AvgTxnPerDepth is undefined: newest vertex has depth 0")
    return (graph.vertex_count() - 1) / depth


def avg_ref(graph: TangleGraph) -> float:
    count = _require_transactions(graph, "AvgRef")
    return graph.edge_count() / count


def incoming_rate(graph: TangleGraph) -> float:
    """Transactions per time unit; 0.0 when the summed timestamps are 0."""
    # Plain int sum; timestamps are unbounded integers
    total_time_units = sum(ts for _, _, ts in graph.transactions())
    if total_time_units == 0:
        return 0.0
    return (graph.vertex_count() - 1) / total_time_units


def inter_txn_delay(graph: TangleGraph) -> float:
    """Timestamp of the newest vertex minus that of the one before it."""
    _require_transactions(graph, "InterTxnDelay")
    last = graph.last_vertex()
    previous = last - 1
    last_time = graph.timestamp(last)
    previous_time = graph.timestamp(previous)
    if previous == GENESIS_ID and previous_time is None:
        previous_time = GENESIS_TIMESTAMP
    if last_time is None or previous_time is None:
        raise DivisionUndefined(
            f"InterTxnDelay needs timestamps on vertices {previous} and {last}"
        )
    return float(last_time - previous_time)


def compute_ledger_stats(graph: TangleGraph) -> Dict[str, float]:
    """
    Compute all five statistics.

    Raises:
        EmptyInput: the graph holds no transactions
        DivisionUndefined: a statistic has a zero denominator
    """
    if graph.transaction_count() == 0:
        raise EmptyInput("ledger contains no transactions")

    return {
        "avg_dag_depth": avg_dag_depth(graph),
        "avg_txn_per_depth": avg_txn_per_depth(graph),
        "avg_ref": avg_ref(graph),
        "incoming_rate": incoming_rate(graph),
        "inter_txn_delay": inter_txn_delay(graph),
    }
