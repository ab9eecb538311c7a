"""
Graph Builder — constructs the Tangle graph from a transaction list.

The i-th record (0-indexed) becomes vertex i + FIRST_TRANSACTION_ID; vertex 1
is genesis and vertex 0 is reserved, so a ledger of N transactions needs
N + 2 slots.

Time Complexity: O(N) where N = number of transactions
Memory: O(N)
"""

import logging
from typing import Sequence, Tuple

from core.errors import InvalidArgument, MalformedInput
from core.graph.tangle_graph import FIRST_TRANSACTION_ID, TangleGraph

logger = logging.getLogger(__name__)

Record = Tuple[int, int, int]


def vertex_id_for_record(index: int) -> int:
    """Map a 0-based record position to its vertex identifier."""
    if index < 0:
        raise InvalidArgument(f"record index must be nonnegative, got {index}")
    return index + FIRST_TRANSACTION_ID


def build_graph(transaction_count: int, records: Sequence[Record]) -> TangleGraph:
    """
    Build a TangleGraph from (left_parent, right_parent, timestamp) records.

    Records must be in construction order: every parent must already exist
    when its child is added. The graph is returned only once every record
    has been added.

    Raises:
        InvalidArgument: negative count or parent outside the vertex range
        MalformedInput: record count mismatch or reference to a future vertex
    """
    if transaction_count < 0:
        raise InvalidArgument(
            f"transaction count must be nonnegative, got {transaction_count}"
        )
    if len(records) != transaction_count:
        raise MalformedInput(
            f"expected {transaction_count} transactions, got {len(records)}"
        )

    size = transaction_count + FIRST_TRANSACTION_ID
    graph = TangleGraph(size)

    for index, (left, right, timestamp) in enumerate(records):
        vertex_id = vertex_id_for_record(index)
        for parent in (left, right):
            # Out-of-range parents are left to add_transaction.
            if vertex_id <= parent < size:
                raise MalformedInput(
                    f"transaction {vertex_id} references future vertex {parent}"
                )
        graph.add_transaction(vertex_id, int(left), int(right), int(timestamp))

    logger.debug(
        "Built graph with %d vertices and %d edges",
        graph.vertex_count(),
        graph.edge_count(),
    )
    return graph
