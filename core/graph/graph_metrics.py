"""
Graph Metrics — structural diagnostics for the Tangle graph.

These values are for inspection only and never feed the ledger statistics.
The exact shortest depth here is a BFS over all parent paths, unlike the
twin-walk heuristic used by the statistics.

Time Complexity: O(V + E)
Memory: O(V + E)
"""

from typing import Any, Dict

import networkx as nx

from core.graph.tangle_graph import FIRST_TRANSACTION_ID, GENESIS_ID, TangleGraph
from core.structural.twin_walk_depth import longest_depth, twin_walk_depth


def to_networkx(graph: TangleGraph) -> nx.MultiDiGraph:
    """Export as a MultiDiGraph with one edge per parent reference (child -> parent)."""
    G = nx.MultiDiGraph()
    G.add_node(GENESIS_ID, timestamp=None)
    for vertex_id, (left, right), timestamp in graph.transactions():
        G.add_node(vertex_id, timestamp=timestamp)
        G.add_edge(vertex_id, left, side="trunk")
        G.add_edge(vertex_id, right, side="branch")
    return G


def compute_graph_summary(graph: TangleGraph) -> Dict[str, Any]:
    """Return graph-level diagnostics."""
    G = to_networkx(graph)
    simple = nx.DiGraph(G)
    last = graph.last_vertex()

    tips = [
        v for v in G.nodes()
        if v >= FIRST_TRANSACTION_ID and G.in_degree(v) == 0
    ]

    shortest = None
    if last >= FIRST_TRANSACTION_ID and nx.has_path(simple, last, GENESIS_ID):
        shortest = nx.shortest_path_length(simple, last, GENESIS_ID)

    return {
        "total_vertices": graph.vertex_count(),
        "total_transactions": graph.transaction_count(),
        "total_edges": G.number_of_edges(),
        "unique_edges": simple.number_of_edges(),
        "is_dag": nx.is_directed_acyclic_graph(simple),
        "num_weakly_connected_components": nx.number_weakly_connected_components(simple),
        "tip_count": len(tips),
        "last_vertex": last,
        "last_vertex_twin_walk_depth": twin_walk_depth(graph, last) if last >= 0 else 0,
        "last_vertex_shortest_depth": shortest,
        "last_vertex_longest_depth": longest_depth(graph, last) if last >= 0 else 0,
    }
