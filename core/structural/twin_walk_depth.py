"""
Twin-Walk Depth — heuristic distance from a transaction to genesis.

Two deterministic chains start at a vertex: the trunk walk always follows
the left parent, the branch walk always follows the right parent. The depth
is the length of whichever chain reaches genesis first. This is not a
shortest path over all ancestors; see graph_metrics for the exact BFS value.

Time Complexity: O(L) per vertex where L = chain length
Memory: O(1) per walk, O(V) for longest_depth
"""

from typing import List

from core.errors import InvalidArgument, MalformedInput
from core.graph.tangle_graph import GENESIS_ID, TangleGraph

TRUNK = 0
BRANCH = 1


def _walk(graph: TangleGraph, vertex_id: int, side: int) -> int:
    """Count steps along one parent side until genesis or a parentless vertex."""
    steps = 0
    limit = graph.size()
    parents = graph.neighbors(vertex_id)
    while parents:
        parent = parents[side]
        steps += 1
        if parent == GENESIS_ID:
            break
        if steps > limit:
            raise MalformedInput(
                f"walk from vertex {vertex_id} does not terminate (cycle)"
            )
        parents = graph.neighbors(parent)
    return steps


def trunk_walk(graph: TangleGraph, vertex_id: int) -> int:
    return _walk(graph, vertex_id, TRUNK)


def branch_walk(graph: TangleGraph, vertex_id: int) -> int:
    return _walk(graph, vertex_id, BRANCH)


def twin_walk_depth(graph: TangleGraph, vertex_id: int) -> int:
    """Depth of vertex_id: min(trunk walk, branch walk). Genesis has depth 0."""
    return min(trunk_walk(graph, vertex_id), branch_walk(graph, vertex_id))


def longest_depth(graph: TangleGraph, vertex_id: int) -> int:
    """
    Longest parent chain from vertex_id down to a parentless vertex.

    Parents always precede their children, so a single pass in vertex order
    fills the table without recursion.
    """
    if vertex_id < 0 or vertex_id >= graph.size():
        raise InvalidArgument(
            f"vertex {vertex_id} is not between 0 and {graph.size() - 1}"
        )
    longest: List[int] = [0] * (vertex_id + 1)
    for v in range(vertex_id + 1):
        parents = graph.neighbors(v)
        if not parents:
            continue
        left, right = parents
        if left >= v or right >= v:
            raise MalformedInput(f"vertex {v} references a later vertex")
        longest[v] = 1 + max(longest[left], longest[right])
    return longest[vertex_id]
