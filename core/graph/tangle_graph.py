"""
Tangle Graph — append-only two-parent transaction DAG.

Vertex numbering:
    0  reserved, never a real transaction
    1  genesis (no parents)
    2+ regular transactions, in arrival order

Each regular vertex owns a (left_parent, right_parent) pair plus a timestamp
kept in a separate field. The timestamp is metadata, not an edge.

Time Complexity: O(1) per insertion / lookup
Memory: O(V)
"""

from typing import Iterator, List, Optional, Tuple

from core.errors import InvalidArgument

RESERVED_ID = 0
GENESIS_ID = 1
FIRST_TRANSACTION_ID = 2

Parents = Tuple[int, int]


class TangleGraph:
    """Directed graph where every transaction points at exactly two parents."""

    def __init__(self, size: int):
        if size < 0:
            raise InvalidArgument(
                f"Number of vertices must be nonnegative, got {size}"
            )
        self._size = size
        self._edges = 0
        self._parents: List[Optional[Parents]] = [None] * size
        self._timestamps: List[Optional[int]] = [None] * size

    def _check_vertex(self, vertex_id: int) -> None:
        if vertex_id < 0 or vertex_id >= self._size:
            raise InvalidArgument(
                f"vertex {vertex_id} is not between 0 and {self._size - 1}"
            )

    def add_transaction(
        self, vertex_id: int, left_parent: int, right_parent: int, timestamp: int
    ) -> None:
        """Record that vertex_id references left_parent and right_parent."""
        self._check_vertex(vertex_id)
        self._check_vertex(left_parent)
        self._check_vertex(right_parent)
        if vertex_id < FIRST_TRANSACTION_ID:
            raise InvalidArgument(
                f"vertex {vertex_id} is reserved and cannot reference parents"
            )
        if self._parents[vertex_id] is not None:
            raise InvalidArgument(f"vertex {vertex_id} already has parents")

        self._parents[vertex_id] = (left_parent, right_parent)
        self._timestamps[vertex_id] = timestamp
        self._edges += 2

    def neighbors(self, vertex_id: int) -> Tuple[int, ...]:
        """Return the (left, right) parents of vertex_id, or () if it has none."""
        self._check_vertex(vertex_id)
        parents = self._parents[vertex_id]
        return parents if parents is not None else ()

    def timestamp(self, vertex_id: int) -> Optional[int]:
        self._check_vertex(vertex_id)
        return self._timestamps[vertex_id]

    def size(self) -> int:
        """Raw number of allocated slots, reserved slot included."""
        return self._size

    def vertex_count(self) -> int:
        """Genesis plus regular transactions (the reserved slot is not counted)."""
        return max(self._size - 1, 0)

    def transaction_count(self) -> int:
        return self._edges // 2

    def edge_count(self) -> int:
        return self._edges

    def last_vertex(self) -> int:
        """Highest-numbered vertex, assumed to be the most recent transaction."""
        return self._size - 1

    def vertices(self) -> range:
        return range(self._size)

    def transactions(self) -> Iterator[Tuple[int, Parents, int]]:
        """Yield (vertex_id, (left, right), timestamp) for every recorded transaction."""
        for v in range(self._size):
            parents = self._parents[v]
            if parents is not None:
                yield v, parents, self._timestamps[v]

    def render(self) -> str:
        """Deterministic text listing of every vertex and its outgoing references."""
        lines = [f"{self.vertex_count()} vertices, {self._edges} edges"]
        for v in range(self._size):
            parents = self._parents[v]
            if parents is None:
                lines.append(f"{v}:")
            else:
                lines.append(f"{v}: {parents[0]} {parents[1]} {self._timestamps[v]}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TangleGraph(vertices={self.vertex_count()}, edges={self._edges})"
        )
