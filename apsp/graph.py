"""Directed graph with signed integer weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .exceptions import GraphFormatError, InputError, InvalidEdge

Vertex = int
Weight = int
Edge = Tuple[Vertex, Vertex, Weight]


@dataclass
class Graph:
    """Adjacency-list graph used by every stage of Johnson's algorithm.

    Negative weights are allowed. Parallel edges between the same ordered pair
    are stored independently, in insertion order.

    Attributes:
        n: Number of vertices in the range ``0`` .. ``n-1``.
        adj: Outgoing adjacency lists of ``(head, weight)`` pairs.
    """

    n: int

    def __post_init__(self) -> None:
        """Validate vertex count and initialize adjacency lists."""
        if not isinstance(self.n, int) or isinstance(self.n, bool) or self.n < 0:
            raise InputError("Graph.n must be a non-negative integer.")
        self.adj: List[List[Tuple[Vertex, Weight]]] = [[] for _ in range(self.n)]

    def add_edge(self, u: Vertex, v: Vertex, w: Weight) -> None:
        """Add a directed edge from ``u`` to ``v``.

        Args:
            u: Tail vertex.
            v: Head vertex.
            w: Integer edge weight, possibly negative.

        Raises:
            InvalidEdge: If ``u`` or ``v`` are out of range.
            GraphFormatError: If ``w`` is not an integer.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, -3)
            >>> g.adj
            [[(1, -3)], []]
            ```
        """
        if not isinstance(w, int) or isinstance(w, bool):
            raise GraphFormatError(f"non-integer weight {w!r} on edge ({u}, {v})")
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise InvalidEdge(u, v, w, self.n)
        self.adj[u].append((v, w))

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` edges."""
        g = cls(n)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    def out_degree(self, u: Vertex) -> int:
        """Return the out-degree of vertex ``u``."""
        return len(self.adj[u])

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(u, v, w)`` in relaxation order."""
        for u in range(self.n):
            for v, w in self.adj[u]:
                yield u, v, w

    @property
    def m(self) -> int:
        """Number of edges, parallel edges counted separately."""
        return sum(len(lst) for lst in self.adj)

    def negative_edge_count(self) -> int:
        """Return how many edges have a negative weight."""
        return sum(1 for _, _, w in self.edges() if w < 0)
