"""Potential-based reweighting and its inverse."""

from __future__ import annotations

from typing import Sequence

from .exceptions import AlgorithmError
from .graph import Graph, Weight


def reweight(G: Graph, potentials: Sequence[Weight]) -> Graph:
    """Return a copy of ``G`` with every weight replaced by ``w + h[u] - h[v]``.

    With potentials from :mod:`apsp.potential` every new weight is
    non-negative and shortest paths keep their order, since each ``u -> v``
    path shifts by the same ``h[u] - h[v]``.

    Args:
        G: Original graph.
        potentials: One potential per vertex.

    Returns:
        A new graph with the same adjacency structure.
    """
    H = Graph(G.n)
    for u in range(G.n):
        hu = potentials[u]
        H.adj[u] = [(v, w + hu - potentials[v]) for v, w in G.adj[u]]
    return H


def restore_distance(d: Weight, hu: Weight, hv: Weight) -> Weight:
    """Map a reweighted ``u -> v`` distance back to the original weights."""
    return d - hu + hv


def check_non_negative(G: Graph) -> None:
    """Raise :class:`AlgorithmError` on the first negative edge of ``G``."""
    for u, v, w in G.edges():
        if w < 0:
            raise AlgorithmError(f"reweighted edge ({u}, {v}) has negative weight {w}")
