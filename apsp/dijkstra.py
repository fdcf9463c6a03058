"""Single-source shortest paths over non-negative integer weights."""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Tuple

from .exceptions import InputError
from .graph import Graph, Vertex, Weight


def dijkstra(
    G: Graph,
    source: Vertex,
    *,
    counters: Optional[Dict[str, int]] = None,
) -> List[Optional[Weight]]:
    """Run Dijkstra's algorithm from ``source``.

    The frontier is a binary heap of ``(cost, vertex)`` tuples, so among equal
    costs the lower vertex index is settled first. Entries are never removed on
    improvement; a popped entry costlier than the recorded distance is stale
    and skipped.

    Args:
        G: Graph with non-negative edge weights (not checked).
        source: Start vertex.
        counters: Optional dict updated with ``heap_pops``, ``stale_pops``,
            ``dijkstra_edges_scanned`` and ``max_frontier_size``.

    Returns:
        Distance per vertex, ``None`` where ``source`` cannot reach.

    Raises:
        InputError: If ``source`` is not a vertex of ``G``.
    """
    if not (0 <= source < G.n):
        raise InputError("source must be a valid vertex id.")
    dist: List[Optional[Weight]] = [None] * G.n
    dist[source] = 0

    pq: List[Tuple[Weight, Vertex]] = [(0, source)]
    pops = stale = scanned = 0
    max_frontier = 1

    while pq:
        max_frontier = max(max_frontier, len(pq))
        cost, u = heapq.heappop(pq)
        pops += 1
        best = dist[u]
        # lazy deletion
        if best is not None and cost > best:
            stale += 1
            continue
        for v, w in G.adj[u]:
            scanned += 1
            nd = cost + w
            dv = dist[v]
            if dv is None or nd < dv:
                dist[v] = nd
                heapq.heappush(pq, (nd, v))

    if counters is not None:
        counters["heap_pops"] = counters.get("heap_pops", 0) + pops
        counters["stale_pops"] = counters.get("stale_pops", 0) + stale
        counters["dijkstra_edges_scanned"] = counters.get("dijkstra_edges_scanned", 0) + scanned
        counters["max_frontier_size"] = max(counters.get("max_frontier_size", 0), max_frontier)
    return dist
