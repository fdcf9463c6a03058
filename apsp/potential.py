"""Vertex potentials via Bellman-Ford from a virtual source.

The virtual source has a zero-weight edge to every vertex. The default
implementation never builds it: starting every working distance at ``0`` is
the state after the source's edges have been relaxed once.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .exceptions import NegativeCycleDetected
from .graph import Graph, Weight
from .logger import Logger, NoopLogger


def _bump(counters: Optional[Dict[str, int]], key: str, by: int = 1) -> None:
    if counters is not None:
        counters[key] = counters.get(key, 0) + by


def _verify(G: Graph, dist: List[Optional[Weight]], logger: Logger) -> None:
    """Raise if any edge can still be relaxed against ``dist``."""
    for u, v, w in G.edges():
        du = dist[u]
        if du is None:
            continue
        dv = dist[v]
        if dv is None or du + w < dv:
            logger.info("negative_cycle", u=u, v=v, w=w)
            raise NegativeCycleDetected((u, v, w))


def bellman_ford_potentials(
    G: Graph,
    *,
    logger: Logger | None = None,
    counters: Optional[Dict[str, int]] = None,
) -> List[Weight]:
    """Return a potential per vertex that makes every reweighted edge non-negative.

    Runs up to ``G.n`` rounds of full edge relaxation, vertices in index order
    and each vertex's edges in list order, stopping after the first round that
    changes nothing. A verification pass always follows.

    Args:
        G: Input graph, negative weights allowed.
        logger: Optional event logger.
        counters: Optional dict updated with ``bellman_ford_rounds`` and
            ``bf_edges_scanned`` (edges examined).

    Returns:
        ``h`` with ``w + h[u] - h[v] >= 0`` for every edge ``(u, v, w)``.

    Raises:
        NegativeCycleDetected: If the graph contains a negative cycle.
    """
    log = logger or NoopLogger()
    n = G.n
    dist: List[Weight] = [0] * n

    rounds = 0
    for _ in range(n):
        rounds += 1
        changed = False
        for u in range(n):
            for v, w in G.adj[u]:
                _bump(counters, "bf_edges_scanned")
                nd = dist[u] + w
                if nd < dist[v]:
                    dist[v] = nd
                    changed = True
        if not changed:
            break
    _bump(counters, "bellman_ford_rounds", rounds)

    _verify(G, dist, log)  # type: ignore[arg-type]
    log.info("potentials", rounds=rounds, min_potential=min(dist, default=0))
    return dist


def explicit_source_potentials(
    G: Graph,
    *,
    logger: Logger | None = None,
    counters: Optional[Dict[str, int]] = None,
) -> List[Weight]:
    """Same contract as :func:`bellman_ford_potentials`, with a real extra vertex.

    Builds a copy of ``G`` with vertex ``n`` joined to every vertex by a
    zero-weight edge, runs classic Bellman-Ford from it, and returns the
    potentials of the original ``n`` vertices only.
    """
    log = logger or NoopLogger()
    n = G.n
    q = n
    H = Graph(n + 1)
    for u, v, w in G.edges():
        H.add_edge(u, v, w)
    for v in range(n):
        H.add_edge(q, v, 0)

    dist: List[Optional[Weight]] = [None] * (n + 1)
    dist[q] = 0

    rounds = 0
    for _ in range(n + 1):
        rounds += 1
        changed = False
        for u in range(n + 1):
            for v, w in H.adj[u]:
                du = dist[u]
                if du is None:
                    continue
                _bump(counters, "bf_edges_scanned")
                nd = du + w
                dv = dist[v]
                if dv is None or nd < dv:
                    dist[v] = nd
                    changed = True
        if not changed:
            break
    _bump(counters, "bellman_ford_rounds", rounds)

    _verify(H, dist, log)
    h = dist[:n]
    log.info("potentials", rounds=rounds, min_potential=min(h, default=0), explicit=True)
    return h  # type: ignore[return-value]
