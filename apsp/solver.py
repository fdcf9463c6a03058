"""Johnson's all-pairs shortest-path solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .dijkstra import dijkstra
from .exceptions import ConfigError
from .graph import Edge, Graph, Weight
from .logger import Logger, NoopLogger
from .potential import bellman_ford_potentials, explicit_source_potentials
from .reweight import check_non_negative, restore_distance, reweight

DistanceMatrix = List[List[Optional[Weight]]]

_POTENTIAL_METHODS = {
    "implicit": bellman_ford_potentials,
    "explicit": explicit_source_potentials,
}


@dataclass(frozen=True)
class APSPResult:
    """Distance matrix, plus the potentials when the solver computed any."""

    distances: DistanceMatrix
    potentials: Optional[List[Weight]] = None


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    potential: str
    counters: Dict[str, int]
    wall_ms: float
    peak_mib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        potential: ``"implicit"`` starts Bellman-Ford with every distance at
            zero; ``"explicit"`` adds a real source vertex joined to every
            vertex by a zero-weight edge. Both give the same potentials.
        verify_reweighting: If ``True``, check that every reweighted edge is
            non-negative before running Dijkstra.
    """

    potential: str = "implicit"
    verify_reweighting: bool = True

    def __post_init__(self) -> None:
        if self.potential not in _POTENTIAL_METHODS:
            raise ConfigError(
                f"unknown potential method {self.potential!r}; "
                f"expected one of {sorted(_POTENTIAL_METHODS)}"
            )


class JohnsonSolver:
    """All-pairs shortest paths on graphs with negative edges but no negative cycle."""

    def __init__(
        self,
        G: Graph,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.G = G
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "bellman_ford_rounds": 0,
            "bf_edges_scanned": 0,
            "dijkstra_edges_scanned": 0,
            "dijkstra_runs": 0,
            "heap_pops": 0,
            "stale_pops": 0,
            "max_frontier_size": 0,
            "negative_edges": 0,
        }

    def solve(self) -> APSPResult:
        """Compute every pairwise distance.

        Returns:
            The full ``n x n`` matrix, ``None`` marking unreachable pairs.

        Raises:
            NegativeCycleDetected: If the graph has a negative cycle. No
                distances are produced in that case.
            AlgorithmError: If ``verify_reweighting`` finds a negative
                reweighted edge.
        """
        G = self.G
        n = G.n
        self.counters["negative_edges"] = G.negative_edge_count()

        compute = _POTENTIAL_METHODS[self.cfg.potential]
        h = compute(G, logger=self.logger, counters=self.counters)

        H = reweight(G, h)
        if self.cfg.verify_reweighting:
            check_non_negative(H)
        self.logger.debug("reweighted", n=n, m=H.m)

        rows: DistanceMatrix = []
        for u in range(n):
            d_prime = dijkstra(H, u, counters=self.counters)
            self.counters["dijkstra_runs"] += 1
            hu = h[u]
            row = [
                None if d is None else restore_distance(d, hu, h[v])
                for v, d in enumerate(d_prime)
            ]
            rows.append(row)
            self.logger.debug(
                "dijkstra", source=u, reachable=sum(1 for d in row if d is not None)
            )

        self.logger.info("solved", n=n, m=G.m, **self.counters)
        return APSPResult(distances=rows, potentials=h)

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters accumulated so far."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        return SolverMetrics(
            n=self.G.n,
            m=self.G.m,
            potential=self.cfg.potential,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


def johnson(
    n: int,
    edges: Iterable[Edge],
    *,
    config: Optional[SolverConfig] = None,
    logger: Logger | None = None,
) -> DistanceMatrix:
    """Return the all-pairs shortest-path matrix of a directed graph.

    Args:
        n: Vertex count; vertices are ``0`` .. ``n-1``.
        edges: ``(u, v, w)`` triples with integer weights.
        config: Optional solver configuration.
        logger: Optional event logger.

    Returns:
        Row-major ``n x n`` matrix; entry ``[u][v]`` is the distance from
        ``u`` to ``v`` or ``None`` if ``v`` is unreachable.

    Raises:
        NegativeCycleDetected: If the graph contains a negative cycle.
        InvalidEdge: If an edge endpoint is outside ``[0, n)``.

    Examples:
        ```python
        >>> johnson(3, [(0, 1, -5), (1, 2, 2), (2, 0, 4), (0, 2, 3)])
        [[0, -5, -3], [6, 0, 2], [4, -1, 0]]
        ```
    """
    G = Graph.from_edges(n, edges)
    return JohnsonSolver(G, config=config, logger=logger).solve().distances
