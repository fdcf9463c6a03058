"""Reference all-pairs solvers used for cross-checking and benchmarks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .exceptions import NegativeCycleDetected
from .graph import Graph, Weight
from .logger import Logger, NoopLogger
from .solver import APSPResult, DistanceMatrix, SolverMetrics


@dataclass
class _BaseBaselineSolver:
    """Common pieces shared between baseline solvers."""

    G: Graph
    logger: Optional[Logger] = None

    def __post_init__(self) -> None:
        self.logger = self.logger or NoopLogger()
        self.counters: Dict[str, int] = {"edges_scanned": 0}

    def summary(self) -> Dict[str, int]:
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        return SolverMetrics(
            n=self.G.n,
            m=self.G.m,
            potential="none",
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


class FloydWarshallSolver(_BaseBaselineSolver):
    """Dense ``O(n^3)`` dynamic programme over intermediate vertices."""

    def solve(self) -> APSPResult:
        n = self.G.n
        inf = math.inf
        d: List[List[float]] = [[inf] * n for _ in range(n)]
        for v in range(n):
            d[v][v] = 0
        for u, v, w in self.G.edges():
            if w < d[u][v]:
                d[u][v] = w

        for k in range(n):
            dk = d[k]
            for i in range(n):
                dik = d[i][k]
                if dik == inf:
                    continue
                di = d[i]
                for j in range(n):
                    self.counters["edges_scanned"] += 1
                    nd = dik + dk[j]
                    if nd < di[j]:
                        di[j] = nd

        for v in range(n):
            if d[v][v] < 0:
                edge = next(
                    (
                        (v, x, w)
                        for x, w in self.G.adj[v]
                        if d[x][v] != inf and w + d[x][v] < 0
                    ),
                    (v, v, int(d[v][v])),
                )
                self.logger.info("negative_cycle", vertex=v)
                raise NegativeCycleDetected(edge)

        rows: DistanceMatrix = [
            [None if x == inf else int(x) for x in row] for row in d
        ]
        return APSPResult(distances=rows)


class RepeatedBellmanFordSolver(_BaseBaselineSolver):
    """Classic single-source Bellman-Ford run once from every vertex."""

    def _from(self, s: int) -> List[Optional[Weight]]:
        n = self.G.n
        dist: List[Optional[Weight]] = [None] * n
        dist[s] = 0
        for _ in range(max(n - 1, 0)):
            updated = False
            for u in range(n):
                du = dist[u]
                if du is None:
                    continue
                for v, w in self.G.adj[u]:
                    self.counters["edges_scanned"] += 1
                    nd = du + w
                    dv = dist[v]
                    if dv is None or nd < dv:
                        dist[v] = nd
                        updated = True
            if not updated:
                break
        for u, v, w in self.G.edges():
            du = dist[u]
            if du is None:
                continue
            dv = dist[v]
            if dv is None or du + w < dv:
                self.logger.info("negative_cycle", source=s, u=u, v=v, w=w)
                raise NegativeCycleDetected((u, v, w))
        return dist

    def solve(self) -> APSPResult:
        return APSPResult(distances=[self._from(s) for s in range(self.G.n)])
