"""Cross-checks between Johnson's algorithm and the reference solvers."""

import pytest

from apsp.baselines import FloydWarshallSolver, RepeatedBellmanFordSolver
from apsp.exceptions import NegativeCycleDetected
from apsp.graph import Graph
from apsp.solver import johnson

BASELINES = [FloydWarshallSolver, RepeatedBellmanFordSolver]


@pytest.mark.parametrize("SolverCls", BASELINES)
class TestBaselines:
    def test_scenario(self, SolverCls, scenario_edges):
        res = SolverCls(Graph.from_edges(3, scenario_edges)).solve()
        assert res.distances == [[0, -5, -3], [6, 0, 2], [4, -1, 0]]
        assert res.potentials is None

    def test_agrees_with_johnson(self, SolverCls, generated):
        G = Graph.from_edges(generated.n, generated.edges)
        assert SolverCls(G).solve().distances == johnson(generated.n, generated.edges)

    def test_unreachable(self, SolverCls):
        assert SolverCls(Graph(2)).solve().distances == [[0, None], [None, 0]]

    def test_negative_cycle(self, SolverCls):
        G = Graph.from_edges(3, [(2, 1, 1), (0, 1, -1), (1, 0, -1)])
        with pytest.raises(NegativeCycleDetected) as info:
            SolverCls(G).solve()
        assert info.value.edge in {(0, 1, -1), (1, 0, -1)}

    def test_metrics(self, SolverCls, scenario_edges):
        solver = SolverCls(Graph.from_edges(3, scenario_edges))
        solver.solve()
        metrics = solver.metrics(wall_ms=0.0)
        assert metrics.potential == "none"
        assert metrics.counters["edges_scanned"] > 0
