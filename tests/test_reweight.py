"""Tests for potential-based reweighting."""

import pytest

from apsp.exceptions import AlgorithmError
from apsp.graph import Graph
from apsp.potential import bellman_ford_potentials
from apsp.reweight import check_non_negative, restore_distance, reweight


class TestReweight:
    def test_scenario_weights(self, scenario_edges):
        G = Graph.from_edges(3, scenario_edges)
        H = reweight(G, [0, -5, -3])
        assert list(H.edges()) == [(0, 1, 0), (0, 2, 6), (1, 2, 0), (2, 0, 1)]

    def test_structure_is_preserved_and_input_untouched(self):
        edges = [(0, 1, -4), (0, 1, 2), (1, 0, 6)]
        G = Graph.from_edges(2, edges)
        H = reweight(G, bellman_ford_potentials(G))
        assert [(u, v) for u, v, _ in H.edges()] == [(u, v) for u, v, _ in edges]
        assert list(G.edges()) == edges

    def test_all_weights_non_negative(self, generated):
        G = Graph.from_edges(generated.n, generated.edges)
        H = reweight(G, bellman_ford_potentials(G))
        assert all(w >= 0 for _, _, w in H.edges())
        check_non_negative(H)

    def test_path_lengths_shift_by_endpoint_potentials(self, scenario_edges):
        G = Graph.from_edges(3, scenario_edges)
        h = bellman_ford_potentials(G)
        H = reweight(G, h)
        # path 0 -> 1 -> 2 in both weightings
        original = -5 + 2
        shifted = H.adj[0][0][1] + H.adj[1][0][1]
        assert shifted == original + h[0] - h[2]
        assert restore_distance(shifted, h[0], h[2]) == original


class TestCheckNonNegative:
    def test_reports_first_negative_edge(self):
        G = Graph.from_edges(3, [(0, 1, 0), (1, 2, -1), (2, 0, -7)])
        with pytest.raises(AlgorithmError, match=r"\(1, 2\) has negative weight -1"):
            check_non_negative(G)

    def test_empty_graph_passes(self):
        check_non_negative(Graph(0))
