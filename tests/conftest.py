"""Shared fixtures and oracles for the test suite."""

from typing import List, Optional

import networkx as nx
import pytest

from generator.graph_generator import generate_graph

SCENARIO_EDGES = [(0, 1, -5), (1, 2, 2), (2, 0, 4), (0, 2, 3)]


def networkx_distances(n, edges) -> List[List[Optional[int]]]:
    """Independent APSP oracle; parallel edges resolve to their minimum."""
    G = nx.MultiDiGraph()
    G.add_nodes_from(range(n))
    for u, v, w in edges:
        G.add_edge(u, v, weight=w)
    matrix: List[List[Optional[int]]] = [[None] * n for _ in range(n)]
    for u, lengths in nx.all_pairs_bellman_ford_path_length(G):
        for v, d in lengths.items():
            matrix[u][v] = d
    return matrix


def networkx_has_negative_cycle(n, edges) -> bool:
    G = nx.MultiDiGraph()
    G.add_nodes_from(range(n))
    for u, v, w in edges:
        G.add_edge(u, v, weight=w)
    return nx.negative_edge_cycle(G)


@pytest.fixture
def scenario_edges():
    return list(SCENARIO_EDGES)


@pytest.fixture(params=[
    dict(n=12, m=40, graph_type="erdos_renyi", seed=1),
    dict(n=20, m=60, graph_type="erdos_renyi", negative_shift=200, w_max=10, seed=2),
    dict(n=15, m=50, graph_type="dag", seed=3),
    dict(n=16, graph_type="grid", w_min=1, w_max=1, negative_shift=3, seed=4),
], ids=["er", "er-negative-heavy", "dag", "grid"])
def generated(request):
    """A generated graph with negative edges and no negative cycle."""
    return generate_graph(**request.param)
