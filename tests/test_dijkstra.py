"""Tests for the single-source Dijkstra search."""

import pytest

from apsp.dijkstra import dijkstra
from apsp.exceptions import InputError
from apsp.graph import Graph


class TestDistances:
    def test_basic(self):
        G = Graph.from_edges(4, [(0, 1, 1), (1, 2, 2), (0, 2, 4), (2, 3, 1)])
        assert dijkstra(G, 0) == [0, 1, 3, 4]

    def test_unreachable_is_none(self):
        G = Graph.from_edges(3, [(0, 1, 2)])
        assert dijkstra(G, 0) == [0, 2, None]
        assert dijkstra(G, 2) == [None, None, 0]

    def test_zero_weights_and_self_loops(self):
        G = Graph.from_edges(3, [(0, 0, 0), (0, 1, 0), (1, 2, 0), (2, 1, 5)])
        assert dijkstra(G, 0) == [0, 0, 0]

    def test_parallel_edges_take_the_cheapest(self):
        G = Graph.from_edges(2, [(0, 1, 9), (0, 1, 3), (0, 1, 5)])
        assert dijkstra(G, 0) == [0, 3]

    def test_single_vertex(self):
        assert dijkstra(Graph(1), 0) == [0]

    @pytest.mark.parametrize("source", [-1, 3])
    def test_invalid_source(self, source):
        with pytest.raises(InputError):
            dijkstra(Graph(3), source)


class TestCounters:
    def test_stale_entries_are_skipped(self):
        # 1 is first pushed at 10, then improved to 2 via 2
        G = Graph.from_edges(3, [(0, 1, 10), (0, 2, 1), (2, 1, 1)])
        counters = {}
        assert dijkstra(G, 0, counters=counters) == [0, 2, 1]
        assert counters == {
            "heap_pops": 4,
            "stale_pops": 1,
            "dijkstra_edges_scanned": 3,
            "max_frontier_size": 2,
        }

    def test_counters_accumulate_across_runs(self):
        G = Graph.from_edges(2, [(0, 1, 1)])
        counters = {}
        dijkstra(G, 0, counters=counters)
        dijkstra(G, 1, counters=counters)
        assert counters["heap_pops"] == 3
        assert counters["dijkstra_edges_scanned"] == 1

    def test_repeat_runs_are_identical(self):
        G = Graph.from_edges(5, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1), (3, 4, 0)])
        first, second = {}, {}
        assert dijkstra(G, 0, counters=first) == dijkstra(G, 0, counters=second)
        assert first == second


class TestTieBreaking:
    """Equal costs settle the lower vertex index first, whatever the edge order."""

    def test_lower_index_settled_first_via_stale_entry(self):
        # 1 and 2 both sit at cost 1; settling 1 first pushes 3 at cost 2,
        # which 2 then beats, leaving one stale entry
        G = Graph.from_edges(4, [(0, 2, 1), (0, 1, 1), (1, 3, 1), (2, 3, 0)])
        counters = {}
        assert dijkstra(G, 0, counters=counters) == [0, 1, 1, 1]
        assert counters["heap_pops"] == 5
        assert counters["stale_pops"] == 1

    def test_mirrored_graph_has_no_stale_entry(self):
        # the shortcut now leaves the lower index, so 3 is final on its first push
        G = Graph.from_edges(4, [(0, 2, 1), (0, 1, 1), (2, 3, 1), (1, 3, 0)])
        counters = {}
        assert dijkstra(G, 0, counters=counters) == [0, 1, 1, 1]
        assert counters["heap_pops"] == 4
        assert counters["stale_pops"] == 0
