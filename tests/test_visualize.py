"""Smoke tests for the plotting helpers."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from apsp.solver import johnson  # noqa: E402
from generator.visualize_graph import (  # noqa: E402
    downsample_edges,
    plot_distance_heatmap,
    to_networkx,
    visualize_graph,
)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


class TestHelpers:
    def test_downsample_keeps_small_lists(self):
        edges = [(0, 1, 1), (1, 2, -1)]
        assert downsample_edges(edges, 5) == edges

    def test_downsample_is_seeded(self):
        edges = [(i, i + 1, i) for i in range(50)]
        sample = downsample_edges(edges, 10, seed=1)
        assert len(sample) == 10
        assert sample == downsample_edges(edges, 10, seed=1)

    def test_parallel_edges_collapse_to_cheapest(self):
        G = to_networkx(3, [(0, 1, 4), (0, 1, -2), (1, 2, 0)])
        assert G.number_of_nodes() == 3
        assert G[0][1]["weight"] == -2


class TestPlots:
    def test_graph_drawing(self, scenario_edges):
        ax = visualize_graph(3, scenario_edges, show_weights=True, layout="shell")
        assert "negative edges" in ax.get_title()

    def test_unknown_layout(self, scenario_edges):
        with pytest.raises(ValueError, match="Unknown layout"):
            visualize_graph(3, scenario_edges, layout="circle")

    def test_heatmap(self):
        ax = plot_distance_heatmap(johnson(2, [(0, 1, -3)]))
        data = ax.images[0].get_array()
        assert data.mask[1, 0]
        assert data[0, 1] == -3
