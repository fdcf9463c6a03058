#!/usr/bin/env python3
"""
Visualization for generated graphs and their distance matrices.

Features:
- Loads graphs saved via save_edge_list_txt(...)
- Draws the directed graph, negative edges in red
- Optionally solves APSP and shows the distance matrix as a heatmap
  (unreachable pairs left blank)

Example usage:

```
python -m generator.visualize_graph graph.txt --show-weights --heatmap
```
"""

from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from apsp.export import to_numpy

from generator.graph_generator import EdgeList, load_edge_list_txt


def downsample_edges(
    edges: Iterable[tuple[int, int, int]],
    max_edges: int,
    seed: int = 0,
) -> EdgeList:
    """
    Randomly sample edges if the graph is too large to visualize.
    """
    edges = list(edges)
    if len(edges) <= max_edges:
        return edges
    rng = random.Random(seed)
    return rng.sample(edges, max_edges)


def to_networkx(n: int, edges: EdgeList) -> nx.DiGraph:
    """
    Build a drawable DiGraph; parallel edges collapse to the cheapest one.
    """
    G = nx.DiGraph()
    G.add_nodes_from(range(n))
    for u, v, w in edges:
        if not G.has_edge(u, v) or w < G[u][v]["weight"]:
            G.add_edge(u, v, weight=w)
    return G


def visualize_graph(
    n: int,
    edges: EdgeList,
    *,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 300,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """
    Render the graph using NetworkX + Matplotlib.
    """
    G = to_networkx(n, edges)

    if layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    elif layout == "kamada_kawai":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        raise ValueError(f"Unknown layout: {layout}")

    if ax is None:
        _, ax = plt.subplots(figsize=(12, 10))

    nx.draw_networkx_nodes(G, pos, node_color="tab:blue", node_size=node_size, alpha=0.9, ax=ax)
    edge_colors = ["tab:red" if d["weight"] < 0 else "tab:gray" for _, _, d in G.edges(data=True)]
    nx.draw_networkx_edges(
        G,
        pos,
        edge_color=edge_colors,
        arrowstyle="->",
        arrowsize=12,
        width=1.2,
        alpha=0.6,
        ax=ax,
    )
    nx.draw_networkx_labels(G, pos, font_size=8, font_color="black", ax=ax)

    if show_weights:
        edge_labels = {(u, v): d["weight"] for u, v, d in G.edges(data=True)}
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7, ax=ax)

    ax.set_title("Directed graph (negative edges in red)", fontsize=14)
    ax.axis("off")
    return ax


def plot_distance_heatmap(
    matrix: Sequence[Sequence[Optional[int]]],
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """
    Draw the distance matrix; unreachable pairs are masked out.
    """
    arr = to_numpy(matrix)
    masked = np.ma.masked_invalid(arr)
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 7))
    im = ax.imshow(masked, cmap="coolwarm", interpolation="nearest")
    ax.figure.colorbar(im, ax=ax, label="distance")
    ax.set_xlabel("target")
    ax.set_ylabel("source")
    ax.set_title("All-pairs shortest distances")
    return ax


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Visualize a generated graph")
    parser.add_argument("path", help="Path to graph.txt")
    parser.add_argument("--max-edges", type=int, default=300,
                        help="Maximum edges to display (sampling if larger)")
    parser.add_argument("--layout", choices=["spring", "kamada_kawai", "shell"],
                        default="spring")
    parser.add_argument("--show-weights", action="store_true",
                        help="Render edge weights (recommended only for very small graphs)")
    parser.add_argument("--node-size", type=int, default=300)
    parser.add_argument("--heatmap", action="store_true",
                        help="Also solve APSP on the full graph and plot the matrix")

    args = parser.parse_args(argv)

    g = load_edge_list_txt(args.path)
    visualize_graph(
        n=g.n,
        edges=downsample_edges(g.edges, args.max_edges),
        layout=args.layout,
        show_weights=args.show_weights,
        node_size=args.node_size,
    )
    if args.heatmap:
        from apsp.solver import johnson

        plot_distance_heatmap(johnson(g.n, g.edges))
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
