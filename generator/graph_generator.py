#!/usr/bin/env python3
"""
Directed graph generator with negative weights for APSP evaluation.

SUPPORTED GRAPH TYPES
---------------------
1. erdos_renyi
   Random directed graphs with uniformly sampled edges.
   Use for:
     - Baseline / average-case performance
     - Scalability tests with increasing n and m

2. dag
   Directed acyclic graphs (edges only from lower- to higher-index vertices).
   Use for:
     - Long propagation chains in the Bellman-Ford phase
     - Matrices that are half unreachable

3. grid
   2D grid graphs with edges between neighboring vertices (bidirectional).
   Use for:
     - Many equal-length shortest paths (heap tie-breaking)

NEGATIVE WEIGHTS
----------------
Weights are first drawn from [w_min, w_max] (non-negative), then shifted by a
random integer potential p: w'(u, v) = w(u, v) - p(u) + p(v). Every cycle
keeps its original, non-negative length, so the result has negative edges but
no negative cycle. ``plant_negative_cycle=True`` adds a two-edge cycle of
total weight -1 on top.

Running the module writes every preset to ``generated-graphs/``; with the
project installed either form works:

```
python -m generator.graph_generator
python generator/graph_generator.py
```
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

EdgeList = List[Tuple[int, int, int]]

GraphType = Literal["erdos_renyi", "dag", "grid"]


@dataclass(frozen=True)
class GeneratedGraph:
    n: int
    m: int
    edges: EdgeList
    metadata: dict


def _topology(
    rng: random.Random,
    n: int,
    m: Optional[int],
    graph_type: GraphType,
) -> List[Tuple[int, int]]:
    pairs: List[Tuple[int, int]] = []
    seen: set[Tuple[int, int]] = set()

    def add(u: int, v: int) -> None:
        if u == v or (u, v) in seen:
            return
        seen.add((u, v))
        pairs.append((u, v))

    if graph_type == "grid":
        rows = max(1, math.isqrt(n))
        cols = max(1, (n + rows - 1) // rows)
        for r in range(rows):
            for c in range(cols):
                u = r * cols + c
                if u >= n:
                    continue
                for v in (u + 1 if c + 1 < cols else n, u + cols):
                    if v < n:
                        add(u, v)
                        add(v, u)
        return pairs

    if graph_type == "erdos_renyi":
        cap = n * (n - 1)
    elif graph_type == "dag":
        cap = n * (n - 1) // 2
    else:
        raise ValueError(f"Unknown graph_type: {graph_type}")
    target = min(cap, m if m is not None else 4 * n)
    while len(pairs) < target:
        u = rng.randrange(n)
        v = rng.randrange(n)
        if graph_type == "dag" and u > v:
            u, v = v, u
        add(u, v)
    return pairs


def generate_graph(
    *,
    n: int,
    m: Optional[int] = None,
    graph_type: GraphType = "erdos_renyi",
    w_min: int = 0,
    w_max: int = 100,
    negative_shift: int = 50,
    seed: Optional[int] = 0,
    plant_negative_cycle: bool = False,
) -> GeneratedGraph:
    """
    Generate a directed graph whose negative edges form no negative cycle.

    Args:
        n: Vertex count (> 0).
        m: Target edge count, ignored for grids. Defaults to ``4 * n``.
        graph_type: Topology family.
        w_min, w_max: Range of the base weights, ``0 <= w_min <= w_max``.
        negative_shift: Potentials are drawn from ``[0, negative_shift]``;
            ``0`` keeps every weight non-negative.
        seed: Seed for ``random.Random``.
        plant_negative_cycle: Add ``0 -> 1`` and ``1 -> 0`` edges summing to -1.
    """
    if n <= 0:
        raise ValueError("n must be > 0.")
    if w_min < 0 or w_max < w_min:
        raise ValueError("need 0 <= w_min <= w_max.")
    if negative_shift < 0:
        raise ValueError("negative_shift must be >= 0.")
    if m is not None and m < 0:
        raise ValueError("m must be >= 0.")

    rng = random.Random(seed)
    potential = [rng.randint(0, negative_shift) for _ in range(n)]
    edges: EdgeList = []
    for u, v in _topology(rng, n, m, graph_type):
        w = rng.randint(w_min, w_max)
        edges.append((u, v, w - potential[u] + potential[v]))

    if plant_negative_cycle:
        if n < 2:
            raise ValueError("a planted negative cycle needs n >= 2.")
        edges.append((0, 1, -1))
        edges.append((1, 0, 0))

    return GeneratedGraph(
        n=n,
        m=len(edges),
        edges=edges,
        metadata={
            "graph_type": graph_type,
            "w_min": w_min,
            "w_max": w_max,
            "negative_shift": negative_shift,
            "seed": seed,
            "plant_negative_cycle": plant_negative_cycle,
        },
    )


def save_edge_list_txt(g: GeneratedGraph, path: str) -> None:
    """
    Save as a simple text format readable by ``apsp.io``:
        n m
        u v w
        ...
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{g.n} {g.m}\n")
        for u, v, w in g.edges:
            f.write(f"{u} {v} {w}\n")


def load_edge_list_txt(path: str) -> GeneratedGraph:
    """
    Load the format produced by save_edge_list_txt.
    """
    with open(path, "r", encoding="utf-8") as f:
        header = f.readline().split()
        n = int(header[0])
        edges: EdgeList = []
        for line in f:
            if not line.strip():
                continue
            u, v, w = map(int, line.split())
            edges.append((u, v, w))
    return GeneratedGraph(n=n, m=len(edges), edges=edges, metadata={"loaded_from": path})


if __name__ == "__main__":
    import os

    from generator.presets import ALL_TEST_SETS

    os.makedirs("generated-graphs", exist_ok=True)

    for name, cases in ALL_TEST_SETS.items():
        for cfg in cases:
            graph = generate_graph(**cfg)
            out = f"generated-graphs/{name}_n{cfg['n']}_seed{cfg.get('seed', 'na')}.txt"
            save_edge_list_txt(graph, out)
            print(f"Saved {out} (n={graph.n}, m={graph.m})")
