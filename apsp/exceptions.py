"""Custom exception types used across :mod:`apsp`."""

from __future__ import annotations

from typing import Tuple


class APSPError(Exception):
    """Base class for all package-specific errors."""


class InputError(APSPError, ValueError):
    """Raised for invalid user input such as a bad vertex count."""


class InvalidEdge(InputError):
    """Raised when an edge endpoint lies outside ``[0, n)``."""

    def __init__(self, u: int, v: int, w: int, n: int) -> None:
        super().__init__(f"edge ({u}, {v}, {w}) has an endpoint outside [0, {n})")
        self.edge: Tuple[int, int, int] = (u, v, w)
        self.n = n


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails or a weight is not an integer."""


class ConfigError(APSPError, ValueError):
    """Raised for invalid configuration options."""


class NegativeCycleDetected(APSPError):
    """Raised when the graph contains a negative-weight cycle.

    ``edge`` is an edge that still relaxed after the potential computation
    converged; it lies on, or is reachable from, a negative cycle.
    """

    def __init__(self, edge: Tuple[int, int, int]) -> None:
        u, v, w = edge
        super().__init__(f"negative cycle detected (edge {u} -> {v}, weight {w} still relaxes)")
        self.edge = edge


class AlgorithmError(APSPError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "APSPError",
    "InputError",
    "InvalidEdge",
    "GraphFormatError",
    "ConfigError",
    "NegativeCycleDetected",
    "AlgorithmError",
]
