"""Public package exports for :mod:`apsp`."""

from __future__ import annotations

from .baselines import FloydWarshallSolver, RepeatedBellmanFordSolver
from .dijkstra import dijkstra
from .exceptions import (
    AlgorithmError,
    APSPError,
    ConfigError,
    GraphFormatError,
    InputError,
    InvalidEdge,
    NegativeCycleDetected,
)
from .export import format_matrix, matrix_to_json, to_numpy
from .graph import Graph
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .potential import bellman_ford_potentials, explicit_source_potentials
from .reweight import reweight
from .solver import (
    APSPResult,
    DistanceMatrix,
    JohnsonSolver,
    SolverConfig,
    SolverMetrics,
    johnson,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "johnson",
    "JohnsonSolver",
    "APSPResult",
    "DistanceMatrix",
    "SolverConfig",
    "SolverMetrics",
    "bellman_ford_potentials",
    "explicit_source_potentials",
    "reweight",
    "dijkstra",
    "FloydWarshallSolver",
    "RepeatedBellmanFordSolver",
    "format_matrix",
    "matrix_to_json",
    "to_numpy",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "read_graph",
    "write_graph",
    "APSPError",
    "AlgorithmError",
    "InputError",
    "InvalidEdge",
    "ConfigError",
    "GraphFormatError",
    "NegativeCycleDetected",
]
