"""Presentation helpers for distance matrices."""

from __future__ import annotations

import json
from typing import List, Optional, Sequence

import numpy as np
import numpy.typing as npt

INF_LABEL = "Inf"


def format_matrix(matrix: Sequence[Sequence[Optional[int]]]) -> str:
    """Return one ``u -> v: d`` line per pair and ``---`` after each row.

    Unreachable pairs print as ``Inf``.
    """
    lines: List[str] = []
    for u, row in enumerate(matrix):
        for v, d in enumerate(row):
            lines.append(f"{u} -> {v}: {INF_LABEL if d is None else d}")
        lines.append("---")
    return "\n".join(lines) + ("\n" if lines else "")


def matrix_to_json(matrix: Sequence[Sequence[Optional[int]]]) -> str:
    """Return the matrix as a JSON array of rows, ``null`` for unreachable."""
    return json.dumps({"n": len(matrix), "distances": [list(row) for row in matrix]})


def to_numpy(matrix: Sequence[Sequence[Optional[int]]]) -> npt.NDArray[np.float64]:
    """Return a ``float64`` array with ``inf`` marking unreachable pairs."""
    n = len(matrix)
    out = np.full((n, n), np.inf, dtype=np.float64)
    for u, row in enumerate(matrix):
        for v, d in enumerate(row):
            if d is not None:
                out[u, v] = d
    return out


__all__ = ["INF_LABEL", "format_matrix", "matrix_to_json", "to_numpy"]
