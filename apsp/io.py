"""Edge-list readers and writers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .exceptions import GraphFormatError
from .graph import Edge, Graph

EdgeList = List[Edge]


def _int_field(raw: object, path: Path, lineno: int) -> int:
    try:
        if isinstance(raw, str):
            return int(raw.strip())
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
    except ValueError:
        pass
    raise GraphFormatError(f"{path}:{lineno}: expected an integer, got {raw!r}")


def _vertex_count(edges: Iterable[Edge]) -> int:
    return max((max(u, v) for u, v, _ in edges), default=-1) + 1


def _read_csv(path: Path) -> Tuple[int, EdgeList]:
    """Read ``u,v,w`` rows; ``#`` comments, blank lines and tabs are allowed.

    The vertex count is the largest id plus one.
    """
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, 1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = row.replace("\t", ",").split(",")
            if len(parts) < 3:
                raise GraphFormatError(f"{path}:{lineno}: expected u,v,w")
            u, v, w = (_int_field(p, path, lineno) for p in parts[:3])
            edges.append((u, v, w))
    return _vertex_count(edges), edges


def _write_csv(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write("# u,v,w\n")
        for u, v, w in G.edges():
            fh.write(f"{u},{v},{w}\n")


def _read_jsonl(path: Path) -> Tuple[int, EdgeList]:
    """Read one ``{"u": .., "v": .., "w": ..}`` object per line."""
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, 1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                fields = (obj["u"], obj["v"], obj["w"])
            except (json.JSONDecodeError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"{path}:{lineno}: {exc}") from exc
            u, v, w = (_int_field(f, path, lineno) for f in fields)
            edges.append((u, v, w))
    return _vertex_count(edges), edges


def _write_jsonl(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for u, v, w in G.edges():
            fh.write(json.dumps({"u": u, "v": v, "w": w}) + "\n")


def _read_txt(path: Path) -> Tuple[int, EdgeList]:
    """Read the generator format: an ``n m`` header, then ``u v w`` lines.

    Unlike the other formats, the header keeps vertices that have no edges.
    Extra header fields are ignored.
    """
    with path.open("r", encoding="utf-8") as fh:
        header = fh.readline().split()
        if len(header) < 2:
            raise GraphFormatError(f"{path}:1: expected an 'n m' header")
        n, m = (_int_field(h, path, 1) for h in header[:2])
        edges: EdgeList = []
        for lineno, raw in enumerate(fh, 2):
            parts = raw.split()
            if not parts:
                continue
            if len(parts) < 3:
                raise GraphFormatError(f"{path}:{lineno}: expected u v w")
            u, v, w = (_int_field(p, path, lineno) for p in parts[:3])
            edges.append((u, v, w))
    if len(edges) != m:
        raise GraphFormatError(f"{path}: header declares {m} edges, found {len(edges)}")
    return n, edges


def _write_txt(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write(f"{G.n} {G.m}\n")
        for u, v, w in G.edges():
            fh.write(f"{u} {v} {w}\n")


_FMT_READERS: Dict[str, Callable[[Path], Tuple[int, EdgeList]]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
    "txt": _read_txt,
}

_FMT_WRITERS: Dict[str, Callable[[Path, Graph], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
    "txt": _write_txt,
}


def _detect_format(p: Path, fmt: Optional[str]) -> str:
    fmt = fmt or p.suffix.lower().lstrip(".")
    if fmt == "tsv":
        fmt = "csv"
    if fmt not in _FMT_READERS:
        raise GraphFormatError(f"unknown graph format {fmt!r}")
    return fmt


def read_graph(path: str, fmt: Optional[str] = None, n: Optional[int] = None) -> Graph:
    """Load a graph from ``path``.

    Args:
        path: Input file.
        fmt: ``"csv"``, ``"jsonl"`` or ``"txt"``; inferred from the extension
            when omitted.
        n: Vertex count override, for formats that only imply it.

    Returns:
        The parsed graph.

    Raises:
        GraphFormatError: If the format is unknown or the file is malformed.
        InvalidEdge: If an edge lies outside the declared vertex count.
    """
    p = Path(path)
    reader = _FMT_READERS[_detect_format(p, fmt)]
    try:
        n_file, edges = reader(p)
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{path}: not valid UTF-8 text ({exc.reason})") from exc
    return Graph.from_edges(n if n is not None else n_file, edges)


def write_graph(G: Graph, path: str, fmt: Optional[str] = None) -> None:
    """Write ``G`` to ``path`` in ``fmt`` (inferred from the extension when omitted)."""
    p = Path(path)
    _FMT_WRITERS[_detect_format(p, fmt)](p, G)
