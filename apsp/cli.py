"""Command-line interface for running the solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from .exceptions import APSPError, ConfigError, InputError, NegativeCycleDetected
from .export import format_matrix, matrix_to_json
from .graph import Graph
from .io import read_graph
from .logger import StdLogger
from .solver import JohnsonSolver, SolverConfig

EXAMPLE_CSV = """# u,v,w
0,1,-5
1,2,2
2,0,4
0,2,3
"""

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_NEGATIVE_CYCLE = 65
EXIT_INTERNAL = 70


def _build_graph_from_file(path: str, fmt: Optional[str], n: Optional[int]) -> Graph:
    """Build a :class:`Graph` from an edges file."""
    if not Path(path).exists():
        raise InputError(f"edges file not found: {path}")
    return read_graph(path, fmt, n=n)


def _build_random_graph(args: argparse.Namespace) -> Graph:
    """Generate a graph with negative edges but no negative cycle."""
    from generator.graph_generator import generate_graph

    try:
        gen = generate_graph(
            n=args.n,
            m=args.m,
            w_min=args.w_min,
            w_max=args.w_max,
            negative_shift=args.negative_shift,
            seed=args.seed,
        )
    except ValueError as exc:
        raise InputError(str(exc)) from exc
    return Graph.from_edges(gen.n, gen.edges)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``apsp`` command-line tool."""
    examples = (
        "Examples:\n"
        "  apsp --edges graph.csv\n"
        "  apsp --random --n 50 --m 200 --output json\n"
        "  apsp --example > graph.csv\n"
    )
    p = argparse.ArgumentParser(
        prog="apsp",
        description="All-pairs shortest paths with Johnson's algorithm",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit log events as JSON lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument("--random", action="store_true", help="Use a generated graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )

    p.add_argument(
        "--format",
        choices=["csv", "jsonl", "txt"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )
    p.add_argument(
        "--vertices",
        type=int,
        default=None,
        help="Vertex count, when the file only implies it",
    )

    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--w-min", type=int, default=0, help="Smallest base weight (random mode)")
    p.add_argument("--w-max", type=int, default=20, help="Largest base weight (random mode)")
    p.add_argument(
        "--negative-shift",
        type=int,
        default=10,
        help="Potential range used to create negative edges (random mode)",
    )
    p.add_argument("--seed", type=int, default=0, help="Seed for random graph generation")

    p.add_argument("--potential", choices=["implicit", "explicit"], default="implicit")
    p.add_argument("--output", choices=["text", "json"], default="text")
    p.add_argument(
        "--metrics-out",
        type=str,
        default=None,
        help="Write run metrics to this JSON file",
    )

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return EXIT_OK

    logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)

    try:
        if args.random:
            G = _build_random_graph(args)
        else:
            G = _build_graph_from_file(args.edges, args.format, args.vertices)

        cfg = SolverConfig(potential=args.potential)
        if args.verbose:
            sys.stderr.write(f"config: n={G.n} m={G.m} potential={cfg.potential}\n")

        t0 = time.perf_counter()
        solver = JohnsonSolver(G, config=cfg, logger=logger)
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0

        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(solver.metrics(wall_ms=wall_ms)), fh)

        if args.output == "json":
            sys.stdout.write(matrix_to_json(res.distances) + "\n")
        else:
            sys.stdout.write("All Pairs Shortest Paths:\n")
            sys.stdout.write(format_matrix(res.distances))
        return EXIT_OK

    except NegativeCycleDetected as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_NEGATIVE_CYCLE
    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except APSPError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
