"""Command-line interface for flowcut."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from time import perf_counter
from typing import List, Optional, Sequence, Tuple

from flowcut.errors import FlowError
from flowcut.lib.samples import textbook_network
from flowcut.logging import configure_cli_logging, get_logger
from flowcut.report import render_report, result_to_dict
from flowcut.solver import solve

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a short human-readable duration.

    Examples:
        0.0123 -> "12.3 ms"; 1.5 -> "1.50 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _parse_labels(raw: Optional[str], num_nodes: int) -> Optional[List[str]]:
    if raw is None:
        return None
    labels = [part.strip() for part in raw.split(",")]
    if len(labels) != num_nodes:
        raise ValueError(
            f"--labels has {len(labels)} entries but the graph has {num_nodes} nodes"
        )
    return labels


def _solve_and_print(
    num_nodes: int,
    edges: Sequence[Tuple[int, int, int]],
    source: int,
    sink: int,
    labels: Optional[Sequence[str]],
    as_json: bool,
) -> None:
    started = perf_counter()
    result, graph = solve(num_nodes, edges, source, sink)
    # JSON output must stay parseable on stdout
    log = logger.debug if as_json else logger.info
    log(
        f"Solved {num_nodes} nodes / {len(edges)} edges in "
        f"{_format_duration(perf_counter() - started)}"
    )
    if as_json:
        print(json.dumps(result_to_dict(result, labels), indent=2))
    else:
        print(render_report(result, graph, labels))


def _run_demo(as_json: bool) -> None:
    edges, labels, source, sink = textbook_network()
    _solve_and_print(len(labels), edges, source, sink, labels, as_json)


def _run_solve(args: argparse.Namespace) -> None:
    edges = [tuple(e) for e in (args.edge or [])]
    labels = _parse_labels(args.labels, args.nodes)
    _solve_and_print(args.nodes, edges, args.source, args.sink, labels, args.json)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flowcut`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``,
            ``sys.argv`` is used.
    """
    parser = argparse.ArgumentParser(
        prog="flowcut",
        description="Compute maximum flow and minimum s-t cut of a capacitated network.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{demo,solve}",
        help="Available commands",
    )

    demo_parser = subparsers.add_parser(
        "demo", help="Solve the built-in six-node network (s, w, x, z, y, t)"
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Solve a network given as an edge list"
    )
    solve_parser.add_argument(
        "--nodes", "-n", type=int, required=True, help="Number of nodes"
    )
    solve_parser.add_argument(
        "--edge",
        "-e",
        type=int,
        nargs=3,
        action="append",
        metavar=("U", "V", "CAP"),
        help="Directed edge U->V with integer capacity CAP (repeatable)",
    )
    solve_parser.add_argument(
        "--source", "-s", type=int, required=True, help="Source node id"
    )
    solve_parser.add_argument("--sink", "-t", type=int, required=True, help="Sink node id")
    solve_parser.add_argument(
        "--labels",
        "-l",
        default=None,
        help="Comma-separated node labels in id order",
    )

    for p in (demo_parser, solve_parser):
        p.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if configure_cli_logging(args.verbose, args.quiet) == logging.DEBUG:
        logger.debug("Debug logging enabled")

    try:
        if args.command == "demo":
            _run_demo(args.json)
        elif args.command == "solve":
            _run_solve(args)
    except (FlowError, ValueError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
