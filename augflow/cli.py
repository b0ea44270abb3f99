"""Command-line interface for augflow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from augflow.algorithms.max_flow import calc_max_flow
from augflow.errors import AugflowError
from augflow.graph.io import load_network
from augflow.logging import (
    get_logger,
    level_from_env,
    set_console_stream,
    set_global_log_level,
)
from augflow.types.base import SearchStrategy

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _fail(message: str) -> None:
    logger.error(message)
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _solve(
    path: Path,
    src: int,
    dst: Optional[int],
    strategy: SearchStrategy,
    max_rounds: Optional[int],
    as_json: bool,
    show_cut: bool,
) -> None:
    """Load a network, compute max flow and print the result.

    Args:
        path: Edge-list or YAML/JSON network file.
        src: Source vertex.
        dst: Sink vertex; the last vertex when None.
        strategy: Augmenting-path search strategy.
        max_rounds: Optional cap on augmentation rounds.
        as_json: Print a JSON document instead of the bare value.
        show_cut: Also print min-cut edges in plain-text mode.
    """
    logger.info(f"Loading network from: {path}")
    start = perf_counter()
    try:
        network = load_network(path)
        if dst is None:
            dst = network.num_nodes - 1
        total, summary = calc_max_flow(
            network,
            src,
            dst,
            search_strategy=strategy,
            max_rounds=max_rounds,
            return_summary=True,
        )
    except FileNotFoundError:
        _fail(f"Network file not found: {path}")
        return
    except OSError as e:
        _fail(f"Cannot read network file {path}: {type(e).__name__}: {e}")
        return
    except AugflowError as e:
        _fail(f"Failed to compute max flow: {type(e).__name__}: {e}")
        return

    logger.info(
        f"Max flow {src}->{dst} = {total} after {summary.rounds} "
        f"{_plural(summary.rounds, 'round')} ({strategy.name}) "
        f"in {_format_duration(perf_counter() - start)}"
    )
    if not summary.is_maximum:
        logger.warning(f"Stopped at the {max_rounds}-round cap; value is a lower bound")

    if as_json:
        payload = {"source": src, "sink": dst, **summary.to_dict()}
        print(json.dumps(payload, indent=2))
        return

    print(total)
    if show_cut:
        for u, v in summary.min_cut:
            print(f"{u} {v} {network.capacity(u, v)}")


def _inspect(path: Path) -> None:
    """Validate a network file and print basic statistics."""
    try:
        network = load_network(path)
    except FileNotFoundError:
        _fail(f"Network file not found: {path}")
        return
    except OSError as e:
        _fail(f"Cannot read network file {path}: {type(e).__name__}: {e}")
        return
    except AugflowError as e:
        _fail(f"Invalid network: {type(e).__name__}: {e}")
        return

    print(f"nodes: {network.num_nodes}")
    print(f"edges: {network.num_edges}")
    print(f"total capacity: {network.total_capacity()}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``augflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="augflow",
        description="Compute maximum flow in capacitated directed networks.",
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
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Compute max flow")
    solve_parser.add_argument("network", type=Path, help="Edge-list or YAML/JSON file")
    solve_parser.add_argument(
        "--source", "-s", type=int, default=0, help="Source vertex (default: 0)"
    )
    solve_parser.add_argument(
        "--sink",
        "-t",
        type=int,
        default=None,
        help="Sink vertex (default: last vertex)",
    )
    solve_parser.add_argument(
        "--strategy",
        type=SearchStrategy.from_string,
        default=SearchStrategy.BFS,
        metavar="{bfs,dfs}",
        help="Augmenting-path search: bfs (Edmonds-Karp) or dfs (Ford-Fulkerson)",
    )
    solve_parser.add_argument(
        "--max-rounds",
        type=int,
        default=None,
        help="Stop after this many augmentations (result is then a lower bound)",
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print flows and min cut as JSON"
    )
    solve_parser.add_argument(
        "--min-cut", action="store_true", help="Also print min-cut edges"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a network file and show statistics"
    )
    inspect_parser.add_argument("network", type=Path, help="Edge-list or YAML/JSON file")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    # Keep stdout parseable when it carries a JSON document.
    set_console_stream("stderr" if getattr(args, "json", False) else "stdout")

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(level_from_env(logging.INFO))

    if args.command == "solve":
        _solve(
            path=args.network,
            src=args.source,
            dst=args.sink,
            strategy=args.strategy,
            max_rounds=args.max_rounds,
            as_json=args.json,
            show_cut=args.min_cut,
        )
    elif args.command == "inspect":
        _inspect(args.network)


if __name__ == "__main__":
    main()
