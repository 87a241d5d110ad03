"""Command-line interface for spengine."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from spengine.algorithms.base import PathAlgorithm
from spengine.algorithms.dijkstra import shortest_distances
from spengine.compare import compare_algorithms
from spengine.config import GRID_DEFAULTS, GridMapConfig
from spengine.generators import grid_map_from_config
from spengine.graph import Graph
from spengine.io import load_graph
from spengine.logging import get_logger, set_global_log_level
from spengine.results import PathResult

logger = get_logger(__name__)

ALGORITHM_CHOICES = [a.value for a in PathAlgorithm] + ["both"]


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_distance(value: float) -> str:
    """Return distance with up to three decimals, or "unreachable" for inf.

    Examples:
        2.0 -> "2"; 1234.5678 -> "1,234.568"; inf -> "unreachable".
    """
    if math.isinf(value):
        return "unreachable"
    s = f"{value:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise duration string.

    Examples:
        0.000123 -> "123.0 us"; 0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f} us"
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _format_path(path: Any, limit: int = 12) -> str:
    """Render a node path, eliding the middle of long paths."""
    nodes = [str(n) for n in path]
    if not nodes:
        return "-"
    if len(nodes) > limit:
        half = limit // 2
        nodes = nodes[:half] + ["..."] + nodes[-half:]
    return " > ".join(nodes)


def _build_graph(args: argparse.Namespace) -> Graph:
    """Load ``--graph`` or generate the grid map described by the grid options."""
    if args.graph is not None:
        logger.info(f"Loading graph from: {args.graph}")
        return load_graph(args.graph)

    config = GridMapConfig(
        width=args.width,
        height=args.height,
        spacing=args.spacing,
        jitter=GRID_DEFAULTS.jitter,
        diagonal_probability=args.diagonal_probability,
        seed=args.seed,
    )
    logger.info(
        f"Generating {config.width}x{config.height} grid map (seed={config.seed})"
    )
    return grid_map_from_config(config)


def _result_rows(results: Dict[PathAlgorithm, PathResult]) -> List[List[str]]:
    return [
        [
            algorithm.display_name,
            _format_distance(result.distance),
            str(result.hop_count),
            str(result.explored_node_count),
            str(result.explored_edge_count),
            _format_duration(result.execution_time),
        ]
        for algorithm, result in results.items()
    ]


def _route(args: argparse.Namespace) -> None:
    """Run the ``route`` command."""
    start_time = perf_counter()
    try:
        graph = _build_graph(args)
        source = args.source
        target = graph.node_count - 1 if args.target is None else args.target

        if args.algorithm == "both":
            algorithms = list(PathAlgorithm)
        else:
            algorithms = [PathAlgorithm.from_name(args.algorithm)]

        comparison = compare_algorithms(graph, source, target, algorithms)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {args.graph}")
        print(f"ERROR: Graph file not found: {args.graph}")
        sys.exit(1)
    except (ValueError, IndexError, OSError) as e:
        logger.error(f"Failed to compute route: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to compute route: {type(e).__name__}: {e}")
        sys.exit(1)

    if args.json or args.output is not None:
        payload = comparison.to_dict()
        if args.explored:
            for algorithm, result in comparison.results.items():
                payload["results"][algorithm.value] = result.to_dict()
        json_str = json.dumps(payload, indent=2)
        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(json_str)
            logger.info(f"Results written to: {args.output}")
        else:
            print(json_str)
    else:
        print(f"Route {source} -> {target} on {graph.node_count} nodes")
        print(
            _format_table(
                ["Algorithm", "Distance", "Hops", "Nodes", "Edges", "Time"],
                _result_rows(comparison.results),
            )
        )
        first = next(iter(comparison.results.values()))
        print(f"   Path: {_format_path(first.path)}")
        savings = comparison.to_dict().get("node_savings")
        if savings is not None:
            print(f"   Bidirectional settled {savings:.1%} fewer nodes")

    if not comparison.distances_agree:
        sys.exit(2)

    logger.info(f"Route command completed in {_format_duration(perf_counter() - start_time)}")


def _distances(args: argparse.Namespace) -> None:
    """Run the ``distances`` command."""
    try:
        graph = _build_graph(args)
        dist = shortest_distances(graph, args.source)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {args.graph}")
        print(f"ERROR: Graph file not found: {args.graph}")
        sys.exit(1)
    except (ValueError, IndexError, OSError) as e:
        logger.error(f"Failed to compute distances: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to compute distances: {type(e).__name__}: {e}")
        sys.exit(1)

    payload = {
        "source": args.source,
        "distances": [d if math.isfinite(d) else None for d in dist],
    }
    print(json.dumps(payload, indent=2))


def _add_graph_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--graph",
        "-g",
        type=Path,
        default=None,
        help="Graph file (YAML or JSON). When omitted, a grid map is generated",
    )
    parser.add_argument(
        "--width", type=int, default=GRID_DEFAULTS.width, help="Grid map width"
    )
    parser.add_argument(
        "--height", type=int, default=GRID_DEFAULTS.height, help="Grid map height"
    )
    parser.add_argument(
        "--spacing",
        type=float,
        default=GRID_DEFAULTS.spacing,
        help="Grid point spacing",
    )
    parser.add_argument(
        "--diagonal-probability",
        type=float,
        default=GRID_DEFAULTS.diagonal_probability,
        help="Probability of a diagonal road per grid cell",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the grid map"
    )
    parser.add_argument(
        "--source", "-s", type=int, default=0, help="Source node id (default: 0)"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``spengine`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="spengine",
        description="Compute shortest paths with Dijkstra and bidirectional Dijkstra.",
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
        metavar="{route,distances}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser("route", help="Find a shortest path")
    _add_graph_options(route_parser)
    route_parser.add_argument(
        "--target",
        "-t",
        type=int,
        default=None,
        help="Target node id (default: last node)",
    )
    route_parser.add_argument(
        "--algorithm",
        "-a",
        choices=ALGORITHM_CHOICES,
        default="both",
        help="Algorithm to run (default: both, side by side)",
    )
    route_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    route_parser.add_argument(
        "--explored",
        action="store_true",
        help="Include explored nodes and edges in JSON output",
    )
    route_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write JSON results to this file instead of stdout",
    )

    distances_parser = subparsers.add_parser(
        "distances", help="Print distances from a source to every node"
    )
    _add_graph_options(distances_parser)

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "route":
        _route(args)
    elif args.command == "distances":
        _distances(args)


if __name__ == "__main__":
    main()
