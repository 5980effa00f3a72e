#!/usr/bin/env python3
"""
Route comparison CLI - run BFS, Dijkstra and A* on a random road-like graph.

Usage:
    python scripts/compare_routes.py
    python scripts/compare_routes.py --nodes 300 --seed 7
    python scripts/compare_routes.py --start 0 --end 42 --algorithms dijkstra,astar
    python scripts/compare_routes.py --seed 7 --plot

The graph is generated around a center coordinate: nodes are scattered in a
disc and every pair closer than --connect meters is joined. Start/end default
to the nodes nearest two opposite points of the disc.

Environment (.env is loaded if present):
    LOG_LEVEL   - default log level when --verbose is not given
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from routekernel.benchmark import compare_algorithms  # noqa: E402
from routekernel.config import (  # noqa: E402
    DEFAULT_CENTER_LAT,
    DEFAULT_CENTER_LNG,
    DEFAULT_CONNECT_WITHIN_M,
    DEFAULT_NUM_NODES,
    DEFAULT_RADIUS_M,
    EARTH_RADIUS_M,
    LOG_LEVEL,
    RESULTS_DIR,
)
from routekernel.errors import RouteKernelError  # noqa: E402
from routekernel.graph import edge_count, find_nearest_node, generate_random_graph  # noqa: E402
from routekernel.search import ALGORITHMS  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare BFS, Dijkstra and A* on a random graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--nodes", type=int, default=DEFAULT_NUM_NODES, help="Number of nodes")
    parser.add_argument("--radius", type=float, default=DEFAULT_RADIUS_M, help="Disc radius (m)")
    parser.add_argument(
        "--connect",
        type=float,
        default=DEFAULT_CONNECT_WITHIN_M,
        help="Connect nodes closer than this (m)",
    )
    parser.add_argument("--lat", type=float, default=DEFAULT_CENTER_LAT, help="Center latitude")
    parser.add_argument("--lng", type=float, default=DEFAULT_CENTER_LNG, help="Center longitude")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--start", type=str, default=None, help="Start node id")
    parser.add_argument("--end", type=str, default=None, help="End node id")
    parser.add_argument(
        "--algorithms",
        type=str,
        default=",".join(ALGORITHMS.keys()),
        help="Comma-separated algorithms (default: all)",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        nargs="?",
        const=RESULTS_DIR,
        default=None,
        help=f"Write HTML figures to this directory (default if no value: {RESULTS_DIR})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def offset_point(lat: float, lng: float, north_m: float, east_m: float) -> tuple[float, float]:
    """Move a coordinate by a metric offset."""
    dlat = (north_m / EARTH_RADIUS_M) * (180 / math.pi)
    dlng = (east_m / (EARTH_RADIUS_M * math.cos(math.radians(lat)))) * (180 / math.pi)
    return lat + dlat, lng + dlng


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL.upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        graph = generate_random_graph(
            center_lat=args.lat,
            center_lng=args.lng,
            num_nodes=args.nodes,
            radius_m=args.radius,
            connect_within_m=args.connect,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not graph:
        print("Error: graph is empty", file=sys.stderr)
        return 1

    # Default endpoints: nearest nodes to two opposite edges of the disc
    start = args.start
    if start is None:
        start, _ = find_nearest_node(graph, *offset_point(args.lat, args.lng, 0, -0.8 * args.radius))
    end = args.end
    if end is None:
        end, _ = find_nearest_node(graph, *offset_point(args.lat, args.lng, 0, 0.8 * args.radius))

    print("=" * 60)
    print("Route Comparison")
    print("=" * 60)
    print(f"  Graph: {len(graph)} nodes, {edge_count(graph)} directed edges")
    print(f"  Start: {start}")
    print(f"  End:   {end}")
    print("=" * 60 + "\n")

    algorithms = [a.strip() for a in args.algorithms.split(",") if a.strip()]
    try:
        report = compare_algorithms(graph, start, end, algorithms)
    except (RouteKernelError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{'Algorithm':<10} {'Distance (m)':>14} {'Hops':>6} {'Expanded':>9} {'Time (ms)':>10}")
    print("-" * 53)
    for row in report.summary():
        distance = f"{row['distance']:,.1f}" if row["found"] else "unreachable"
        hops = row["hops"] if row["hops"] is not None else "-"
        print(
            f"{row['algorithm']:<10} {distance:>14} {hops:>6} "
            f"{row['expanded']:>9} {row['time_ms']:>10.3f}"
        )

    print(f"\nBest: {report.best or 'none (no path)'}")

    if args.plot is not None:
        from routekernel.visualization import create_comparison_chart, create_exploration_figure

        args.plot.mkdir(parents=True, exist_ok=True)
        for name, result in report.results.items():
            out = args.plot / f"{name}.html"
            create_exploration_figure(graph, result, title=name).write_html(out)
            print(f"Wrote {out}")
        out = args.plot / "comparison.html"
        create_comparison_chart(report).write_html(out)
        print(f"Wrote {out}")

    return 0 if report.best is not None else 1


if __name__ == "__main__":
    sys.exit(main())
