"""
Side-by-side comparison of search engines on one query.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from routekernel.config import COMPARISON_TIE_ORDER
from routekernel.graph.model import Node
from routekernel.search import ALGORITHMS, SearchAlgorithm, SearchResult, get_algorithm

logger = logging.getLogger(__name__)


@dataclass
class ComparisonReport:
    """
    Results of running several engines on the same query.

    Attributes:
        start_id: Start node id
        end_id: End node id
        results: Algorithm name -> SearchResult
        timings_ms: Algorithm name -> wall time in milliseconds
    """

    start_id: str
    end_id: str
    results: dict[str, SearchResult] = field(default_factory=dict)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def best(self) -> str | None:
        """
        Algorithm with the shortest distance.

        Ties prefer dijkstra, then bfs, then astar. None if no
        algorithm found a path.
        """
        found = [name for name, result in self.results.items() if result.found]
        if not found:
            return None

        def rank(name: str) -> tuple[float, int]:
            if name in COMPARISON_TIE_ORDER:
                return self.results[name].distance, COMPARISON_TIE_ORDER.index(name)
            return self.results[name].distance, len(COMPARISON_TIE_ORDER)

        return min(found, key=rank)

    def summary(self) -> list[dict]:
        """One row per algorithm, suitable for printing or a DataFrame."""
        rows = []
        for name, result in self.results.items():
            rows.append({
                "algorithm": name,
                "found": result.found,
                "distance": result.distance,
                "hops": result.hop_count,
                "expanded": result.expanded_count,
                "time_ms": round(self.timings_ms.get(name, 0.0), 3),
            })
        return rows


def compare_algorithms(
    graph: Mapping[str, Node],
    start_id: str,
    end_id: str,
    algorithms: Iterable[str | SearchAlgorithm] | None = None,
) -> ComparisonReport:
    """
    Run several engines on the same graph and query.

    Args:
        graph: Mapping of node id to Node
        start_id: Start node id
        end_id: End node id
        algorithms: Names or engine instances (default: all registered)

    Returns:
        ComparisonReport

    Raises:
        NodeNotFoundError / InvalidWeightError: Propagated from the engines
    """
    engines = [
        algo if isinstance(algo, SearchAlgorithm) else get_algorithm(algo)
        for algo in (algorithms if algorithms is not None else ALGORITHMS.keys())
    ]

    report = ComparisonReport(start_id=start_id, end_id=end_id)
    for engine in engines:
        t0 = time.perf_counter()
        result = engine.find_path(graph, start_id, end_id)
        report.timings_ms[engine.name] = (time.perf_counter() - t0) * 1000
        report.results[engine.name] = result

        if math.isinf(result.distance):
            logger.info(f"{engine.name}: no path from '{start_id}' to '{end_id}'")
        else:
            logger.info(
                f"{engine.name}: distance {result.distance:.2f}, "
                f"{result.hop_count} hops, {result.expanded_count} expanded"
            )

    best = report.best
    if best is None:
        logger.warning(f"No algorithm found a path from '{start_id}' to '{end_id}'")
    else:
        logger.info(f"Best route: {best}")
    return report
