"""
Dijkstra shortest-path engine.

Label-setting search for the minimum-weight path; weights must be
non-negative (checked before searching).
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Mapping

from routekernel.graph.model import Node
from routekernel.search.base import SearchAlgorithm, SearchResult, reconstruct_path, unreachable

logger = logging.getLogger(__name__)


class DijkstraSearch(SearchAlgorithm):
    """
    Classic Dijkstra with a binary-heap frontier.

    Each round finalizes the unvisited node with the smallest tentative
    distance; ties go to the lexicographically smallest node id. Stale
    heap entries are skipped instead of decreasing keys, which selects
    exactly the node a linear scan with the same tie-break would.
    """

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra's algorithm (minimum total weight)"

    def _search(self, graph: Mapping[str, Node], start_id: str, end_id: str) -> SearchResult:
        distances: dict[str, float] = {start_id: 0.0}
        previous: dict[str, str] = {}
        visited: set[str] = set()
        visited_order: list[str] = []
        frontier: list[tuple[float, str]] = [(0.0, start_id)]

        while frontier:
            distance, current = heapq.heappop(frontier)
            if current in visited or distance > distances[current]:
                continue

            visited_order.append(current)
            if current == end_id:
                path = reconstruct_path(previous, start_id, end_id)
                logger.debug(
                    f"Dijkstra reached '{end_id}' (distance {distance:.3f}) "
                    f"after finalizing {len(visited_order)} nodes"
                )
                return SearchResult(tuple(visited_order), path, distance)

            visited.add(current)
            for neighbor_id, weight in graph[current].neighbors.items():
                if neighbor_id in visited:
                    continue
                alt = distance + weight
                if alt < distances.get(neighbor_id, math.inf):
                    distances[neighbor_id] = alt
                    previous[neighbor_id] = current
                    heapq.heappush(frontier, (alt, neighbor_id))

        logger.debug(f"Dijkstra: '{end_id}' unreachable from '{start_id}'")
        return unreachable(visited_order)


def dijkstra(graph: Mapping[str, Node], start_id: str, end_id: str) -> SearchResult:
    """Run Dijkstra's algorithm."""
    return DijkstraSearch().find_path(graph, start_id, end_id)
