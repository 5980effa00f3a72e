"""
A* search engine.

Dijkstra guided by an estimate of the remaining cost. With the default
Euclidean heuristic the result is optimal when edge weights are at least
the scaled straight-line distance between their endpoints.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Callable, Mapping

from routekernel.graph.model import Node
from routekernel.heuristics.euclidean import euclidean_heuristic
from routekernel.search.base import SearchAlgorithm, SearchResult, reconstruct_path, unreachable

logger = logging.getLogger(__name__)

Heuristic = Callable[[Node, Node], float]


class AStarSearch(SearchAlgorithm):
    """
    A* with open and closed sets.

    The open node with the lowest f = g + h is expanded next; ties go to
    the lexicographically smallest node id. Closed nodes are never
    reopened, so an inconsistent heuristic may give a suboptimal path.
    """

    def __init__(self, heuristic: Heuristic | None = None) -> None:
        """
        Initialize A* search.

        Args:
            heuristic: Estimate h(node, goal); defaults to euclidean_heuristic
        """
        self._heuristic = heuristic or euclidean_heuristic

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return f"A* search (heuristic: {getattr(self._heuristic, '__name__', 'custom')})"

    def _search(self, graph: Mapping[str, Node], start_id: str, end_id: str) -> SearchResult:
        goal = graph[end_id]
        h = self._heuristic

        g_score: dict[str, float] = {start_id: 0.0}
        f_score: dict[str, float] = {start_id: h(graph[start_id], goal)}
        previous: dict[str, str] = {}
        open_set = {start_id}
        closed_set: set[str] = set()
        visited_order: list[str] = []
        frontier: list[tuple[float, str]] = [(f_score[start_id], start_id)]

        while frontier:
            f, current = heapq.heappop(frontier)
            if current not in open_set or f != f_score[current]:
                continue
            if math.isinf(f):
                # Only infinite estimates left
                break

            visited_order.append(current)
            if current == end_id:
                path = reconstruct_path(previous, start_id, end_id)
                logger.debug(
                    f"A* reached '{end_id}' (distance {g_score[end_id]:.3f}) "
                    f"after expanding {len(visited_order)} nodes"
                )
                return SearchResult(tuple(visited_order), path, g_score[end_id])

            open_set.remove(current)
            closed_set.add(current)

            for neighbor_id, weight in graph[current].neighbors.items():
                if neighbor_id in closed_set:
                    continue

                tentative_g = g_score[current] + weight
                if neighbor_id not in open_set:
                    open_set.add(neighbor_id)
                elif tentative_g >= g_score[neighbor_id]:
                    continue

                previous[neighbor_id] = current
                g_score[neighbor_id] = tentative_g
                f_score[neighbor_id] = tentative_g + h(graph[neighbor_id], goal)
                heapq.heappush(frontier, (f_score[neighbor_id], neighbor_id))

        logger.debug(f"A*: '{end_id}' unreachable from '{start_id}'")
        return unreachable(visited_order)


def astar(
    graph: Mapping[str, Node],
    start_id: str,
    end_id: str,
    heuristic: Heuristic | None = None,
) -> SearchResult:
    """Run A* search."""
    return AStarSearch(heuristic).find_path(graph, start_id, end_id)
