"""
Breadth-first search engine.

Finds the path with the fewest edges, ignoring weights while exploring,
then reports the weighted cost of that path.

Note: the reported distance is fixed when the end node is first
discovered, so it is the cost of the hop-minimal path and is not
necessarily the cheapest weighted path. Use Dijkstra or A* for that.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping

from routekernel.graph.model import Node
from routekernel.search.base import SearchAlgorithm, SearchResult, reconstruct_path, unreachable

logger = logging.getLogger(__name__)


class BreadthFirstSearch(SearchAlgorithm):
    """
    Queue-based level traversal.

    Nodes are marked visited when enqueued, so each node is discovered
    once. Neighbors are scanned in adjacency insertion order.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (fewest hops, weight of first-found path)"

    def _search(self, graph: Mapping[str, Node], start_id: str, end_id: str) -> SearchResult:
        queue = deque([start_id])
        visited = {start_id}
        previous: dict[str, str] = {}
        distances = {start_id: 0.0}
        visited_order: list[str] = []

        while queue:
            current = queue.popleft()
            visited_order.append(current)

            if current == end_id:
                path = reconstruct_path(previous, start_id, end_id)
                logger.debug(
                    f"BFS reached '{end_id}' in {len(path) - 1} hops "
                    f"after expanding {len(visited_order)} nodes"
                )
                return SearchResult(tuple(visited_order), path, distances[end_id])

            for neighbor_id, weight in graph[current].neighbors.items():
                if neighbor_id in visited:
                    continue
                visited.add(neighbor_id)
                previous[neighbor_id] = current
                distances[neighbor_id] = distances[current] + weight
                queue.append(neighbor_id)

        logger.debug(f"BFS: '{end_id}' unreachable from '{start_id}'")
        return unreachable(visited_order)


def bfs(graph: Mapping[str, Node], start_id: str, end_id: str) -> SearchResult:
    """Run breadth-first search."""
    return BreadthFirstSearch().find_path(graph, start_id, end_id)
