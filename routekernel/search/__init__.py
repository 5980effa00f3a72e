"""
Search module.

Provides interchangeable pathfinding engines sharing one result contract:
- BreadthFirstSearch: Fewest hops (weight of the first-found path)
- DijkstraSearch: Minimum total weight
- AStarSearch: Minimum total weight, guided by a heuristic
"""

from __future__ import annotations

from collections.abc import Mapping

from routekernel.config import DEFAULT_ALGORITHM
from routekernel.graph.model import Node
from routekernel.search.astar import AStarSearch, astar
from routekernel.search.base import SearchAlgorithm, SearchResult, reconstruct_path
from routekernel.search.bfs import BreadthFirstSearch, bfs
from routekernel.search.dijkstra import DijkstraSearch, dijkstra

__all__ = [
    "SearchAlgorithm",
    "SearchResult",
    "reconstruct_path",
    "BreadthFirstSearch",
    "DijkstraSearch",
    "AStarSearch",
    "bfs",
    "dijkstra",
    "astar",
    "ALGORITHMS",
    "get_algorithm",
    "find_path",
]

ALGORITHMS: dict[str, type[SearchAlgorithm]] = {
    "bfs": BreadthFirstSearch,
    "dijkstra": DijkstraSearch,
    "astar": AStarSearch,
}

_ALIASES = {"a*": "astar", "a-star": "astar"}


def get_algorithm(name: str, **kwargs) -> SearchAlgorithm:
    """
    Get a search engine by name.

    Args:
        name: Algorithm identifier (bfs, dijkstra, astar; 'a*' also accepted)
        **kwargs: Passed to the engine constructor (e.g., heuristic for astar)

    Returns:
        Instantiated engine

    Raises:
        ValueError: If the name is unknown
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)

    if key not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    # Only A* takes options
    if key == "astar":
        return AStarSearch(**kwargs)
    return ALGORITHMS[key]()


def find_path(
    graph: Mapping[str, Node],
    start_id: str,
    end_id: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> SearchResult:
    """Find a path with the named algorithm."""
    return get_algorithm(algorithm).find_path(graph, start_id, end_id)
