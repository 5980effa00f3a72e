"""
Search algorithm base class and the shared result contract.

All engines implement find_path(graph, start_id, end_id) and return a
SearchResult.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from routekernel.graph.model import Node, require_nodes, validate_graph


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a single search.

    Attributes:
        visited_order: Node ids in the order they were expanded/finalized
        path: Node ids from start to end inclusive; empty if unreachable
        distance: Accumulated weight along path; inf if end never reached
    """

    visited_order: tuple[str, ...]
    path: tuple[str, ...]
    distance: float

    @property
    def found(self) -> bool:
        """Whether a path to the end node was found."""
        return bool(self.path)

    @property
    def hop_count(self) -> int | None:
        """Number of edges in the path, or None if not found."""
        return len(self.path) - 1 if self.path else None

    @property
    def expanded_count(self) -> int:
        """Number of nodes expanded before the search stopped."""
        return len(self.visited_order)


def reconstruct_path(previous: Mapping[str, str], start_id: str, end_id: str) -> tuple[str, ...]:
    """
    Walk predecessor links back from end_id.

    A node without an entry in `previous` has no predecessor. The walk
    only happens if end_id has a predecessor or is the start itself.
    """
    if end_id != start_id and end_id not in previous:
        return ()

    path = [end_id]
    node_id = end_id
    while node_id in previous:
        node_id = previous[node_id]
        path.append(node_id)
    return tuple(reversed(path))


def unreachable(visited_order: list[str]) -> SearchResult:
    """Result for a search that never reached its end node."""
    return SearchResult(tuple(visited_order), (), math.inf)


class SearchAlgorithm(ABC):
    """
    Abstract base class for pathfinding engines.

    Engines hold configuration only; every find_path() call builds its
    own working state, so an instance can be shared between threads as
    long as the graph is not mutated meanwhile.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'bfs', 'dijkstra', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    def find_path(self, graph: Mapping[str, Node], start_id: str, end_id: str) -> SearchResult:
        """
        Find a path from start_id to end_id.

        Args:
            graph: Mapping of node id to Node
            start_id: Id of the start node
            end_id: Id of the end node

        Returns:
            SearchResult (unreachable targets give an empty path and inf)

        Raises:
            NodeNotFoundError: If start_id/end_id (or an adjacency entry) is not in graph
            InvalidWeightError: If any edge weight is negative or NaN
        """
        require_nodes(graph, start_id, end_id)
        validate_graph(graph)
        return self._search(graph, start_id, end_id)

    @abstractmethod
    def _search(self, graph: Mapping[str, Node], start_id: str, end_id: str) -> SearchResult:
        """Run the search on a validated graph."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
