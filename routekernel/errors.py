"""
Typed errors raised by graph validation and search.

An unreachable target is never an error: it is reported as a
SearchResult with an empty path and infinite distance.
"""

from __future__ import annotations


class RouteKernelError(Exception):
    """Base class for all Route Kernel errors."""


class NodeNotFoundError(RouteKernelError, KeyError):
    """
    A node id was referenced that is not a key of the graph.

    Raised for unknown start/end ids and for adjacency entries that
    point at nodes missing from the graph.
    """

    def __init__(self, node_id: str, referenced_by: str | None = None) -> None:
        self.node_id = node_id
        self.referenced_by = referenced_by
        if referenced_by is None:
            message = f"Node '{node_id}' not found in graph"
        else:
            message = f"Node '{node_id}' (neighbor of '{referenced_by}') not found in graph"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidWeightError(RouteKernelError, ValueError):
    """An edge weight is not a finite non-negative number."""

    def __init__(self, node_id: str, neighbor_id: str, weight: float) -> None:
        self.node_id = node_id
        self.neighbor_id = neighbor_id
        self.weight = weight
        super().__init__(
            f"Invalid weight {weight!r} on edge '{node_id}' -> '{neighbor_id}' "
            "(weights must be finite non-negative numbers)"
        )
