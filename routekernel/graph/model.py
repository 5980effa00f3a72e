"""
Graph model: nodes with optional coordinates and weighted adjacency.

A Graph is a plain dict mapping node id to Node. Edges are directed
entries in a node's `neighbors` mapping; undirected graphs simply add
both directions (see add_edge).

Usage:
    graph: Graph = {}
    add_node(graph, "A", lat=0.0, lng=0.0)
    add_node(graph, "B", lat=0.0, lng=1.0)
    add_edge(graph, "A", "B", 1.0)
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from routekernel.errors import InvalidWeightError, NodeNotFoundError


@dataclass
class Node:
    """
    A graph vertex.

    Attributes:
        id: Identity, unique within a graph
        lat: Latitude (only used by heuristics and spatial helpers)
        lng: Longitude (only used by heuristics and spatial helpers)
        neighbors: Mapping of neighbor id to edge weight
    """

    id: str
    lat: float | None = None
    lng: float | None = None
    neighbors: dict[str, float] = field(default_factory=dict)

    @property
    def has_coordinates(self) -> bool:
        """Whether both lat and lng are set."""
        return self.lat is not None and self.lng is not None

    def add_neighbor(self, neighbor_id: str, weight: float) -> None:
        """Insert or overwrite the directed edge to neighbor_id."""
        self.neighbors[neighbor_id] = float(weight)


Graph = dict[str, Node]


def add_node(
    graph: Graph,
    node_id: str,
    lat: float | None = None,
    lng: float | None = None,
) -> Node:
    """
    Add a node to the graph, or return the existing one.

    Coordinates of an existing node are filled in if it had none.

    Raises:
        ValueError: If the node exists with different coordinates
    """
    node = graph.get(node_id)
    if node is None:
        node = Node(node_id, lat, lng)
        graph[node_id] = node
    elif lat is not None and lng is not None:
        if not node.has_coordinates:
            node.lat, node.lng = lat, lng
        elif (node.lat, node.lng) != (lat, lng):
            raise ValueError(
                f"Node '{node_id}' already at ({node.lat}, {node.lng}), got ({lat}, {lng})"
            )
    return node


def add_neighbor(graph: Graph, node_id: str, neighbor_id: str, weight: float) -> None:
    """
    Insert or overwrite the weight of the directed edge node_id -> neighbor_id.

    The weight is not validated here; engines validate before searching.

    Raises:
        NodeNotFoundError: If node_id is not in the graph
    """
    node = graph.get(node_id)
    if node is None:
        raise NodeNotFoundError(node_id)
    node.add_neighbor(neighbor_id, weight)


def add_edge(
    graph: Graph,
    a: str,
    b: str,
    weight: float,
    bidirectional: bool = True,
) -> None:
    """Add an edge between a and b, creating either node if needed."""
    add_node(graph, a)
    add_node(graph, b)
    add_neighbor(graph, a, b, weight)
    if bidirectional:
        add_neighbor(graph, b, a, weight)


def build_graph(
    edges: Iterable[tuple[str, str, float]],
    coordinates: Mapping[str, tuple[float, float]] | None = None,
    directed: bool = False,
) -> Graph:
    """
    Build a graph from (a, b, weight) triples.

    Args:
        edges: Edge triples
        coordinates: Optional {node_id: (lat, lng)}; also adds isolated nodes
        directed: If False, every edge is added in both directions

    Returns:
        New Graph
    """
    graph: Graph = {}
    for node_id, (lat, lng) in (coordinates or {}).items():
        add_node(graph, node_id, lat, lng)
    for a, b, weight in edges:
        add_edge(graph, a, b, weight, bidirectional=not directed)
    return graph


def validate_graph(graph: Mapping[str, Node]) -> None:
    """
    Check the graph is searchable.

    Raises:
        InvalidWeightError: If any weight is not a finite non-negative number
        NodeNotFoundError: If an adjacency entry points outside the graph
    """
    for node_id, node in graph.items():
        for neighbor_id, weight in node.neighbors.items():
            if not isinstance(weight, numbers.Real) or not math.isfinite(weight) or weight < 0:
                raise InvalidWeightError(node_id, neighbor_id, weight)
            if neighbor_id not in graph:
                raise NodeNotFoundError(neighbor_id, referenced_by=node_id)


def require_nodes(graph: Mapping[str, Node], *node_ids: str) -> None:
    """Raise NodeNotFoundError for the first id missing from the graph."""
    for node_id in node_ids:
        if node_id not in graph:
            raise NodeNotFoundError(node_id)


def edge_count(graph: Mapping[str, Node]) -> int:
    """Number of directed edges."""
    return sum(len(node.neighbors) for node in graph.values())


def path_weight(graph: Mapping[str, Node], path: Iterable[str]) -> float:
    """
    Sum of edge weights along a path.

    Raises:
        ValueError: If consecutive nodes are not connected
    """
    nodes = list(path)
    total = 0.0
    for u, v in zip(nodes, nodes[1:]):
        weight = graph[u].neighbors.get(v)
        if weight is None:
            raise ValueError(f"No edge '{u}' -> '{v}'")
        total += weight
    return total
