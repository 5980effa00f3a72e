"""
Graph module.

Provides the in-memory graph model and helpers:
- Node / Graph: Vertices with coordinates and weighted adjacency
- add_node, add_neighbor, add_edge, build_graph: Construction
- validate_graph: Pre-search validation
- find_nearest_node: Coordinate lookup
- generate_random_graph: Random geometric graphs
"""

from routekernel.graph.generator import generate_random_graph
from routekernel.graph.model import (
    Graph,
    Node,
    add_edge,
    add_neighbor,
    add_node,
    build_graph,
    edge_count,
    path_weight,
    require_nodes,
    validate_graph,
)
from routekernel.graph.spatial import find_nearest_node, haversine_m

__all__ = [
    "Graph",
    "Node",
    "add_node",
    "add_neighbor",
    "add_edge",
    "build_graph",
    "edge_count",
    "path_weight",
    "require_nodes",
    "validate_graph",
    "find_nearest_node",
    "haversine_m",
    "generate_random_graph",
]
