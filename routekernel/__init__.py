"""
Route Kernel.

A small pathfinding kernel that compares BFS, Dijkstra and A* search
on in-memory weighted graphs, reporting the path, its weight and the
order in which nodes were explored.
"""

from routekernel.errors import InvalidWeightError, NodeNotFoundError, RouteKernelError
from routekernel.graph import Graph, Node, add_edge, add_neighbor, add_node, build_graph
from routekernel.search import SearchResult, find_path, get_algorithm

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Node",
    "add_node",
    "add_neighbor",
    "add_edge",
    "build_graph",
    "SearchResult",
    "find_path",
    "get_algorithm",
    "RouteKernelError",
    "NodeNotFoundError",
    "InvalidWeightError",
]
