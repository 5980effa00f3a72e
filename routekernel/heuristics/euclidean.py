"""
Straight-line distance heuristic on raw lat/lng coordinates.

The coordinate distance is scaled by METERS_PER_DEGREE, an approximate
meters-per-degree conversion. The heuristic is admissible only when edge
weights are at least the scaled straight-line distance between their
endpoints; this is not checked.
"""

from __future__ import annotations

import math

from routekernel.config import METERS_PER_DEGREE
from routekernel.graph.model import Node


def coordinate_distance_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Scaled Euclidean distance between two coordinates."""
    return math.sqrt((lat1 - lat2) ** 2 + (lng1 - lng2) ** 2) * METERS_PER_DEGREE


def euclidean_heuristic(node_a: Node, node_b: Node) -> float:
    """
    Estimate the cost from node_a to node_b.

    Returns 0.0 if either node has no coordinates, which keeps the
    estimate admissible (A* then behaves like Dijkstra).
    """
    if not (node_a.has_coordinates and node_b.has_coordinates):
        return 0.0
    return coordinate_distance_m(node_a.lat, node_a.lng, node_b.lat, node_b.lng)


def zero_heuristic(node_a: Node, node_b: Node) -> float:
    """Uninformed heuristic; turns A* into Dijkstra."""
    return 0.0
