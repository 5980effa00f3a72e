"""
Spatial helpers on node coordinates.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

import numpy as np

from routekernel.config import EARTH_RADIUS_M
from routekernel.graph.model import Node


def haversine_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates, in meters."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def find_nearest_node(
    graph: Mapping[str, Node], lat: float, lng: float
) -> tuple[str | None, float]:
    """
    Find the node closest to a coordinate (haversine distance).

    Nodes without coordinates are ignored.

    Returns:
        (node_id, distance_m), or (None, inf) if no node has coordinates
    """
    located = [node for node in graph.values() if node.has_coordinates]
    if not located:
        return None, math.inf

    lats = np.radians(np.array([node.lat for node in located], dtype=np.float64))
    lngs = np.radians(np.array([node.lng for node in located], dtype=np.float64))
    phi = math.radians(lat)

    dphi = lats - phi
    dlambda = lngs - math.radians(lng)
    a = np.sin(dphi / 2) ** 2 + math.cos(phi) * np.cos(lats) * np.sin(dlambda / 2) ** 2
    distances = EARTH_RADIUS_M * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    # argmin returns the first minimum, i.e. graph iteration order on ties
    best = int(np.argmin(distances))
    return located[best].id, float(distances[best])
