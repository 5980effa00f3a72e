"""
Random geometric graphs for demos and benchmarks.

Nodes are scattered uniformly in a disc around a center coordinate and
every pair closer than a threshold is connected in both directions.
Edge weights are the scaled coordinate distance, so the Euclidean A*
heuristic is admissible on these graphs.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from routekernel.config import (
    DEFAULT_CENTER_LAT,
    DEFAULT_CENTER_LNG,
    DEFAULT_CONNECT_WITHIN_M,
    DEFAULT_NUM_NODES,
    DEFAULT_RADIUS_M,
    EARTH_RADIUS_M,
    METERS_PER_DEGREE,
)
from routekernel.graph.model import Graph, Node, edge_count
from routekernel.heuristics.euclidean import coordinate_distance_m

logger = logging.getLogger(__name__)


def generate_random_graph(
    center_lat: float = DEFAULT_CENTER_LAT,
    center_lng: float = DEFAULT_CENTER_LNG,
    num_nodes: int = DEFAULT_NUM_NODES,
    radius_m: float = DEFAULT_RADIUS_M,
    connect_within_m: float = DEFAULT_CONNECT_WITHIN_M,
    seed: int | None = None,
) -> Graph:
    """
    Generate a random symmetric graph around a center point.

    Args:
        center_lat: Latitude of the disc center
        center_lng: Longitude of the disc center
        num_nodes: Number of nodes (ids "0" .. str(num_nodes - 1))
        radius_m: Disc radius in meters
        connect_within_m: Connect pairs strictly closer than this
        seed: Random seed for reproducibility

    Returns:
        New Graph

    Raises:
        ValueError: If num_nodes is negative or a distance is not positive
    """
    if num_nodes < 0:
        raise ValueError(f"num_nodes must be >= 0, got {num_nodes}")
    if radius_m <= 0 or connect_within_m <= 0:
        raise ValueError("radius_m and connect_within_m must be positive")

    rng = np.random.default_rng(seed)

    # Uniform point in disc: sqrt keeps density even
    r = radius_m * np.sqrt(rng.random(num_nodes))
    theta = rng.random(num_nodes) * 2 * math.pi
    dy = r * np.sin(theta)
    dx = r * np.cos(theta)

    lats = center_lat + (dy / EARTH_RADIUS_M) * (180 / math.pi)
    lngs = center_lng + (dx / (EARTH_RADIUS_M * math.cos(math.radians(center_lat)))) * (180 / math.pi)

    graph: Graph = {
        str(i): Node(str(i), float(lats[i]), float(lngs[i])) for i in range(num_nodes)
    }

    # Pairwise scaled coordinate distances to find candidate edges
    coords = np.column_stack([lats, lngs])
    deltas = coords[:, None, :] - coords[None, :, :]
    distances = np.sqrt((deltas**2).sum(axis=-1)) * METERS_PER_DEGREE
    close = distances < connect_within_m
    np.fill_diagonal(close, False)

    for i, j in zip(*np.nonzero(close)):
        u, v = graph[str(i)], graph[str(j)]
        # Weight via the heuristic's own formula so h never exceeds an edge
        u.add_neighbor(v.id, coordinate_distance_m(u.lat, u.lng, v.lat, v.lng))

    logger.debug(
        f"Generated graph with {len(graph)} nodes and {edge_count(graph)} directed edges"
    )
    return graph
