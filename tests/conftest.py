"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from routekernel.graph import Graph, add_edge, add_node, build_graph, generate_random_graph


@pytest.fixture
def triangle() -> Graph:
    """
    Directed 3-node graph: A->B (1), A->C (4), B->C (2).

    Coordinates are small enough that the Euclidean heuristic is
    admissible (h(A, C) ~ 1.57, h(B, C) ~ 1.11).
    """
    graph: Graph = {}
    add_node(graph, "A", 0.0, 0.0)
    add_node(graph, "B", 0.0, 1e-5)
    add_node(graph, "C", 1e-5, 1e-5)
    add_edge(graph, "A", "B", 1.0, bidirectional=False)
    add_edge(graph, "A", "C", 4.0, bidirectional=False)
    add_edge(graph, "B", "C", 2.0, bidirectional=False)
    return graph


@pytest.fixture
def diamond() -> Graph:
    """
    S reaches T through X or Y at equal cost; Y is inserted before X.

    No coordinates, so A* runs with a zero estimate.
    """
    return build_graph(
        [("S", "Y", 1.0), ("S", "X", 1.0), ("X", "T", 1.0), ("Y", "T", 1.0)],
        directed=True,
    )


@pytest.fixture
def disconnected() -> Graph:
    """Two components: A-B-C (undirected) and an isolated D."""
    return build_graph(
        [("A", "B", 1.0), ("B", "C", 1.0)],
        coordinates={"A": (0.0, 0.0), "B": (0.0, 1e-5), "C": (0.0, 2e-5), "D": (1.0, 1.0)},
    )


@pytest.fixture
def bfs_trap() -> Graph:
    """
    Hop-minimal path is expensive: S->T (10) vs S->M->T (1 + 1).
    """
    return build_graph([("S", "T", 10.0), ("S", "M", 1.0), ("M", "T", 1.0)])


@pytest.fixture(scope="module")
def random_graphs() -> list[Graph]:
    """A few seeded random geometric graphs."""
    return [
        generate_random_graph(num_nodes=40, radius_m=2000, connect_within_m=700, seed=seed)
        for seed in range(5)
    ]
