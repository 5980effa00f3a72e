"""
Property checks on seeded random graphs.

Dijkstra is compared against an all-pairs Floyd-Warshall reference.
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from routekernel.graph import Node, path_weight
from routekernel.search import astar, bfs, dijkstra

QUERY_IDS = [str(i) for i in range(0, 40, 4)]


def floyd_warshall(graph):
    """All-pairs shortest distances."""
    ids = list(graph)
    dist = {u: {v: math.inf for v in ids} for u in ids}
    for u in ids:
        dist[u][u] = 0.0
        for v, weight in graph[u].neighbors.items():
            dist[u][v] = min(dist[u][v], weight)
    for k in ids:
        for i in ids:
            dik = dist[i][k]
            if math.isinf(dik):
                continue
            for j in ids:
                if dik + dist[k][j] < dist[i][j]:
                    dist[i][j] = dik + dist[k][j]
    return dist


def queries():
    """All ordered start/end pairs among the sampled ids."""
    return [(s, e) for s in QUERY_IDS for e in QUERY_IDS]


def assert_valid_walk(graph, path, start, end):
    """Path goes from start to end along existing edges."""
    assert path[0] == start
    assert path[-1] == end
    for u, v in zip(path, path[1:]):
        assert v in graph[u].neighbors


class TestRandomGraphs:
    """Correctness properties across random geometric graphs."""

    def test_dijkstra_optimal(self, random_graphs):
        """Dijkstra's distance equals the reference shortest distance."""
        for graph in random_graphs:
            reference = floyd_warshall(graph)
            for start, end in queries():
                result = dijkstra(graph, start, end)
                assert result.distance == pytest.approx(reference[start][end])

    def test_dijkstra_finalizes_in_distance_order(self, random_graphs):
        """Finalized nodes never get closer to the start than earlier ones."""
        for graph in random_graphs:
            reference = floyd_warshall(graph)
            for start in QUERY_IDS:
                # An absent target makes Dijkstra finalize the whole component
                graph_with_sink = dict(graph)
                graph_with_sink["sink"] = Node("sink")
                result = dijkstra(graph_with_sink, start, "sink")
                distances = [reference[start][node_id] for node_id in result.visited_order]
                assert not any(math.isinf(d) for d in distances)
                for earlier, later in zip(distances, distances[1:]):
                    assert earlier <= later + 1e-9

    def test_reachable_paths_are_valid_walks(self, random_graphs):
        """Every found path is a walk from start to end."""
        for graph in random_graphs:
            for start, end in queries():
                for search in (bfs, dijkstra, astar):
                    result = search(graph, start, end)
                    if result.found:
                        assert_valid_walk(graph, result.path, start, end)

    def test_distance_equals_path_weight(self, random_graphs):
        """Dijkstra and A* distances are exactly the summed path weights."""
        for graph in random_graphs:
            for start, end in queries():
                for search in (dijkstra, astar):
                    result = search(graph, start, end)
                    if result.found:
                        assert result.distance == path_weight(graph, result.path)

    def test_astar_agrees_with_dijkstra(self, random_graphs):
        """Edge weights are scaled straight-line distances, so h is admissible."""
        for graph in random_graphs:
            for start, end in queries():
                expected = dijkstra(graph, start, end).distance
                actual = astar(graph, start, end).distance
                if math.isinf(expected):
                    assert math.isinf(actual)
                else:
                    assert actual == pytest.approx(expected)

    def test_astar_expands_fewer_nodes_overall(self, random_graphs):
        """The heuristic should cut total expansions."""
        dijkstra_total = 0
        astar_total = 0
        for graph in random_graphs:
            for start, end in queries():
                dijkstra_total += dijkstra(graph, start, end).expanded_count
                astar_total += astar(graph, start, end).expanded_count
        assert astar_total <= dijkstra_total

    def test_bfs_uses_fewest_hops(self, random_graphs):
        """BFS never needs more hops than Dijkstra, nor costs less."""
        for graph in random_graphs:
            for start, end in queries():
                b = bfs(graph, start, end)
                d = dijkstra(graph, start, end)
                assert b.found == d.found
                if b.found:
                    assert b.hop_count <= d.hop_count
                    assert b.distance >= d.distance - 1e-9

    def test_unreachable_consistent(self, random_graphs):
        """All engines agree on which targets are unreachable."""
        for graph in random_graphs:
            reference = floyd_warshall(graph)
            for start, end in queries():
                unreachable = math.isinf(reference[start][end])
                for search in (bfs, dijkstra, astar):
                    result = search(graph, start, end)
                    assert (result.path == ()) == unreachable
                    assert math.isinf(result.distance) == unreachable


class TestSharedGraph:
    """A graph can be searched from several threads at once."""

    def test_concurrent_searches(self, random_graphs):
        """Concurrent calls return the same results as sequential ones."""
        graph = random_graphs[0]
        pairs = queries()
        expected = [dijkstra(graph, s, e) for s, e in pairs]

        with ThreadPoolExecutor(max_workers=4) as executor:
            actual = list(executor.map(lambda pair: dijkstra(graph, *pair), pairs))

        assert actual == expected
