import math
import random

import pytest

from dsakit.shortest_paths import (
    AllPairs,
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    dijkstra_quadratic,
    floyd_warshall,
)


def random_graph(seed, nodes=8, edges=20, low=0, high=9):
    rng = random.Random(seed)
    return [
        (rng.randrange(nodes), rng.randrange(nodes), rng.randint(low, high))
        for _ in range(edges)
    ]


def adjacency_of(nodes, edges):
    adjacency = [[] for _ in range(nodes)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
    return adjacency


def lightest(edges):
    weights = {}
    for u, v, w in edges:
        weights[(u, v)] = min(w, weights.get((u, v), math.inf))
    return weights


def path_weight(path, weights):
    return sum(weights[(a, b)] for a, b in zip(path, path[1:]))


@pytest.mark.parametrize("seed", range(6))
def test_algorithms_agree(seed):
    nodes = 8
    edges = random_graph(seed, nodes)
    adjacency = adjacency_of(nodes, edges)
    heap = dijkstra(adjacency, 0)
    scan = dijkstra_quadratic(adjacency, 0)
    bf = bellman_ford(nodes, edges, 0)
    fw = floyd_warshall(nodes, edges)
    assert heap.distances == scan.distances == bf.distances
    assert fw.distances[0] == heap.distances
    assert not fw.has_negative_cycle


@pytest.mark.parametrize("seed", range(6))
def test_paths_have_the_reported_weight(seed):
    nodes = 8
    edges = random_graph(seed, nodes)
    weights = lightest(edges)
    adjacency = adjacency_of(nodes, edges)
    result = dijkstra(adjacency, 0)
    fw = floyd_warshall(nodes, edges)
    for target in range(nodes):
        if result.distances[target] == math.inf:
            with pytest.raises(ValueError):
                result.path_to(target)
            continue
        path = result.path_to(target)
        assert path[0] == 0 and path[-1] == target
        assert path_weight(path, weights) == result.distances[target]
        all_pairs_path = fw.path(0, target)
        assert path_weight(all_pairs_path, weights) == fw.distances[0][target]


@pytest.mark.parametrize("seed", range(4))
def test_target_stops_early_with_final_distance(seed):
    nodes = 8
    edges = random_graph(seed, nodes)
    adjacency = adjacency_of(nodes, edges)
    full = dijkstra(adjacency, 0)
    for target in range(nodes):
        assert dijkstra(adjacency, 0, target).distances[target] == full.distances[target]
        assert (
            dijkstra_quadratic(adjacency, 0, target).distances[target]
            == full.distances[target]
        )


def test_unreachable_is_infinite():
    edges = [(0, 1, 4)]
    result = bellman_ford(3, edges, 0)
    assert result.distances[2] == math.inf
    assert result.predecessors[2] is None
    with pytest.raises(ValueError):
        result.path_to(2)


def test_bellman_ford_handles_negative_edges():
    edges = [(0, 1, 5), (0, 2, 2), (2, 1, -4)]
    weights = lightest(edges)
    result = bellman_ford(3, edges, 0)
    path = result.path_to(1)
    assert path_weight(path, weights) == result.distances[1]
    assert result.distances[1] == weights[(0, 2)] + weights[(2, 1)]


def test_bellman_ford_reports_negative_cycle():
    cycle_nodes = {1, 2}
    edges = [(0, 1, 1), (1, 2, -1), (2, 1, -1)]
    weights = lightest(edges)
    with pytest.raises(NegativeCycleError) as info:
        bellman_ford(3, edges, 0)
    cycle = info.value.cycle
    assert set(cycle) == cycle_nodes
    closed = cycle + cycle[:1]
    assert path_weight(closed, weights) < 0


def test_bellman_ford_rejects_bad_source():
    with pytest.raises(IndexError):
        bellman_ford(2, [], 5)


def test_floyd_warshall_negative_cycle():
    edges = [(0, 1, 1), (1, 2, -1), (2, 1, -1)]
    result = floyd_warshall(4, edges)
    assert isinstance(result, AllPairs)
    assert result.has_negative_cycle
    assert result.distances[0][2] == -math.inf
    assert result.distances[3][3] == 0
    assert result.distances[0][3] == math.inf
    with pytest.raises(NegativeCycleError):
        result.path(0, 2)
    with pytest.raises(ValueError):
        result.path(0, 3)


def test_floyd_warshall_path_to_self():
    result = floyd_warshall(2, [(0, 1, 3)])
    assert result.path(1, 1) == [1]
    assert result.path(0, 1) == [0, 1]