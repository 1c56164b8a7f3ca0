"""Single-source and all-pairs shortest paths on weighted directed graphs.

Graphs have nodes ``0 .. n-1``. Edges are ``(from, to, weight)`` triples;
adjacency lists hold ``(to, weight)`` pairs. Unreachable nodes are at
``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class NegativeCycleError(Exception):
    """A negative-weight cycle makes shortest distances undefined."""

    def __init__(self, message: str, cycle: list[int] | None = None) -> None:
        super().__init__(message)
        self.cycle = cycle


@dataclass
class ShortestPaths:
    """Distances and predecessors from one source node."""

    source: int
    distances: list
    predecessors: list

    def path_to(self, target: int) -> list[int]:
        """Nodes on a shortest path from the source to ``target``."""
        if self.distances[target] == math.inf:
            raise ValueError(f"node {target} is unreachable from {self.source}")
        path = []
        node: int | None = target
        while node is not None:
            path.append(node)
            node = self.predecessors[node]
        return path[::-1]


def _start(node_count: int, source: int) -> tuple[list, list]:
    if not 0 <= source < node_count:
        raise IndexError(f"source {source} is not a node")
    distances: list = [math.inf] * node_count
    distances[source] = 0
    return distances, [None] * node_count


def bellman_ford(node_count: int, edges: Iterable, source: int = 0) -> ShortestPaths:
    """Shortest paths allowing negative weights.

    Raises NegativeCycleError, carrying the cycle's nodes in edge order, if a
    negative cycle is reachable from ``source``.
    """
    edge_list = list(edges)
    distances, predecessors = _start(node_count, source)
    last_changed = None
    for _ in range(node_count):
        last_changed = None
        for u, v, weight in edge_list:
            if distances[u] < math.inf and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                predecessors[v] = u
                last_changed = v
        if last_changed is None:
            break
    if last_changed is not None:
        node = last_changed
        for _ in range(node_count):
            node = predecessors[node]
        cycle = [node]
        current = predecessors[node]
        while current != node:
            cycle.append(current)
            current = predecessors[current]
        cycle.reverse()
        raise NegativeCycleError("negative cycle reachable from the source", cycle)
    return ShortestPaths(source, distances, predecessors)


def dijkstra_quadratic(
    adjacency: Sequence[Iterable], source: int = 0, target: int | None = None
) -> ShortestPaths:
    """Dijkstra's algorithm by linear scans, O(n^2); stops once ``target`` is settled."""
    node_count = len(adjacency)
    distances, predecessors = _start(node_count, source)
    settled = [False] * node_count
    for _ in range(node_count):
        best, node = min(
            (distances[i], i) for i in range(node_count) if not settled[i]
        )
        if best == math.inf:
            break
        settled[node] = True
        for to, weight in adjacency[node]:
            if not settled[to] and distances[node] + weight < distances[to]:
                distances[to] = distances[node] + weight
                predecessors[to] = node
        if node == target:
            break
    return ShortestPaths(source, distances, predecessors)


def dijkstra(
    adjacency: Sequence[Iterable], source: int = 0, target: int | None = None
) -> ShortestPaths:
    """Dijkstra's algorithm with a binary heap; stops once ``target`` is settled."""
    distances, predecessors = _start(len(adjacency), source)
    heap = [(0, source)]
    while heap:
        best, node = heapq.heappop(heap)
        if best > distances[node]:
            continue
        for to, weight in adjacency[node]:
            candidate = distances[node] + weight
            if candidate < distances[to]:
                distances[to] = candidate
                predecessors[to] = node
                heapq.heappush(heap, (candidate, to))
        if node == target:
            break
    return ShortestPaths(source, distances, predecessors)


@dataclass
class AllPairs:
    """Distances between every pair of nodes and the first hop of each path.

    Pairs whose path can pass a negative cycle are at ``-math.inf``.
    """

    distances: list[list]
    next_hop: list[list]
    has_negative_cycle: bool

    def path(self, start: int, end: int) -> list[int]:
        """Nodes on a shortest path from ``start`` to ``end``."""
        distance = self.distances[start][end]
        if distance == -math.inf:
            raise NegativeCycleError(f"path {start}->{end} meets a negative cycle")
        if distance == math.inf:
            raise ValueError(f"node {end} is unreachable from {start}")
        path = [start]
        node = start
        while node != end:
            node = self.next_hop[node][end]
            path.append(node)
        return path


def floyd_warshall(node_count: int, edges: Iterable) -> AllPairs:
    """All-pairs shortest paths; the lightest of parallel edges is used."""
    distances: list[list] = [[math.inf] * node_count for _ in range(node_count)]
    next_hop: list[list] = [[None] * node_count for _ in range(node_count)]
    for i in range(node_count):
        distances[i][i] = 0
    for u, v, weight in edges:
        if weight < distances[u][v]:
            distances[u][v] = weight
            next_hop[u][v] = v
    for k in range(node_count):
        through = distances[k]
        for i in range(node_count):
            row = distances[i]
            if row[k] == math.inf:
                continue
            for j in range(node_count):
                if through[j] < math.inf and row[k] + through[j] < row[j]:
                    row[j] = row[k] + through[j]
                    next_hop[i][j] = next_hop[i][k]
    negative = [t for t in range(node_count) if distances[t][t] < 0]
    for i in range(node_count):
        for j in range(node_count):
            if any(
                distances[i][t] < math.inf and distances[t][j] < math.inf
                for t in negative
            ):
                distances[i][j] = -math.inf
                next_hop[i][j] = None
    return AllPairs(distances, next_hop, bool(negative))