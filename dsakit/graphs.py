"""Graph traversals, cycle checks, components, spanning trees and topological orders."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from operator import itemgetter


class CycleError(ValueError):
    """The graph has a cycle where an acyclic one is required."""


def bfs(graph: Mapping[Hashable, Iterable], start) -> list:
    """Nodes reachable from ``start`` in breadth-first order, neighbours ascending."""
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in sorted(graph.get(node, ())):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(graph: Mapping[Hashable, Iterable], start) -> list:
    """Nodes reachable from ``start`` in depth-first preorder, neighbours ascending."""
    visited = {start}
    order = [start]
    stack = [iter(sorted(graph.get(start, ())))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(sorted(graph.get(neighbour, ()))))
                break
        else:
            stack.pop()
    return order


def is_bipartite(adjacency: Sequence[Iterable[int]]) -> bool:
    """True if the undirected graph's nodes split into two sides with no edge inside one."""
    colour: list[int | None] = [None] * len(adjacency)
    for start in range(len(adjacency)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = colour[node] ^ 1
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def _postorder(
    roots: Iterable, neighbours: Callable[[Hashable], Iterable]
) -> list:
    """Depth-first finishing order from each unvisited root; raises CycleError on a back edge."""
    state: dict = {}
    finished = []
    for root in roots:
        if root in state:
            continue
        state[root] = 1
        stack = [(root, iter(neighbours(root)))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                seen = state.get(neighbour)
                if seen == 1:
                    raise CycleError(f"cycle through node {neighbour!r}")
                if seen is None:
                    state[neighbour] = 1
                    stack.append((neighbour, iter(neighbours(neighbour))))
                    break
            else:
                state[node] = 2
                finished.append(node)
                stack.pop()
    return finished


def has_cycle_directed(adjacency: Sequence[Iterable[int]]) -> bool:
    """True if the directed graph with nodes ``0 .. n-1`` has a cycle."""
    try:
        _postorder(range(len(adjacency)), adjacency.__getitem__)
    except CycleError:
        return True
    return False


def has_cycle_undirected(adjacency: Sequence[Iterable[int]]) -> bool:
    """True if the undirected graph has a cycle; edges back to the parent are ignored."""
    visited = [False] * len(adjacency)
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, None, iter(adjacency[start]))]
        while stack:
            node, parent, pending = stack[-1]
            for neighbour in pending:
                if neighbour == parent:
                    continue
                if visited[neighbour]:
                    return True
                visited[neighbour] = True
                stack.append((neighbour, node, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()
    return False


def connected_components(edges: Iterable[tuple]) -> dict:
    """Map each node of an undirected edge list to its component number.

    Components are numbered from 1, in ascending order of their smallest node.
    """
    graph: dict = {}
    for u, v in edges:
        graph.setdefault(u, set()).add(v)
        graph.setdefault(v, set()).add(u)
    component: dict = {}
    count = 0
    for node in sorted(graph):
        if node in component:
            continue
        count += 1
        component[node] = count
        stack = [node]
        while stack:
            current = stack.pop()
            for neighbour in graph[current]:
                if neighbour not in component:
                    component[neighbour] = count
                    stack.append(neighbour)
    return {node: component[node] for node in sorted(component)}


def all_paths(
    adjacency: Sequence[Iterable[int]], source: int, target: int
) -> Iterator[list[int]]:
    """Yield every simple path from ``source`` to ``target`` in a directed graph."""
    path: list[int] = []
    on_path: set[int] = set()

    def walk(node: int) -> Iterator[list[int]]:
        if node == target:
            yield [*path, node]
            return
        on_path.add(node)
        path.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in on_path:
                yield from walk(neighbour)
        path.pop()
        on_path.discard(node)

    yield from walk(source)


def kruskal(node_count: int, edges: Iterable[tuple]) -> tuple:
    """Minimum spanning forest by Kruskal's algorithm.

    Nodes are labelled ``0 .. node_count`` (so 1-based labels work too).
    Returns ``(total_weight, chosen_edges)`` with edges as ``(u, v, weight)``.
    """
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u <= node_count and 0 <= v <= node_count):
            raise ValueError(f"edge ({u}, {v}) has a node out of range")
    parent = list(range(node_count + 1))

    def find(node: int) -> int:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    total = 0
    chosen = []
    for u, v, weight in sorted(edge_list, key=itemgetter(2)):
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            parent[max(root_u, root_v)] = min(root_u, root_v)
            total += weight
            chosen.append((u, v, weight))
    return total, chosen


def prim(matrix: Sequence[Sequence]) -> list[tuple]:
    """Minimum spanning tree of a connected graph given as a weight matrix.

    A zero entry means no edge. Returns ``(parent, node, weight)`` for every
    node except node 0, in node order.
    """
    n = len(matrix)
    if n == 0:
        return []
    distance: list = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    distance[0] = 0
    for _ in range(n - 1):
        best, u = min((distance[i], i) for i in range(n) if not in_tree[i])
        if best == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v in range(n):
            weight = matrix[u][v]
            if not in_tree[v] and weight and weight < distance[v]:
                parent[v] = u
                distance[v] = weight
    if any(parent[i] is None for i in range(1, n)):
        raise ValueError("graph is not connected")
    return [(parent[i], i, matrix[i][parent[i]]) for i in range(1, n)]


def topological_sort_dfs(node_count: int, edges: Iterable[tuple]) -> list[int]:
    """Topological order of nodes ``1 .. node_count`` by depth-first search.

    Raises CycleError if the graph has a cycle.
    """
    graph: dict[int, set[int]] = {}
    for u, v in edges:
        if not (1 <= u <= node_count and 1 <= v <= node_count):
            raise ValueError(f"edge ({u}, {v}) has a node out of range")
        graph.setdefault(u, set()).add(v)
    finished = _postorder(
        range(node_count, 0, -1),
        lambda node: sorted(graph.get(node, ()), reverse=True),
    )
    return finished[::-1]


def topological_sort_kahn(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Lexicographically smallest topological order of nodes ``0 .. n-1``.

    Raises CycleError if the graph has a cycle.
    """
    n = len(adjacency)
    indegree = [0] * n
    for targets in adjacency:
        for v in targets:
            indegree[v] += 1
    ready = [node for node in range(n) if indegree[node] == 0]
    heapq.heapify(ready)
    order = []
    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for v in adjacency[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                heapq.heappush(ready, v)
    if len(order) != n:
        raise CycleError("graph is not acyclic")
    return order