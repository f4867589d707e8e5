"""Breadth-first and depth-first traversal over any graph type."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from graphkit.graph import Graph

__all__ = ["BFSResult", "DFSResult", "bfs", "bfs_shortest_path", "dfs", "is_connected"]


@dataclass
class BFSResult:
    """Outcome of a breadth-first search.

    ``distance`` holds the hop count from the start (-1 if unreachable) and
    ``parent`` the predecessor of each vertex (-1 if none).
    """

    visit_order: list[int] = field(default_factory=list)
    distance: list[int] = field(default_factory=list)
    parent: list[int] = field(default_factory=list)


@dataclass
class DFSResult:
    """Outcome of a depth-first search."""

    visit_order: list[int] = field(default_factory=list)
    parent: list[int] = field(default_factory=list)
    visited: list[bool] = field(default_factory=list)


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < graph.num_vertices:
        raise IndexError("Vertex index out of range")


def bfs(graph: Graph, start: int) -> BFSResult:
    """Visit every vertex reachable from ``start`` in breadth-first order."""
    _check_start(graph, start)
    n = graph.num_vertices
    result = BFSResult(distance=[-1] * n, parent=[-1] * n)
    result.distance[start] = 0

    queue = deque([start])
    while queue:
        u = queue.popleft()
        result.visit_order.append(u)
        for v in graph.neighbors(u):
            if result.distance[v] == -1:
                result.distance[v] = result.distance[u] + 1
                result.parent[v] = u
                queue.append(v)
    return result


def _trace_back(parent: list[int], end: int) -> list[int]:
    path = []
    v = end
    while v != -1:
        path.append(v)
        v = parent[v]
    path.reverse()
    return path


def bfs_shortest_path(graph: Graph, start: int, end: int) -> list[int]:
    """Return a path with the fewest edges from ``start`` to ``end``, or ``[]``."""
    result = bfs(graph, start)
    if result.distance[end] == -1:
        return []
    return _trace_back(result.parent, end)


def dfs(graph: Graph, start: int) -> DFSResult:
    """Visit every vertex reachable from ``start`` in depth-first order."""
    _check_start(graph, start)
    n = graph.num_vertices
    result = DFSResult(parent=[-1] * n, visited=[False] * n)

    result.visited[start] = True
    result.visit_order.append(start)
    stack: list[Iterator[int]] = [iter(graph.neighbors(start))]
    current: list[int] = [start]
    while stack:
        u = current[-1]
        for v in stack[-1]:
            if not result.visited[v]:
                result.parent[v] = u
                result.visited[v] = True
                result.visit_order.append(v)
                stack.append(iter(graph.neighbors(v)))
                current.append(v)
                break
        else:
            stack.pop()
            current.pop()
    return result


def is_connected(graph: Graph, start: int = 0) -> bool:
    """Return whether every vertex is reachable from ``start``."""
    return all(dfs(graph, start).visited)