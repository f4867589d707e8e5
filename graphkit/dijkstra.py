"""Dijkstra's shortest paths for graphs with non-negative edge weights."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field

from graphkit.graph import WeightedDirectedGraph, WeightedUndirectedGraph

__all__ = ["DijkstraResult", "dijkstra", "dijkstra_path"]


@dataclass
class DijkstraResult:
    """Shortest distances from the start (``inf`` if unreachable) and predecessors."""

    dist: list[float] = field(default_factory=list)
    parent: list[int] = field(default_factory=list)


def dijkstra(
    graph: WeightedDirectedGraph | WeightedUndirectedGraph, start: int
) -> DijkstraResult:
    """Compute shortest distances from ``start``; weights must not be negative."""
    n = graph.num_vertices
    if not 0 <= start < n:
        raise IndexError("Vertex index out of range")
    result = DijkstraResult(dist=[math.inf] * n, parent=[-1] * n)
    result.dist[start] = 0.0

    heap = [(0.0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > result.dist[u]:
            continue
        for edge in graph.edges(u):
            candidate = result.dist[u] + edge.weight
            if candidate < result.dist[edge.to]:
                result.dist[edge.to] = candidate
                result.parent[edge.to] = u
                heapq.heappush(heap, (candidate, edge.to))
    return result


def dijkstra_path(result: DijkstraResult, end: int) -> list[int]:
    """Return the shortest path to ``end`` from the search's start, or ``[]``."""
    if result.dist[end] == math.inf:
        return []
    path = []
    v = end
    while v != -1:
        path.append(v)
        v = result.parent[v]
    path.reverse()
    return path