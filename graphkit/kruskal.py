"""Kruskal's minimum spanning tree for weighted undirected graphs."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphkit.graph import WeightedUndirectedGraph

__all__ = ["UnionFind", "MSTEdge", "KruskalResult", "kruskal"]


class UnionFind:
    """Disjoint sets over ``0 .. n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if already joined."""
        pu, pv = self.find(u), self.find(v)
        if pu == pv:
            return False
        if self._rank[pu] < self._rank[pv]:
            pu, pv = pv, pu
        self._parent[pv] = pu
        if self._rank[pu] == self._rank[pv]:
            self._rank[pu] += 1
        return True


@dataclass(frozen=True)
class MSTEdge:
    """An edge chosen for the spanning tree, with ``u < v``."""

    u: int
    v: int
    weight: float


@dataclass
class KruskalResult:
    """Edges of the spanning tree (or forest) and their summed weight."""

    edges: list[MSTEdge] = field(default_factory=list)
    total_weight: float = 0.0


def kruskal(graph: WeightedUndirectedGraph) -> KruskalResult:
    """Build a minimum spanning tree; a disconnected graph yields a forest."""
    n = graph.num_vertices
    candidates = sorted(
        (
            MSTEdge(u, edge.to, edge.weight)
            for u in range(n)
            for edge in graph.edges(u)
            if u < edge.to
        ),
        key=lambda e: e.weight,
    )

    sets = UnionFind(n)
    result = KruskalResult()
    for edge in candidates:
        if sets.unite(edge.u, edge.v):
            result.edges.append(edge)
            result.total_weight += edge.weight
            if len(result.edges) == n - 1:
                break
    return result