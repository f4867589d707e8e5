"""Adjacency-list graphs: undirected, directed, and their weighted variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "EdgeNotFoundError",
    "Edge",
    "Graph",
    "UndirectedGraph",
    "DirectedGraph",
    "WeightedDirectedGraph",
    "WeightedUndirectedGraph",
]


class EdgeNotFoundError(LookupError):
    """Raised when an edge that was asked for does not exist."""


@dataclass(frozen=True)
class Edge:
    """A weighted edge leading to vertex ``to``."""

    to: int
    weight: float


def _find_edge(edges: list[Edge], target: int) -> Edge | None:
    return next((e for e in edges if e.to == target), None)


class Graph(ABC):
    """Common interface of all graph types over vertices ``0 .. n-1``."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("Number of vertices must be positive")
        self._num_vertices = vertices

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return self._num_vertices

    @property
    @abstractmethod
    def num_edges(self) -> int:
        """Number of edges in the graph."""

    @abstractmethod
    def has_edge(self, u: int, v: int) -> bool:
        """Return whether an edge ``u -> v`` exists."""

    @abstractmethod
    def neighbors(self, u: int) -> list[int]:
        """Return the vertices adjacent to ``u``, in insertion order."""

    def _validate(self, *vertices: int) -> None:
        for v in vertices:
            if not 0 <= v < self._num_vertices:
                raise IndexError("Vertex index out of range")


class UndirectedGraph(Graph):
    """Unweighted graph whose edges go both ways."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self._adj: list[list[int]] = [[] for _ in range(vertices)]
        self._edge_count = 0

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge between ``u`` and ``v``; an existing edge is kept."""
        if self.has_edge(u, v):
            return
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._edge_count += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge between ``u`` and ``v`` if it exists."""
        if not self.has_edge(u, v):
            return
        self._adj[u].remove(v)
        self._adj[v].remove(u)
        self._edge_count -= 1

    def has_edge(self, u: int, v: int) -> bool:
        self._validate(u, v)
        return v in self._adj[u]

    def neighbors(self, u: int) -> list[int]:
        self._validate(u)
        return list(self._adj[u])

    @property
    def num_edges(self) -> int:
        return self._edge_count

    def degree(self, u: int) -> int:
        """Number of edges touching ``u``."""
        self._validate(u)
        return len(self._adj[u])


class DirectedGraph(Graph):
    """Unweighted graph whose edges go one way only."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self._adj: list[list[int]] = [[] for _ in range(vertices)]
        self._edge_count = 0

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u -> v``; an existing edge is kept."""
        if self.has_edge(u, v):
            return
        self._adj[u].append(v)
        self._edge_count += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge ``u -> v`` if it exists."""
        if not self.has_edge(u, v):
            return
        self._adj[u].remove(v)
        self._edge_count -= 1

    def has_edge(self, u: int, v: int) -> bool:
        self._validate(u, v)
        return v in self._adj[u]

    def neighbors(self, u: int) -> list[int]:
        self._validate(u)
        return list(self._adj[u])

    @property
    def num_edges(self) -> int:
        return self._edge_count

    def out_degree(self, u: int) -> int:
        """Number of edges leaving ``u``."""
        self._validate(u)
        return len(self._adj[u])

    def in_degree(self, v: int) -> int:
        """Number of edges arriving at ``v``."""
        self._validate(v)
        return sum(v in targets for targets in self._adj)

    def transpose(self) -> DirectedGraph:
        """Return a new graph with every edge reversed."""
        reversed_graph = DirectedGraph(self.num_vertices)
        for u, targets in enumerate(self._adj):
            for v in targets:
                reversed_graph.add_edge(v, u)
        return reversed_graph


class WeightedDirectedGraph(Graph):
    """Directed graph with a float weight on every edge."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self._adj: list[list[Edge]] = [[] for _ in range(vertices)]
        self._edge_count = 0

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Add the edge ``u -> v`` with ``weight``; an existing edge is kept."""
        if self.has_edge(u, v):
            return
        self._adj[u].append(Edge(v, float(weight)))
        self._edge_count += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge ``u -> v`` if it exists."""
        self._validate(u, v)
        edge = _find_edge(self._adj[u], v)
        if edge is None:
            return
        self._adj[u].remove(edge)
        self._edge_count -= 1

    def has_edge(self, u: int, v: int) -> bool:
        self._validate(u, v)
        return _find_edge(self._adj[u], v) is not None

    def weight(self, u: int, v: int) -> float:
        """Return the weight of edge ``u -> v``."""
        self._validate(u, v)
        edge = _find_edge(self._adj[u], v)
        if edge is None:
            raise EdgeNotFoundError("Edge does not exist")
        return edge.weight

    def neighbors(self, u: int) -> list[int]:
        self._validate(u)
        return [e.to for e in self._adj[u]]

    def edges(self, u: int) -> list[Edge]:
        """Return the weighted edges leaving ``u``, in insertion order."""
        self._validate(u)
        return list(self._adj[u])

    @property
    def num_edges(self) -> int:
        return self._edge_count

    def out_degree(self, u: int) -> int:
        """Number of edges leaving ``u``."""
        self._validate(u)
        return len(self._adj[u])


class WeightedUndirectedGraph(Graph):
    """Undirected graph with a float weight on every edge."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self._adj: list[list[Edge]] = [[] for _ in range(vertices)]
        self._edge_count = 0

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Add the edge between ``u`` and ``v`` with ``weight``; an existing edge is kept."""
        if self.has_edge(u, v):
            return
        self._adj[u].append(Edge(v, float(weight)))
        self._adj[v].append(Edge(u, float(weight)))
        self._edge_count += 1

    def remove_edge(self, u: int, v: int) -> None:
        """Remove the edge between ``u`` and ``v`` if it exists."""
        self._validate(u, v)
        edge = _find_edge(self._adj[u], v)
        if edge is None:
            return
        self._adj[u].remove(edge)
        back = _find_edge(self._adj[v], u)
        if back is not None:
            self._adj[v].remove(back)
        self._edge_count -= 1

    def has_edge(self, u: int, v: int) -> bool:
        self._validate(u, v)
        return _find_edge(self._adj[u], v) is not None

    def weight(self, u: int, v: int) -> float:
        """Return the weight of the edge between ``u`` and ``v``."""
        self._validate(u, v)
        edge = _find_edge(self._adj[u], v)
        if edge is None:
            raise EdgeNotFoundError("Edge does not exist")
        return edge.weight

    def neighbors(self, u: int) -> list[int]:
        self._validate(u)
        return [e.to for e in self._adj[u]]

    def edges(self, u: int) -> list[Edge]:
        """Return the weighted edges touching ``u``, in insertion order."""
        self._validate(u)
        return list(self._adj[u])

    @property
    def num_edges(self) -> int:
        return self._edge_count