"""Graph data structures with traversal, shortest-path, spanning-tree and ordering algorithms."""

__version__ = "1.0.0"

__all__ = ["graph", "traversal", "dijkstra", "kruskal", "topological"]