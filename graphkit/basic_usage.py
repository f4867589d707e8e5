"""Demonstration of the four graph types and the algorithms over them."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from graphkit.dijkstra import dijkstra
from graphkit.graph import (
    DirectedGraph,
    UndirectedGraph,
    WeightedDirectedGraph,
    WeightedUndirectedGraph,
)
from graphkit.kruskal import kruskal
from graphkit.topological import topological_sort
from graphkit.traversal import bfs

__all__ = ["main"]


def _print_values(label: str, values: Sequence[int]) -> None:
    print(f"{label}: " + "".join(f"{x} " for x in values))


def main(argv: Sequence[str] | None = None) -> int:
    """Build one graph of each type and print what the algorithms find."""
    argparse.ArgumentParser(
        description="Show the graph types and algorithms on small examples."
    ).parse_args(argv)

    print("=== Ungerichteter Graph (ohne Gewicht) ===")
    ug = UndirectedGraph(5)
    for u, v in [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)]:
        ug.add_edge(u, v)
    bfs_result = bfs(ug, 0)
    _print_values("BFS Reihenfolge", bfs_result.visit_order)
    _print_values("BFS Distanzen  ", bfs_result.distance)

    print("\n=== Gerichteter Graph (ohne Gewicht) ===")
    dg = DirectedGraph(4)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 3)]:
        dg.add_edge(u, v)
    _print_values("Topolog. Sort  ", topological_sort(dg).order)

    print("\n=== Ungerichteter Graph (mit Gewicht) ===")
    wug = WeightedUndirectedGraph(4)
    for u, v, w in [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0), (0, 3, 10.0)]:
        wug.add_edge(u, v, w)
    mst = kruskal(wug)
    print(f"MST Gesamtgewicht: {mst.total_weight:g}")
    for edge in mst.edges:
        print(f"  {edge.u}--{edge.v} ({edge.weight:g})")

    print("\n=== Gerichteter Graph (mit Gewicht) ===")
    wdg = WeightedDirectedGraph(4)
    for u, v, w in [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 10.0), (2, 3, 1.0)]:
        wdg.add_edge(u, v, w)
    result = dijkstra(wdg, 0)
    print("Dijkstra von Knoten 0:")
    for i, d in enumerate(result.dist):
        print(f"  dist[{i}] = {d:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())