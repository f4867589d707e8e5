"""Shortest road route between German cities using Dijkstra's algorithm."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from graphkit.dijkstra import dijkstra, dijkstra_path
from graphkit.graph import WeightedUndirectedGraph

__all__ = ["main"]

_CITIES = ["Berlin", "Hamburg", "Hannover", "Frankfurt", "München"]

_ROADS = [
    (0, 1, 288.0),
    (0, 2, 248.0),
    (1, 2, 151.0),
    (2, 3, 357.0),
    (3, 4, 304.0),
    (2, 4, 600.0),
]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shortest route from Berlin to München and all distances."""
    argparse.ArgumentParser(
        description="Find the shortest road route in a small city network."
    ).parse_args(argv)

    roads = WeightedUndirectedGraph(len(_CITIES))
    for u, v, km in _ROADS:
        roads.add_edge(u, v, km)

    start, end = 0, 4
    result = dijkstra(roads, start)

    print(f"Kürzester Weg von {_CITIES[start]} nach {_CITIES[end]}:")
    print(" -> ".join(_CITIES[v] for v in dijkstra_path(result, end)))
    print(f"Gesamtdistanz: {result.dist[end]:g} km")

    print(f"\nAlle Distanzen von {_CITIES[start]}:")
    for city, distance in zip(_CITIES, result.dist):
        print(f"  {_CITIES[start]} -> {city}: {distance:g} km")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())