"""Topological ordering of directed graphs."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from graphkit.graph import DirectedGraph

__all__ = ["TopoResult", "topological_sort"]


class _Mark(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


@dataclass
class TopoResult:
    """Vertices in topological order; ``order`` is empty when ``has_cycle``."""

    order: list[int] = field(default_factory=list)
    has_cycle: bool = False


def topological_sort(graph: DirectedGraph) -> TopoResult:
    """Order vertices so every edge points forward, or report a cycle."""
    n = graph.num_vertices
    marks = [_Mark.UNVISITED] * n
    finished: list[int] = []

    for root in range(n):
        if marks[root] is not _Mark.UNVISITED:
            continue
        marks[root] = _Mark.IN_PROGRESS
        path = [root]
        iterators: list[Iterator[int]] = [iter(graph.neighbors(root))]
        while iterators:
            for v in iterators[-1]:
                if marks[v] is _Mark.IN_PROGRESS:
                    return TopoResult(has_cycle=True)
                if marks[v] is _Mark.UNVISITED:
                    marks[v] = _Mark.IN_PROGRESS
                    path.append(v)
                    iterators.append(iter(graph.neighbors(v)))
                    break
            else:
                iterators.pop()
                u = path.pop()
                marks[u] = _Mark.DONE
                finished.append(u)

    return TopoResult(order=finished[::-1])