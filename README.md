# graphkit

Small, dependency-free graph structures and the classic algorithms that run on them.

## Graph types

All graphs have a fixed number of vertices, numbered `0 .. n-1`. A count that is not
positive raises `ValueError`, and a vertex index outside the range raises `IndexError`.
Adding an edge that is already present does nothing. Removing an edge that is not
present does nothing either.

| Class                     | Direction  | Weights |
|---------------------------|------------|---------|
| `UndirectedGraph`         | both ways  | no      |
| `DirectedGraph`           | one way    | no      |
| `WeightedUndirectedGraph` | both ways  | yes     |
| `WeightedDirectedGraph`   | one way    | yes     |

```python
from graphkit.graph import DirectedGraph, WeightedUndirectedGraph

g = DirectedGraph(3)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.has_edge(1, 0)                 # False
g.transpose().has_edge(1, 0)     # True
g.in_degree(2), g.out_degree(2)  # (1, 0)
g.num_vertices, g.num_edges      # (3, 2)

w = WeightedUndirectedGraph(3)
w.add_edge(0, 1, 4.5)
w.weight(1, 0)                   # 4.5
w.weight(0, 2)                   # raises EdgeNotFoundError
```

Every graph type has `add_edge`, `remove_edge`, `has_edge(u, v)`, `neighbors(u)`
(vertices in insertion order) and the properties `num_vertices` and `num_edges`.
`UndirectedGraph` adds `degree(u)`; `DirectedGraph` adds `in_degree(v)`,
`out_degree(u)` and `transpose()`; `WeightedDirectedGraph` adds `out_degree(u)`.
The weighted graphs take a weight in `add_edge(u, v, weight)`, return it from
`weight(u, v)`, and list their `Edge` records (`to`, `weight`) from `edges(u)`.
`EdgeNotFoundError` is a `LookupError`.

## Algorithms

```python
from graphkit.traversal import bfs, bfs_shortest_path, dfs, is_connected
from graphkit.dijkstra import dijkstra, dijkstra_path
from graphkit.kruskal import kruskal
from graphkit.topological import topological_sort
```

- `bfs(graph, start)` returns a `BFSResult` with `visit_order`, hop `distance`
  (`-1` for unreachable) and `parent` (`-1` for none). `bfs_shortest_path(graph, start, end)`
  gives the fewest-hop path, or an empty list when no path exists.
- `dfs(graph, start)` returns a `DFSResult` with `visit_order`, `parent` and `visited`;
  `is_connected(graph, start=0)` checks whether every vertex can be reached from `start`.
  Both traversals work on all four graph types and raise `IndexError` for a bad start.
- `dijkstra(graph, start)` works on both weighted graph types. It returns a
  `DijkstraResult` with `dist` (`math.inf` for unreachable) and `parent`.
  `dijkstra_path(result, end)` rebuilds the path, or returns an empty list.
- `kruskal(graph)` builds a minimum spanning tree of a `WeightedUndirectedGraph`.
  It returns a `KruskalResult` with its `edges` (`MSTEdge` records with `u < v`) and
  `total_weight`. A disconnected graph yields a spanning forest. The `UnionFind`
  structure it uses (`find`, `unite`) is available on its own.
- `topological_sort(graph)` orders a `DirectedGraph`. It returns a `TopoResult`
  whose `order` is empty and whose `has_cycle` flag is set when no order exists.

## Command-line demos

```
graphkit-demo
```

This builds one graph of each type and prints BFS, topological sort, MST and Dijkstra results.

```
graphkit-shortest-path
```

This prints the shortest road route from Berlin to München on a small built-in
network of German cities, and the distance from Berlin to each city.

Neither command takes arguments beyond `--help`.

## Limitations

- Graphs live in memory only; there is no reading or writing of graph files.
- `dijkstra` does not check for negative weights; with them its results are wrong.
- The vertex count is fixed when a graph is created.

## Tests

```
pip install -e .[test]
pytest
```