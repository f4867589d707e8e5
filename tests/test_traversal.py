import pytest

from graphkit.graph import DirectedGraph, UndirectedGraph, WeightedUndirectedGraph
from graphkit.traversal import bfs, bfs_shortest_path, dfs, is_connected


def _make(cls, n, edges):
    g = cls(n)
    for edge in edges:
        g.add_edge(*edge)
    return g


def _chain(n):
    return _make(DirectedGraph, n, [(u, u + 1) for u in range(n - 1)])


def test_bfs_correct_distances_on_small_graph():
    g = _make(UndirectedGraph, 5, [(0, 1), (1, 2), (0, 3), (3, 4)])
    assert bfs(g, 0).distance == [0, 1, 2, 1, 2]


def test_bfs_shortest_path_reconstruction():
    g = _make(UndirectedGraph, 4, [(0, 1), (1, 3), (0, 2), (2, 3)])
    path = bfs_shortest_path(g, 0, 3)
    assert (path[0], path[-1], len(path)) == (0, 3, 3)


def test_bfs_unreachable_node():
    g = _make(UndirectedGraph, 3, [(0, 1)])
    r = bfs(g, 0)
    assert (r.distance[2], r.parent[2]) == (-1, -1)
    assert bfs_shortest_path(g, 0, 2) == []


def test_bfs_visit_order_and_parents():
    r = bfs(_make(UndirectedGraph, 4, [(0, 1), (0, 2), (1, 3)]), 0)
    assert r.visit_order == [0, 1, 2, 3]
    assert r.parent == [-1, 0, 0, 1]


def test_bfs_on_weighted_graph_uses_neighbors():
    g = _make(WeightedUndirectedGraph, 3, [(0, 1, 5.0), (1, 2, 1.0)])
    assert bfs_shortest_path(g, 0, 2) == [0, 1, 2]


@pytest.mark.parametrize("search,start", [(bfs, 2), (dfs, -1)])
def test_search_rejects_bad_start(search, start):
    with pytest.raises(IndexError):
        search(UndirectedGraph(2), start)


def test_dfs_all_reachable_nodes_visited():
    r = dfs(_make(UndirectedGraph, 4, [(0, 1), (1, 2), (2, 3)]), 0)
    assert r.visited == [True, True, True, True]
    assert r.visit_order == [0, 1, 2, 3]


def test_dfs_goes_deep_before_wide():
    r = dfs(_make(DirectedGraph, 5, [(0, 1), (0, 2), (1, 3), (3, 4)]), 0)
    assert r.visit_order == [0, 1, 3, 4, 2]
    assert r.parent == [-1, 0, 0, 1, 3]


def test_dfs_long_chain_does_not_overflow():
    assert dfs(_chain(5000), 0).visit_order == list(range(5000))


def test_is_connected_connected_and_disconnected():
    assert is_connected(_make(UndirectedGraph, 3, [(0, 1), (1, 2)])) is True
    assert is_connected(_make(UndirectedGraph, 3, [(0, 1)])) is False


def test_is_connected_depends_on_start_in_directed_graph():
    g = _chain(2)
    assert is_connected(g, 0) is True
    assert is_connected(g, 1) is False