import pytest

from graphkit.graph import WeightedUndirectedGraph
from graphkit.kruskal import MSTEdge, UnionFind, kruskal


def _graph(n, edges):
    g = WeightedUndirectedGraph(n)
    for edge in edges:
        g.add_edge(*edge)
    return g


_SQUARE = [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0), (0, 3, 10.0)]


def test_mst_has_n_minus_one_edges_and_correct_weight():
    r = kruskal(_graph(4, _SQUARE))
    assert len(r.edges) == 3
    assert r.total_weight == pytest.approx(6.0, abs=1e-9)


def test_mst_edges_are_sorted_and_exclude_heavy_edge():
    r = kruskal(_graph(4, _SQUARE))
    assert r.edges == [MSTEdge(0, 1, 1.0), MSTEdge(1, 2, 2.0), MSTEdge(2, 3, 3.0)]


def test_edges_are_reported_with_smaller_endpoint_first():
    r = kruskal(_graph(3, [(2, 0, 4.0), (2, 1, 1.0)]))
    assert sorted((e.u, e.v) for e in r.edges) == [(0, 2), (1, 2)]
    assert r.total_weight == pytest.approx(5.0)


@pytest.mark.parametrize(
    "n,edges,count,total",
    [
        (4, [(0, 1, 2.0), (2, 3, 5.0)], 2, 7.0),
        (1, [], 0, 0.0),
    ],
)
def test_forests_and_trivial_graphs(n, edges, count, total):
    r = kruskal(_graph(n, edges))
    assert len(r.edges) == count
    assert r.total_weight == pytest.approx(total)


def test_union_find_detects_cycle():
    uf = UnionFind(3)
    assert [uf.unite(0, 1), uf.unite(1, 2), uf.unite(0, 2)] == [True, True, False]
    assert uf.find(0) == uf.find(2)


def test_union_find_keeps_separate_sets_apart():
    uf = UnionFind(4)
    uf.unite(0, 1)
    uf.unite(2, 3)
    assert uf.find(0) == uf.find(1)
    assert uf.find(0) != uf.find(2)
    assert uf.find(3) == uf.find(2)