import networkx as nx
import pytest

from cleave.dendrogram import ROOT, Dendrogram


def _small_tree():
    d = Dendrogram()
    left, right = d.add_children(d.root, 2, 3)
    d.add_children(left, 0, 2)
    d.add_children(right, 3, 5)
    return d


def test_new_dendrogram_is_single_root_leaf():
    d = Dendrogram()
    assert len(d) == 1
    assert d[d.root].vertex == ROOT
    assert d.leaves() == [d.root]
    assert d.internal_nodes() == []
    assert d.to_nested() == ROOT


def test_add_children_and_preorder():
    d = _small_tree()
    assert len(d) == 7
    assert [d[i].vertex for i in d.iter_preorder()] == [ROOT, 2, 0, 2, 3, 3, 5]
    assert d.leaf_vertices() == [0, 2, 3, 5]
    assert len(d.internal_nodes()) == 3
    assert d.to_nested() == (ROOT, (2, 0, 2), (3, 3, 5))


def test_find_leaf_skips_internal_nodes_with_same_vertex():
    d = _small_tree()
    index = d.find_leaf(2)
    assert d[index].vertex == 2
    assert d[index].is_leaf
    assert d.depth(index) == 2
    assert d.find_leaf(7) is None


def test_children_cannot_be_replaced():
    d = _small_tree()
    with pytest.raises(RuntimeError, match="already has children"):
        d.add_children(d.root, 0, 1)


def test_every_non_root_node_has_one_parent():
    d = _small_tree()
    T = d.to_networkx()
    assert nx.is_arborescence(T)
    assert d.parent_of_node(d.root) is None
    for index in range(1, len(d)):
        assert T.in_degree(index) == 1
        assert d.parent_of_node(index) == next(iter(T.predecessors(index)))
