import networkx as nx
import numpy as np
import pytest

from cleave.utils.graph import (
    DirectedGraph,
    group_nodes_by_community,
    map_community_labels,
    partition_matrix_to_vector,
    partition_vector_to_2d_matrix,
)


def test_partition_vector_roundtrip():
    labels = np.array([0, 0, 1, 2, 2])
    z = partition_vector_to_2d_matrix(labels)
    got = partition_matrix_to_vector(z)
    assert got.shape == labels.shape
    assert np.all(z == partition_vector_to_2d_matrix(got))


def test_group_nodes_by_community_orders_by_first_appearance():
    community_map, communities = group_nodes_by_community(np.array([4, 4, 1, 4, 1, 7]))
    assert communities == [frozenset({0, 1, 3}), frozenset({2, 4}), frozenset({5})]
    assert community_map == {0: 1, 1: 1, 2: 2, 3: 1, 4: 2, 5: 3}
    assert map_community_labels(community_map, "abcdef") == {"a": 1, "b": 1, "c": 2, "d": 1, "e": 2, "f": 3}


def test_neighbour_enumeration_and_removal():
    graph = DirectedGraph.from_edges(3, [(0, 1, 2.0), (2, 1, 0.5)])
    assert graph.out_edges(0) == [(1, 2.0)]
    assert sorted(graph.in_edges(1)) == [(0, 2.0), (2, 0.5)]
    assert graph.has_edge(0, 1) and not graph.has_edge(1, 0)
    graph.remove_edge(0, 1)
    assert not graph.has_edge(0, 1)
    assert graph.in_edges(1) == [(2, 0.5)]
    assert graph.number_of_edges() == 1


@pytest.mark.parametrize(
    "edge",
    [(0, 0, 1.0), (0, 1, 0.0), (0, 1, -1.0), (0, 1, float("inf")), (0, 3, 1.0)],
)
def test_invalid_edges_are_rejected(edge):
    graph = DirectedGraph(3)
    with pytest.raises(ValueError):
        graph.add_edge(*edge)


def test_from_adjacency_keeps_direction_and_weight():
    A = np.array(
        [
            [0, 3, 0],
            [0, 0, 1],
            [0, 0, 0],
        ],
        dtype=float,
    )
    graph = DirectedGraph.from_adjacency(A)
    assert sorted(graph.edges()) == [(0, 1, 3.0), (1, 2, 1.0)]
    np.testing.assert_array_equal(graph.adjacency_matrix(), A)
    with pytest.raises(ValueError, match="square"):
        DirectedGraph.from_adjacency(np.zeros((2, 3)))


def test_from_networkx_relabels_and_symmetrizes():
    G = nx.Graph()
    G.add_edge("a", "b", weight=2.0)
    G.add_edge("b", "c")
    graph = DirectedGraph.from_networkx(G)
    assert graph.labels == ["a", "b", "c"]
    assert graph.number_of_edges() == 4
    assert graph.weight(1, 0) == 2.0
    assert graph.weight(2, 1) == 1.0
    unit = DirectedGraph.from_networkx(G, weight=None)
    assert unit.weight(0, 1) == 1.0


def test_copy_is_independent():
    graph = DirectedGraph.from_edges(2, [(0, 1)], labels=["x", "y"])
    clone = graph.copy()
    clone.remove_edge(0, 1)
    assert graph.has_edge(0, 1)
    assert clone.labels == ["x", "y"]
