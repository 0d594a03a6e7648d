import numpy as np

from cleave.algorithms.centrality import count_edge_passes, edge_betweenness_centrality, reconstruct_all_paths
from cleave.algorithms.shortest_paths import floyd_warshall
from cleave.case_studies.planted import build_bridged_cliques_graph
from cleave.types import NOT_AN_EDGE
from cleave.utils.graph import DirectedGraph


def test_directed_path_counts():
    graph = DirectedGraph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
    values = edge_betweenness_centrality(graph).values
    assert values[0, 1] == 3.0
    # (0,2), (0,3), (1,2), (1,3)
    assert values[1, 2] == 4.0
    assert values[2, 3] == 3.0


def test_non_edges_score_minus_one():
    graph = DirectedGraph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
    values = edge_betweenness_centrality(graph).values
    mask = np.ones((4, 4), dtype=bool)
    mask[0, 1] = mask[1, 2] = mask[2, 3] = False
    assert np.all(values[mask] == NOT_AN_EDGE)


def test_edge_on_no_shortest_path_scores_zero():
    graph = DirectedGraph.from_edges(3, [(0, 1, 1.0), (1, 2, 1.0), (0, 2, 5.0)])
    evs = edge_betweenness_centrality(graph)
    assert evs.values[0, 2] == 0.0
    assert evs.values[0, 1] == 2.0
    assert evs.values[1, 2] == 2.0
    assert evs.scored_edges() == {(0, 1): 2.0, (0, 2): 0.0, (1, 2): 2.0}


def test_bridge_dominates_intra_triangle_edges():
    graph, _ = build_bridged_cliques_graph(2, 3)
    evs = edge_betweenness_centrality(graph)
    bridge = evs.values[2, 3]
    assert bridge == 9.0
    others = [score for edge, score in evs.scored_edges().items() if edge != (2, 3)]
    assert max(others) < bridge
    assert evs.argmax() == (2, 3, 9.0)


def test_precomputed_paths_give_same_scores():
    graph, _ = build_bridged_cliques_graph(2, 3, bidirectional_bridges=True)
    paths = floyd_warshall(graph)
    np.testing.assert_array_equal(
        edge_betweenness_centrality(graph, paths).values,
        edge_betweenness_centrality(graph).values,
    )


def test_argmax_breaks_ties_in_row_major_order():
    graph, _ = build_bridged_cliques_graph(2, 3, bidirectional_bridges=True)
    evs = edge_betweenness_centrality(graph)
    assert evs.values[2, 3] == evs.values[3, 2] == 9.0
    assert evs.argmax() == (2, 3, 9.0)


def test_argmax_without_edges_is_none():
    assert edge_betweenness_centrality(DirectedGraph(3)).argmax() is None
    assert edge_betweenness_centrality(DirectedGraph(0)).argmax() is None


def test_count_edge_passes_over_reconstructed_paths():
    graph = DirectedGraph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
    all_hops = reconstruct_all_paths(floyd_warshall(graph))
    assert len(all_hops) == 16
    assert count_edge_passes(all_hops, 1, 2) == 4.0
    assert count_edge_passes(all_hops, 3, 2) == 0.0
    # each pair's path contributes one pass per hop
    assert sum(len(hops) for hops in all_hops) == 3 + 4 + 3
