import networkx as nx
import numpy as np
import pytest

from cleave.algorithms.centrality import edge_betweenness_centrality
from cleave.algorithms.girvan_newman import label_components
from cleave.algorithms.shortest_paths import floyd_warshall, path_weight, reconstruct_path
from cleave.utils.graph import DirectedGraph


def _random_digraph(n, p, seed):
    # Real-valued weights keep every shortest path unique.
    rng = np.random.default_rng(seed)
    G = nx.gnp_random_graph(n, p, seed=seed, directed=True)
    for u, v in G.edges():
        G[u][v]["weight"] = float(rng.uniform(1.0, 2.0))
    return G, DirectedGraph.from_networkx(G)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_floyd_warshall_matches_networkx(seed):
    G, graph = _random_digraph(12, 0.25, seed)
    paths = floyd_warshall(graph)
    expected = nx.floyd_warshall_numpy(G, nodelist=range(12), weight="weight")
    np.testing.assert_allclose(paths.dist, expected)

    for s in range(12):
        for t in range(12):
            path = reconstruct_path(paths, s, t)
            if np.isinf(expected[s, t]):
                assert path == []
            else:
                assert path_weight(graph, path) == pytest.approx(expected[s, t])


@pytest.mark.parametrize("seed", [3, 4])
def test_edge_betweenness_matches_networkx(seed):
    G, graph = _random_digraph(10, 0.3, seed)
    evs = edge_betweenness_centrality(graph)
    expected = nx.edge_betweenness_centrality(G, normalized=False, weight="weight")
    scored = evs.scored_edges()
    assert set(scored) == set(expected)
    for edge, value in expected.items():
        assert scored[edge] == pytest.approx(value)


def test_components_match_weakly_connected_components():
    G, graph = _random_digraph(20, 0.05, 5)
    component_of, n_components = label_components(graph)
    expected = list(nx.weakly_connected_components(G))
    assert n_components == len(expected)
    for members in expected:
        assert len({int(component_of[v]) for v in members}) == 1
