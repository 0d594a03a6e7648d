"""Synthetic graphs with planted community structure."""

import networkx as nx
import numpy as np

from cleave.utils.graph import DirectedGraph


def build_planted_partition_graph(l, k, p_in, p_out, seed=None, connected=True):
    """Build a symmetric planted-partition graph.

    Args:
        l: Number of groups.
        k: Vertices per group.
        p_in: Probability of an edge inside a group.
        p_out: Probability of an edge between groups.
        seed: Random seed forwarded to networkx.
        connected: Add a path through each group and one edge between
            consecutive groups so the graph forms a single component.

    Returns:
        Tuple of ``(graph, labels_gt)``.
    """
    G = nx.planted_partition_graph(l, k, p_in, p_out, seed=seed)
    if connected:
        for group in range(l):
            first = group * k
            nx.add_path(G, range(first, first + k))
            if group + 1 < l:
                G.add_edge(first + k - 1, first + k)
    graph = DirectedGraph.from_networkx(G, weight=None)
    labels_gt = np.repeat(np.arange(l), k)
    return graph, labels_gt


def build_bridged_cliques_graph(n_cliques, size, bidirectional_bridges=False):
    """Build cliques chained by single bridge edges.

    Clique ``c`` holds vertices ``c*size .. (c+1)*size - 1`` with arcs in both
    directions; the last vertex of clique ``c`` links to the first vertex of
    clique ``c+1``.

    Returns:
        Tuple of ``(graph, labels_gt)``.
    """
    if size < 2:
        raise ValueError(f"Cliques need at least 2 vertices, got {size}.")
    graph = DirectedGraph(n_cliques * size)
    for c in range(n_cliques):
        members = range(c * size, (c + 1) * size)
        for u in members:
            for v in members:
                if u != v:
                    graph.add_edge(u, v)
        if c + 1 < n_cliques:
            graph.add_edge((c + 1) * size - 1, (c + 1) * size)
            if bidirectional_bridges:
                graph.add_edge((c + 1) * size, (c + 1) * size - 1)
    labels_gt = np.repeat(np.arange(n_cliques), size)
    return graph, labels_gt
