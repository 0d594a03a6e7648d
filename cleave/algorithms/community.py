"""Community extraction from Girvan-Newman split histories."""

from __future__ import annotations

import networkx as nx
import numpy as np

from cleave.utils.graph import group_nodes_by_community


def communities_from_labels(labels):
    """Group vertex ids by label, ordered by each community's smallest vertex."""
    _, communities = group_nodes_by_community(labels)
    return tuple(sorted(tuple(sorted(c)) for c in communities))


def partition_at(result, n_communities):
    """Return the labels of the first level with at least ``n_communities`` components.

    Falls back to the finest level reached when the run stopped earlier.
    """
    levels = result.levels()
    for labels in levels:
        if len(np.unique(labels)) >= n_communities:
            return labels
    return levels[-1]


def best_modularity_partition(graph, result, max_levels=None):
    """Search split levels and return the best modularity partition.

    Modularity is measured on the undirected view of ``graph`` (the graph
    before any edge was removed).
    """
    G = graph.to_undirected()
    levels = result.levels()
    if max_levels is not None:
        levels = levels[:max_levels]
    best_mod = -1.0
    best_communities = None
    best_labels = None
    for labels in levels:
        communities = communities_from_labels(labels)
        mod = nx.community.modularity(G, communities, weight="weight")
        if mod > best_mod:
            best_mod = mod
            best_communities = communities
            best_labels = labels
    return best_communities, best_labels, best_mod
