"""Zachary karate club case study."""

import networkx as nx
import numpy as np

from cleave.utils.graph import DirectedGraph


def build_karate_graph():
    """Build Zachary's karate club as a symmetric unit-weight directed graph.

    Returns:
        Tuple of ``(graph, labels_gt)`` where ``labels_gt`` is 0 for members of
        Mr. Hi's club and 1 for the Officer's.
    """
    G = nx.karate_club_graph()
    graph = DirectedGraph.from_networkx(G, weight=None)
    labels_gt = np.array([attrs["club"] != "Mr. Hi" for _, attrs in G.nodes(data=True)], dtype=int)
    return graph, labels_gt
