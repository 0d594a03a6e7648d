"""Graph and partition utilities."""

from __future__ import annotations

import math

import networkx as nx
import numpy as np


class DirectedGraph:
    """Mutable weighted directed graph over the vertex ids ``0..N-1``.

    Thin adapter over :class:`networkx.DiGraph` exposing the contract the
    Girvan-Newman pipeline consumes (see :class:`cleave.types.GraphLike`).
    Self loops and non-positive or non-finite weights are rejected, since the
    shortest-path relaxation only accepts positive path sums.

    Parameters
    ----------
    n_vertices : int
        Number of vertices; ids are ``0..n_vertices-1``.
    labels : list or None
        Optional external node labels, indexed by vertex id.
    """

    def __init__(self, n_vertices: int = 0, labels=None):
        if n_vertices < 0:
            raise ValueError(f"n_vertices must be non-negative, got {n_vertices}.")
        self._graph = nx.DiGraph()
        self._graph.add_nodes_from(range(n_vertices))
        if labels is None:
            labels = list(range(n_vertices))
        if len(labels) != n_vertices:
            raise ValueError(f"labels length {len(labels)} != number of vertices {n_vertices}.")
        self.labels = list(labels)

    # ------------------------------ constructors ------------------------------

    @classmethod
    def from_edges(cls, n_vertices, edges, labels=None) -> "DirectedGraph":
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` tuples."""
        graph = cls(n_vertices, labels=labels)
        for edge in edges:
            if len(edge) == 2:
                graph.add_edge(edge[0], edge[1])
            else:
                graph.add_edge(edge[0], edge[1], edge[2])
        return graph

    @classmethod
    def from_adjacency(cls, A, labels=None) -> "DirectedGraph":
        """Build a graph from a weighted adjacency matrix; zero entries are non-edges."""
        A = np.asarray(A, dtype=float)
        if A.ndim != 2 or A.shape[0] != A.shape[1]:
            raise ValueError("NumPy adjacency must be a square 2D array.")
        G = nx.from_numpy_array(A, create_using=nx.DiGraph)
        graph = cls(A.shape[0], labels=labels)
        for u, v, attrs in G.edges(data=True):
            graph.add_edge(u, v, attrs["weight"])
        return graph

    @classmethod
    def from_networkx(cls, G, weight="weight") -> "DirectedGraph":
        """Relabel a networkx graph to ``0..N-1``; undirected edges become two arcs.

        Node labels are kept in ``graph.labels`` in ``G.nodes()`` order. Missing
        weights default to 1; ``weight=None`` ignores edge data altogether.
        """
        node_labels = list(G.nodes())
        index = {label: i for i, label in enumerate(node_labels)}
        graph = cls(len(node_labels), labels=node_labels)
        for u, v, attrs in G.edges(data=True):
            w = attrs.get(weight, 1.0) if weight is not None else 1.0
            graph.add_edge(index[u], index[v], w)
            if not G.is_directed():
                graph.add_edge(index[v], index[u], w)
        return graph

    # ------------------------------ mutation ------------------------------

    def add_edge(self, u: int, v: int, weight: float = 1.0) -> None:
        """Insert (or re-weight) the directed edge ``u -> v``."""
        n = self.number_of_vertices()
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"Edge ({u}, {v}) references a vertex outside 0..{n - 1}.")
        if u == v:
            raise ValueError(f"Self loop on vertex {u} is not supported.")
        weight = float(weight)
        if not math.isfinite(weight) or weight <= 0:
            raise ValueError(f"Edge ({u}, {v}) has weight {weight}; weights must be positive and finite.")
        self._graph.add_edge(u, v, weight=weight)

    def remove_edge(self, u: int, v: int) -> None:
        self._graph.remove_edge(u, v)

    def copy(self) -> "DirectedGraph":
        clone = DirectedGraph.__new__(DirectedGraph)
        clone._graph = self._graph.copy()
        clone.labels = list(self.labels)
        return clone

    # ------------------------------ queries ------------------------------

    def number_of_vertices(self) -> int:
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def has_edge(self, u: int, v: int) -> bool:
        return self._graph.has_edge(u, v)

    def weight(self, u: int, v: int) -> float:
        return self._graph[u][v]["weight"]

    def out_edges(self, v: int):
        return [(nbr, attrs["weight"]) for nbr, attrs in self._graph.succ[v].items()]

    def in_edges(self, v: int):
        return [(nbr, attrs["weight"]) for nbr, attrs in self._graph.pred[v].items()]

    def edges(self):
        """List every ``(u, v, weight)`` triple."""
        return [(u, v, attrs["weight"]) for u, v, attrs in self._graph.edges(data=True)]

    def to_networkx(self) -> nx.DiGraph:
        return self._graph.copy()

    def to_undirected(self) -> nx.Graph:
        """Undirected weighted view; antiparallel arcs collapse to one edge."""
        return self._graph.to_undirected()

    def adjacency_matrix(self) -> np.ndarray:
        return nx.to_numpy_array(self._graph, nodelist=range(self.number_of_vertices()))

    def __repr__(self) -> str:
        return f"DirectedGraph(n_vertices={self.number_of_vertices()}, n_edges={self.number_of_edges()})"


def group_nodes_by_community(labels):
    """Extract the community map and node groups from a label vector.

    Communities are numbered from 1 in order of first appearance.
    """
    communities = []
    community_map = {}
    label_to_community = {}
    for node, label in enumerate(np.asarray(labels).tolist()):
        if label not in label_to_community:
            label_to_community[label] = len(communities)
            communities.append(set())
        communities[label_to_community[label]].add(node)
        community_map[node] = label_to_community[label] + 1
    return community_map, [frozenset(c) for c in communities]


def map_community_labels(community_map, label_map):
    """Remap integer vertex ids to external node labels."""
    return {label_map[idx]: community for idx, community in community_map.items()}


def partition_vector_to_2d_matrix(partition):
    """Convert a 1D label vector to a binary co-association matrix."""
    partition = np.asarray(partition)
    return (partition[:, None] == partition[None, :]).astype(int)


def partition_matrix_to_vector(Z):
    """
    Convert a symmetric 2D partition matrix Z into a 1D membership vector.
    Z_ij = 1 if nodes i and j are in the same community, else 0.
    """
    N = Z.shape[0]
    labels = -np.ones(N, dtype=int)
    current_label = 0

    for i in range(N):
        if labels[i] == -1:
            labels[i] = current_label
            for j in range(i+1, N):
                if Z[i, j] == 1:
                    labels[j] = current_label
            current_label += 1
    return labels
