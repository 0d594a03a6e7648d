"""Edge betweenness centrality by shortest-path enumeration."""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from cleave.algorithms.shortest_paths import floyd_warshall, path_hops
from cleave.types import NO_PATH, NOT_AN_EDGE, EdgeValues, GraphLike, ShortestPaths


def reconstruct_all_paths(paths: ShortestPaths) -> List[List[Tuple[int, int]]]:
    """Hop lists of every ordered pair's reconstructed path, row-major."""
    n = paths.n_vertices
    return [path_hops(paths, s, t) for s in range(n) for t in range(n)]


def count_edge_passes(all_hops, src: int, dest: int) -> float:
    """Number of times the directed edge ``src -> dest`` is crossed by the given paths."""
    edge = (src, dest)
    return float(sum(hops.count(edge) for hops in all_hops))


def edge_betweenness_centrality(graph: GraphLike, paths: Optional[ShortestPaths] = None) -> EdgeValues:
    """
    Score every directed edge by the number of ordered vertex pairs whose
    shortest path crosses it.

    Every pair's path is rebuilt from ``paths.next_hop`` and the full set of
    paths is scanned again for each scored edge, so one call costs roughly
    O(E * N^2 * L) for path length L.

    Parameters
    ----------
    graph : GraphLike
        Current snapshot.
    paths : ShortestPaths or None
        Shortest paths of ``graph``; computed with
        :func:`cleave.algorithms.shortest_paths.floyd_warshall` when omitted.

    Returns
    -------
    EdgeValues
        ``-1.0`` for non-edges, ``0.0`` for edges on no shortest path.
    """
    if paths is None:
        paths = floyd_warshall(graph)
    n = graph.number_of_vertices()
    values = np.full((n, n), NOT_AN_EDGE)
    all_hops = reconstruct_all_paths(paths)

    for i in range(n):
        for j in range(n):
            if graph.has_edge(i, j) and paths.next_hop[i, j] != NO_PATH:
                values[i, j] = count_edge_passes(all_hops, i, j)

    return EdgeValues(values=values)
