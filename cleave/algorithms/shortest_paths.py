"""All-pairs shortest paths (Floyd-Warshall) with first-hop reconstruction."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from cleave.types import NO_PATH, GraphLike, ShortestPaths


def _first_hop(next_hop: np.ndarray, source: int, via: int) -> int:
    """Follow ``next_hop[source, .]`` from ``via`` to a vertex reached by a direct hop."""
    n = next_hop.shape[0]
    target = via
    for _ in range(n):
        hop = int(next_hop[source, target])
        if hop == NO_PATH:
            raise RuntimeError(f"No first hop recorded from {source} towards {target}.")
        if hop == target:
            return hop
        target = hop
    raise RuntimeError(f"First-hop chain from {source} towards {via} does not terminate.")


def floyd_warshall(graph: GraphLike) -> ShortestPaths:
    """
    Compute distance and first-hop matrices for every ordered vertex pair.

    A relaxation through ``k`` is accepted only when the two-leg sum is
    positive and strictly shorter, and the new first hop of ``i -> j`` is the
    first hop of the current ``i -> k`` path. Updates within one ``k`` pass are
    applied in row-major order.

    Parameters
    ----------
    graph : GraphLike
        Snapshot with vertex ids ``0..N-1`` and positive weights.

    Returns
    -------
    ShortestPaths
        ``dist`` holds ``inf`` for unreachable pairs and ``next_hop`` holds
        :data:`cleave.types.NO_PATH` for unreachable and self pairs.
    """
    n = graph.number_of_vertices()
    dist = np.full((n, n), np.inf)
    next_hop = np.full((n, n), NO_PATH, dtype=np.int64)
    np.fill_diagonal(dist, 0.0)

    for v in range(n):
        for w, weight in graph.out_edges(v):
            dist[v, w] = weight
            next_hop[v, w] = w

    for k in range(n):
        # dist[:, k] and dist[k, :] are fixed during pass k
        via = dist[:, k, None] + dist[None, k, :]
        improved = (via < dist) & (via > 0)
        if not improved.any():
            continue
        dist = np.where(improved, via, dist)
        for i, j in np.argwhere(improved):
            next_hop[i, j] = _first_hop(next_hop, int(i), k)

    return ShortestPaths(dist=dist, next_hop=next_hop)


def path_hops(paths: ShortestPaths, source: int, target: int) -> List[Tuple[int, int]]:
    """Directed edges traversed by the reconstructed ``source -> target`` path."""
    hops = []
    current = source
    for _ in range(paths.n_vertices):
        hop = int(paths.next_hop[current, target])
        if hop == NO_PATH:
            return hops
        hops.append((current, hop))
        current = hop
    if paths.next_hop[current, target] != NO_PATH:
        raise RuntimeError(f"Path reconstruction from {source} to {target} does not terminate.")
    return hops


def reconstruct_path(paths: ShortestPaths, source: int, target: int) -> List[int]:
    """
    Vertex sequence of the shortest ``source -> target`` path.

    Returns ``[source]`` for ``source == target`` and ``[]`` when ``target``
    is unreachable.
    """
    if source == target:
        return [source]
    if not paths.has_path(source, target):
        return []
    hops = path_hops(paths, source, target)
    return [source] + [hop for _, hop in hops]


def path_weight(graph, path) -> float:
    """Accumulated edge weight along a vertex sequence."""
    return float(sum(graph.weight(u, v) for u, v in zip(path[:-1], path[1:])))
