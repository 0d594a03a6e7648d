"""Girvan-Newman divisive community detection driver."""

from __future__ import annotations

import itertools
import warnings
from typing import List, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm

from cleave.algorithms.centrality import edge_betweenness_centrality
from cleave.dendrogram import Dendrogram
from cleave.types import GirvanNewmanResult, GraphLike, SplitRecord

NO_REPRESENTATIVE = -1


def label_components(graph: GraphLike) -> Tuple[np.ndarray, int]:
    """
    Label weakly connected components of ``graph``.

    Searches start from every unlabelled vertex in increasing id order and
    follow both outgoing and incoming edges; component ids are assigned in
    discovery order.

    Returns
    -------
    component_of : np.ndarray[int]
        Component id per vertex.
    n_components : int
    """
    n = graph.number_of_vertices()
    component_of = np.full(n, -1, dtype=np.int64)
    n_components = 0
    for start in range(n):
        if component_of[start] != -1:
            continue
        component_of[start] = n_components
        stack = [start]
        while stack:
            v = stack.pop()
            for nbr, _ in itertools.chain(graph.out_edges(v), graph.in_edges(v)):
                if component_of[nbr] == -1:
                    component_of[nbr] = n_components
                    stack.append(nbr)
        n_components += 1
    return component_of, n_components


def update_representatives(component_of, parent_of, src, dest):
    """Make ``src`` the representative of its component and ``dest`` of its own."""
    src_component = component_of[src]
    dest_component = component_of[dest]
    parent_of[component_of == src_component] = src
    parent_of[(component_of == dest_component) & (component_of != src_component)] = dest


def remove_tied_edges(graph: GraphLike, values: np.ndarray, score: float, src: int, dest: int):
    """
    Sweep ``values`` row-major and remove every remaining edge scoring at least
    ``score`` whose row differs from ``src`` and whose column differs from
    ``dest``, where ``src``/``dest`` track the most recently removed edge.

    Returns
    -------
    removed : list of (int, int)
    src, dest : int
        The last removed edge (unchanged when nothing was removed).
    """
    removed = []
    n = values.shape[0]
    for i in range(n):
        for j in range(n):
            if values[i, j] >= score and i != src and j != dest and graph.has_edge(i, j):
                graph.remove_edge(i, j)
                removed.append((i, j))
                src, dest = i, j
    return removed, src, dest


def _attach_split(dendrogram, parent_of, src, dest, strict_attachment) -> Optional[int]:
    representative = int(parent_of[src])
    if representative == NO_REPRESENTATIVE:
        anchor = dendrogram.root if dendrogram[dendrogram.root].is_leaf else None
    else:
        anchor = dendrogram.find_leaf(representative)

    if anchor is None:
        message = (
            f"No dendrogram leaf for representative {representative} of vertex {src}; "
            f"split ({src}, {dest}) was not attached."
        )
        if strict_attachment:
            raise RuntimeError(message)
        warnings.warn(message, RuntimeWarning, stacklevel=3)
        return None

    dendrogram.add_children(anchor, src, dest)
    return anchor


def girvan_newman(
    graph: GraphLike,
    strict_attachment: bool = False,
    max_splits: Optional[int] = None,
    verbose: int = -1,
) -> GirvanNewmanResult:
    """
    Split ``graph`` by repeatedly removing its highest-betweenness edge.

    ``graph`` is mutated in place. Each iteration rescores every edge, removes
    the first maximum in row-major order and relabels the components. When the
    removal leaves the component count unchanged, further edges tied with the
    maximum are swept away until it changes. Every retained split attaches the
    endpoints of the last removed edge to the dendrogram under the leaf of
    their component's current representative.

    Args:
        graph: Snapshot to split; vertex ids ``0..N-1``.
        strict_attachment: Raise ``RuntimeError`` when a split has no dendrogram
            anchor; otherwise warn and leave the split out of the tree.
        max_splits: Stop after this many retained splits.
        verbose: ``-1`` silences the progress bar; ``>= 2`` prints every split.

    Returns:
        :class:`cleave.types.GirvanNewmanResult` with the dendrogram and the
        per-split records.
    """
    if max_splits is not None and max_splits < 0:
        raise ValueError(f"max_splits must be non-negative, got {max_splits}.")

    n = graph.number_of_vertices()
    dendrogram = Dendrogram()
    parent_of = np.full(n, NO_REPRESENTATIVE, dtype=np.int64)
    component_of, n_components = label_components(graph)
    initial_labels = component_of.copy()
    splits: List[SplitRecord] = []
    n_iterations = 0
    n_removed = 0

    with tqdm(total=max(n - n_components, 0), disable=(verbose == -1)) as pbar:
        while n > 0:
            if max_splits is not None and len(splits) >= max_splits:
                break

            evs = edge_betweenness_centrality(graph)
            best = evs.argmax()
            if best is None:
                break
            n_iterations += 1
            src, dest, score = best

            graph.remove_edge(src, dest)
            removed = [(src, dest)]
            previous = n_components
            component_of, n_components = label_components(graph)

            while n_components == previous:
                extra, src, dest = remove_tied_edges(graph, evs.values, score, src, dest)
                if not extra:
                    break
                removed.extend(extra)
                component_of, n_components = label_components(graph)
            n_removed += len(removed)

            if n_components == previous:
                if verbose >= 2:
                    print(f"Removed {removed} (betweenness {score:g}) without a split.")
                continue

            anchor = _attach_split(dendrogram, parent_of, src, dest, strict_attachment)
            splits.append(
                SplitRecord(
                    index=len(splits),
                    removed_edges=removed,
                    score=score,
                    n_components=n_components,
                    labels=component_of.copy(),
                    anchor=anchor,
                )
            )
            pbar.update(n_components - previous)
            pbar.set_postfix(components=n_components, betweenness=score)
            if verbose >= 2:
                print(f"Split {len(splits)}: removed {removed} (betweenness {score:g}); {n_components} components")

            if n_components == n:
                break

            update_representatives(component_of, parent_of, src, dest)

    return GirvanNewmanResult(
        dendrogram=dendrogram,
        splits=splits,
        initial_labels=initial_labels,
        metadata={
            "n_splits": len(splits),
            "n_components": n_components,
            "n_iterations": n_iterations,
            "n_removed_edges": n_removed,
        },
    )
