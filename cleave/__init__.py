"""Cleave: Girvan-Newman hierarchical community detection on weighted directed graphs."""

from cleave.algorithms.centrality import edge_betweenness_centrality
from cleave.algorithms.girvan_newman import girvan_newman
from cleave.algorithms.shortest_paths import floyd_warshall, reconstruct_path
from cleave.config import GirvanNewmanConfig
from cleave.dendrogram import Dendrogram
from cleave.orchestrator import GirvanNewman, run_girvan_newman
from cleave.types import EdgeValues, GirvanNewmanResult, ShortestPaths, SplitRecord
from cleave.utils.graph import DirectedGraph


def run_evaluation(*args, **kwargs):
    """Run benchmark evaluations using :mod:`cleave.evaluation.runner`.

    This lazy import keeps scikit-learn out of import-time paths for users
    who only need the partitioning APIs.
    """
    from cleave.evaluation.runner import run_evaluation as _run_evaluation

    return _run_evaluation(*args, **kwargs)


__all__ = [
    "Dendrogram",
    "DirectedGraph",
    "EdgeValues",
    "GirvanNewman",
    "GirvanNewmanConfig",
    "GirvanNewmanResult",
    "ShortestPaths",
    "SplitRecord",
    "edge_betweenness_centrality",
    "floyd_warshall",
    "girvan_newman",
    "reconstruct_path",
    "run_evaluation",
    "run_girvan_newman",
]
