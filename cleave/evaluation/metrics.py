"""Evaluation metrics for community detection."""
from __future__ import annotations

import networkx as nx
import numpy as np
from sklearn.metrics import adjusted_rand_score, normalized_mutual_info_score

from cleave.algorithms.community import communities_from_labels
from cleave.utils.graph import partition_matrix_to_vector


def _as_labels(partition) -> np.ndarray:
    # Accept either label vectors or partition matrices.
    partition = np.asarray(partition)
    return partition_matrix_to_vector(partition) if partition.ndim == 2 else partition

def nmi_sklearn(labels_gt, labels_sol) -> float:
    """Compute normalized mutual information via scikit-learn."""
    return float(normalized_mutual_info_score(_as_labels(labels_gt), _as_labels(labels_sol), average_method="arithmetic"))

def ari_sklearn(labels_gt, labels_sol) -> float:
    """Compute adjusted Rand index via scikit-learn."""
    return float(adjusted_rand_score(_as_labels(labels_gt), _as_labels(labels_sol)))

def modularity_score(graph, labels) -> float:
    """Newman modularity of ``labels`` on the undirected view of ``graph``."""
    communities = communities_from_labels(_as_labels(labels))
    return float(nx.community.modularity(graph.to_undirected(), communities, weight="weight"))
