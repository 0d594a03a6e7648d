"""Public algorithm exports for shortest paths, betweenness and Girvan-Newman."""

from cleave.algorithms.centrality import edge_betweenness_centrality
from cleave.algorithms.community import (
    best_modularity_partition,
    communities_from_labels,
    partition_at,
)
from cleave.algorithms.girvan_newman import girvan_newman, label_components
from cleave.algorithms.shortest_paths import floyd_warshall, path_weight, reconstruct_path

__all__ = [
    "best_modularity_partition",
    "communities_from_labels",
    "edge_betweenness_centrality",
    "floyd_warshall",
    "girvan_newman",
    "label_components",
    "partition_at",
    "path_weight",
    "reconstruct_path",
]
