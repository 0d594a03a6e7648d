"""Graph and partition utility exports used across Cleave."""

from cleave.utils.graph import (
    DirectedGraph,
    group_nodes_by_community,
    map_community_labels,
    partition_matrix_to_vector,
    partition_vector_to_2d_matrix,
)

__all__ = [
    "DirectedGraph",
    "group_nodes_by_community",
    "map_community_labels",
    "partition_matrix_to_vector",
    "partition_vector_to_2d_matrix",
]
