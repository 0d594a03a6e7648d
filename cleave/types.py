"""Core types and protocols for Cleave."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

import numpy as np

from cleave.dendrogram import Dendrogram
from cleave.utils.graph import partition_vector_to_2d_matrix

NO_PATH = -1
NOT_AN_EDGE = -1.0


class GraphLike(Protocol):
    """Protocol for the mutable directed graph consumed by the pipeline.

    Vertices are the integers ``0..N-1``. Neighbour enumerations yield
    ``(neighbor, weight)`` pairs.
    """

    def number_of_vertices(self) -> int: ...

    def has_edge(self, u: int, v: int) -> bool: ...

    def out_edges(self, v: int) -> Iterable[Tuple[int, float]]: ...

    def in_edges(self, v: int) -> Iterable[Tuple[int, float]]: ...

    def remove_edge(self, u: int, v: int) -> None: ...


@dataclass
class ShortestPaths:
    """All-pairs distance and first-hop matrices for one graph snapshot.

    ``dist[i, j]`` is ``inf`` when ``j`` is unreachable from ``i``;
    ``next_hop[i, j]`` is :data:`NO_PATH` for unreachable and self pairs.
    """

    dist: np.ndarray
    next_hop: np.ndarray

    @property
    def n_vertices(self) -> int:
        return int(self.dist.shape[0])

    def has_path(self, source: int, target: int) -> bool:
        return bool(self.next_hop[source, target] != NO_PATH)


@dataclass
class EdgeValues:
    """Per-edge betweenness scores; non-edges hold :data:`NOT_AN_EDGE`."""

    values: np.ndarray

    @property
    def n_vertices(self) -> int:
        return int(self.values.shape[0])

    def argmax(self) -> Optional[Tuple[int, int, float]]:
        """Return ``(src, dest, score)`` of the first maximum in row-major order."""
        if self.values.size == 0:
            return None
        flat = int(np.argmax(self.values))
        score = float(self.values.flat[flat])
        if score == NOT_AN_EDGE:
            return None
        src, dest = divmod(flat, self.n_vertices)
        return src, dest, score

    def scored_edges(self) -> Dict[Tuple[int, int], float]:
        """Map every scored directed edge to its betweenness."""
        rows, cols = np.nonzero(self.values != NOT_AN_EDGE)
        return {(int(i), int(j)): float(self.values[i, j]) for i, j in zip(rows, cols)}


@dataclass
class SplitRecord:
    """Structured record for one retained split of the graph."""

    index: int
    removed_edges: List[Tuple[int, int]]
    score: float
    n_components: int
    labels: np.ndarray
    anchor: Optional[int] = None

    @property
    def edge(self) -> Tuple[int, int]:
        """The edge whose endpoints were attached to the dendrogram."""
        return self.removed_edges[-1]


@dataclass
class GirvanNewmanResult:
    """Container for the dendrogram, the split history and summary metadata."""

    dendrogram: Dendrogram
    splits: List[SplitRecord]
    initial_labels: np.ndarray
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_vertices(self) -> int:
        return int(self.initial_labels.shape[0])

    @property
    def labels(self) -> np.ndarray:
        """Component labels after the last retained split."""
        return self.splits[-1].labels if self.splits else self.initial_labels

    def levels(self) -> List[np.ndarray]:
        """Component labels before any split followed by the labels after each split."""
        return [self.initial_labels] + [record.labels for record in self.splits]

    @property
    def final_partition(self) -> np.ndarray:
        """Co-association matrix of the final level."""
        return partition_vector_to_2d_matrix(self.labels)
