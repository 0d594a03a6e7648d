"""High-level Girvan-Newman orchestrator."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from cleave.algorithms.girvan_newman import girvan_newman
from cleave.config import GirvanNewmanConfig
from cleave.types import GirvanNewmanResult, GraphLike


class GirvanNewman:
    """High-level driver that wires configuration to the Girvan-Newman loop."""

    def __init__(self, config: GirvanNewmanConfig | None = None) -> None:
        self.config = config or GirvanNewmanConfig()

    def run(self, graph: GraphLike, **overrides: Any) -> GirvanNewmanResult:
        """Split ``graph`` and return the dendrogram with its split records."""
        cfg = asdict(self.config)
        cfg.update(overrides)
        verbosity = int(cfg.pop("verbosity", 1))
        cfg["verbose"] = -1 if verbosity <= 0 else verbosity
        if cfg.pop("copy_graph", True):
            graph = graph.copy()

        n_vertices = graph.number_of_vertices()
        n_edges = graph.number_of_edges() if hasattr(graph, "number_of_edges") else None
        result = girvan_newman(graph, **cfg)
        result.metadata.update({"n_vertices": n_vertices, "n_edges": n_edges})
        return result


def run_girvan_newman(
    graph: GraphLike,
    config: GirvanNewmanConfig | None = None,
    **kwargs: Any,
) -> GirvanNewmanResult:
    """Convenience wrapper for one-shot Girvan-Newman runs."""
    return GirvanNewman(config=config).run(graph, **kwargs)
