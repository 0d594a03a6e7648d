"""Case-study graph builders used by demos and integration tests."""

from cleave.case_studies.karate import build_karate_graph
from cleave.case_studies.planted import build_bridged_cliques_graph, build_planted_partition_graph

__all__ = ["build_bridged_cliques_graph", "build_karate_graph", "build_planted_partition_graph"]
