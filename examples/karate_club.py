from cleave import run_girvan_newman
from cleave.algorithms.community import best_modularity_partition
from cleave.case_studies.karate import build_karate_graph
from cleave.evaluation.metrics import nmi_sklearn
from cleave.utils.graph import group_nodes_by_community, map_community_labels


def main():
    graph, labels_gt = build_karate_graph()
    result = run_girvan_newman(graph, verbosity=1)
    communities, labels, mod = best_modularity_partition(graph, result)
    community_map, _ = group_nodes_by_community(labels)
    print("communities:", len(communities))
    print("modularity:", round(mod, 4))
    print("NMI vs. club split:", round(nmi_sklearn(labels_gt, labels), 4))
    print("membership:", map_community_labels(community_map, graph.labels))


if __name__ == "__main__":
    main()
