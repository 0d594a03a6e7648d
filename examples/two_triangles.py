from cleave import GirvanNewman, GirvanNewmanConfig
from cleave.utils.graph import DirectedGraph


def main():
    # Two bidirectional triangles joined by the single arc 2 -> 3.
    edges = []
    for a, b in [(0, 1), (0, 2), (1, 2), (3, 4), (3, 5), (4, 5)]:
        edges += [(a, b), (b, a)]
    edges.append((2, 3))
    graph = DirectedGraph.from_edges(6, edges)

    cfg = GirvanNewmanConfig(verbosity=2, max_splits=1)
    result = GirvanNewman(config=cfg).run(graph)
    print("removed:", result.splits[0].removed_edges)
    print("labels:", result.labels.tolist())
    print("dendrogram:", result.dendrogram.to_nested())


if __name__ == "__main__":
    main()
