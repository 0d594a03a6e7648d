"""Binary dendrogram stored as an arena of indexed nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

import networkx as nx

ROOT = -1


@dataclass
class DendrogramNode:
    """One dendrogram node; ``left``/``right`` are arena indices or ``None``."""

    vertex: int
    left: Optional[int] = None
    right: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class Dendrogram:
    """
    Binary tree recording the order in which a graph was split.

    Node 0 is the root and carries the sentinel vertex :data:`ROOT`. Each split
    hangs two new nodes (the endpoints of the removed edge) under an existing
    leaf, so the tree only grows and every non-root node has one parent.
    """

    def __init__(self):
        self.nodes: List[DendrogramNode] = [DendrogramNode(ROOT)]
        self._parent: List[Optional[int]] = [None]

    @property
    def root(self) -> int:
        return 0

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> DendrogramNode:
        return self.nodes[index]

    def _new_node(self, vertex: int, parent: int) -> int:
        self.nodes.append(DendrogramNode(vertex))
        self._parent.append(parent)
        return len(self.nodes) - 1

    def add_children(self, parent: int, left_vertex: int, right_vertex: int):
        """Attach two new children under the leaf ``parent``; return their indices."""
        node = self.nodes[parent]
        if not node.is_leaf:
            raise RuntimeError(f"Dendrogram node {parent} (vertex {node.vertex}) already has children.")
        node.left = self._new_node(left_vertex, parent)
        node.right = self._new_node(right_vertex, parent)
        return node.left, node.right

    def iter_preorder(self, start: int = 0) -> Iterator[int]:
        """Yield node indices in pre-order (node, left subtree, right subtree)."""
        stack = [start]
        while stack:
            index = stack.pop()
            yield index
            node = self.nodes[index]
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def find_leaf(self, vertex: int) -> Optional[int]:
        """Return the first pre-order leaf holding ``vertex``, or ``None``."""
        for index in self.iter_preorder():
            node = self.nodes[index]
            if node.vertex == vertex and node.is_leaf:
                return index
        return None

    def parent_of_node(self, index: int) -> Optional[int]:
        return self._parent[index]

    def depth(self, index: int) -> int:
        depth = 0
        while self._parent[index] is not None:
            index = self._parent[index]
            depth += 1
        return depth

    def leaves(self) -> List[int]:
        return [i for i in self.iter_preorder() if self.nodes[i].is_leaf]

    def internal_nodes(self) -> List[int]:
        return [i for i in self.iter_preorder() if not self.nodes[i].is_leaf]

    def leaf_vertices(self) -> List[int]:
        return [self.nodes[i].vertex for i in self.leaves()]

    def to_nested(self, index: int = 0):
        """Nested ``(vertex, left, right)`` tuples; leaves are bare vertex ids."""
        # iterative post-order so deep trees do not hit the recursion limit
        built = {}
        for i in reversed(list(self.iter_preorder(index))):
            node = self.nodes[i]
            if node.is_leaf:
                built[i] = node.vertex
            else:
                built[i] = (node.vertex, built.pop(node.left), built.pop(node.right))
        return built[index]

    def to_networkx(self) -> nx.DiGraph:
        """Tree as a :class:`networkx.DiGraph` keyed by node index, with a ``vertex`` attribute."""
        T = nx.DiGraph()
        for index, node in enumerate(self.nodes):
            T.add_node(index, vertex=node.vertex)
        for index, node in enumerate(self.nodes):
            for child in (node.left, node.right):
                if child is not None:
                    T.add_edge(index, child)
        return T

    def __repr__(self) -> str:
        return f"Dendrogram(n_nodes={len(self.nodes)}, n_leaves={len(self.leaves())})"
