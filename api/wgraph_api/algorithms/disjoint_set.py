from typing import Dict, Iterable

from ..model import Node


class DisjointSet:
    """
    Union-find over graph nodes.

    Every node must be registered with make_set before find is called on it.
    union expects roots (call find first) and hangs the first root under the second.
    """

    def __init__(self):
        self._parent: Dict[Node, Node] = {}

    def make_set(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self._parent[node] = node

    def find(self, node: Node) -> Node:
        root = node
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]

        return root

    def union(self, root1: Node, root2: Node) -> Node:
        self._parent[root1] = root2
        return root2

    def connected(self, node1: Node, node2: Node) -> bool:
        return self.find(node1) == self.find(node2)

    def __contains__(self, node) -> bool:
        return node in self._parent

    def __len__(self) -> int:
        return len(self._parent)
