import logging
from typing import List

from ..model import Edge, Graph
from .disjoint_set import DisjointSet

LOGGER = logging.getLogger(__name__)


def has_cycle(graph: Graph) -> bool:
    """Return True if the graph contains a cycle, using union-find."""
    disjoint_set = DisjointSet()
    disjoint_set.make_set(graph.nodes)

    # Every edge sits in two adjacency lists; process it once
    seen = set()
    for node, edges in graph.get_adjacency().items():
        for edge in edges:
            if edge in seen:
                continue
            seen.add(edge)

            root1 = disjoint_set.find(node)
            root2 = disjoint_set.find(edge.other_endpoint(node))
            if root1 == root2:
                return True
            disjoint_set.union(root1, root2)

    return False


def sorted_edges(graph: Graph) -> List[Edge]:
    # sorted() is stable, so equal weights keep adjacency order
    return sorted(graph.edges, key=lambda edge: edge.weight)


def minimum_spanning_tree(graph: Graph) -> Graph:
    """
    Kruskal's algorithm.

    Returns a new graph with every node of the input and the edges of a
    minimum spanning forest. An edge is admitted only when its endpoints
    are still in different components.
    """
    tree = Graph()
    for node in graph.nodes:
        tree.add_node(node.label)

    disjoint_set = DisjointSet()
    disjoint_set.make_set(tree.nodes)

    for edge in sorted_edges(graph):
        node1 = tree.get_node(edge.endpoint1.label)
        node2 = tree.get_node(edge.endpoint2.label)
        root1 = disjoint_set.find(node1)
        root2 = disjoint_set.find(node2)
        if root1 == root2:
            continue
        disjoint_set.union(root1, root2)
        tree.add_edge(node1, node2, edge.weight)

    LOGGER.debug("Spanning tree kept %d of %d edges, total weight %d",
                 len(tree.edges), len(graph.edges), tree.total_weight())
    return tree
