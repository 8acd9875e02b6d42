import itertools

import pytest

from api.wgraph_api.algorithms import DisjointSet, has_cycle, minimum_spanning_tree
from api.wgraph_api.model import Graph, Node


def component_count(graph):
    disjoint_set = DisjointSet()
    disjoint_set.make_set(graph.nodes)
    for edge in graph.edges:
        root1, root2 = disjoint_set.find(edge.endpoint1), disjoint_set.find(edge.endpoint2)
        if root1 != root2:
            disjoint_set.union(root1, root2)
    return len({disjoint_set.find(node) for node in graph.nodes})


def graph_from_edges(labels, edges):
    graph = Graph()
    for label in labels:
        graph.add_node(label)
    for edge in edges:
        graph.add_edge(graph.get_node(edge.endpoint1.label), graph.get_node(edge.endpoint2.label), edge.weight)
    return graph


def brute_force_forest_weight(graph):
    labels = [node.label for node in graph.nodes]
    size = len(graph) - component_count(graph)
    best = None
    for subset in itertools.combinations(graph.edges, size):
        if has_cycle(graph_from_edges(labels, subset)):
            continue
        weight = sum(edge.weight for edge in subset)
        if best is None or weight < best:
            best = weight
    return best


# -----------------
# UNION-FIND
# -----------------

def test_make_set_creates_singletons():
    nodes = [Node(label) for label in "ABC"]
    disjoint_set = DisjointSet()
    disjoint_set.make_set(nodes)

    assert len(disjoint_set) == 3
    assert [disjoint_set.find(n) for n in nodes] == nodes


def test_union_merges_roots():
    a, b, c, d = (Node(label) for label in "ABCD")
    disjoint_set = DisjointSet()
    disjoint_set.make_set([a, b, c, d])

    root = disjoint_set.union(disjoint_set.find(a), disjoint_set.find(b))
    assert disjoint_set.find(root) == disjoint_set.find(a) == disjoint_set.find(b)

    disjoint_set.union(disjoint_set.find(c), disjoint_set.find(a))
    assert disjoint_set.connected(a, c)
    assert disjoint_set.connected(b, c)
    assert not disjoint_set.connected(a, d)


def test_find_on_long_chain():
    nodes = [Node(str(i)) for i in range(2000)]
    disjoint_set = DisjointSet()
    disjoint_set.make_set(nodes)
    for child, parent in zip(nodes, nodes[1:]):
        disjoint_set.union(child, parent)

    assert disjoint_set.find(nodes[0]) == nodes[-1]
    assert disjoint_set.find(nodes[1]) == nodes[-1]


# -----------------
# CYCLE DETECTION
# -----------------

def test_cycle_detected_in_square(square_graph):
    assert has_cycle(square_graph)


def test_tree_has_no_cycle(square_graph):
    square_graph.remove_edge(square_graph.get_node("D"), square_graph.get_node("A"))

    assert not has_cycle(square_graph)


def test_single_edge_is_not_a_cycle():
    # The edge sits in both adjacency lists but is processed once
    graph = Graph()
    graph.add_edge(graph.add_node("A"), graph.add_node("B"), 1)

    assert not has_cycle(graph)


def test_self_loop_and_parallel_edges_are_cycles():
    graph = Graph()
    a, b = graph.add_node("A"), graph.add_node("B")
    graph.add_edge(a, a, 1)
    assert has_cycle(graph)

    graph.remove_edge(a, a)
    graph.add_edge(a, b, 1)
    graph.add_edge(a, b, 2)
    assert has_cycle(graph)


def test_empty_graph_has_no_cycle():
    assert not has_cycle(Graph())


# -----------------
# SPANNING TREE
# -----------------

def test_square_drops_heaviest_edge(square_graph):
    tree = minimum_spanning_tree(square_graph)

    assert tree.total_weight() == 6
    assert len(tree.edges) == 3
    assert all(not e.joins(Node("A"), Node("D")) for e in tree.edges)
    # The input is untouched
    assert len(square_graph.edges) == 4


def test_tree_keeps_every_node_in_order(square_graph):
    square_graph.add_node("lonely")

    tree = minimum_spanning_tree(square_graph)

    assert [n.label for n in tree.nodes] == ["A", "B", "C", "D", "lonely"]
    assert tree.incident_edges(tree.get_node("lonely")) == ()


def test_disconnected_graph_gives_forest():
    graph = Graph()
    a, b, c, d, e = (graph.add_node(label) for label in "ABCDE")
    graph.add_edge(a, b, 3)
    graph.add_edge(b, c, 1)
    graph.add_edge(a, c, 2)
    graph.add_edge(d, e, 9)

    tree = minimum_spanning_tree(graph)

    assert not has_cycle(tree)
    assert len(tree.edges) == len(graph) - component_count(graph) == 3
    assert tree.total_weight() == 12


def test_duplicate_edges_collapse():
    graph = Graph()
    a, b = graph.add_node("A"), graph.add_node("B")
    graph.add_edge(a, b, 4)
    graph.add_edge(b, a, 4)
    graph.add_edge(a, b, 1)

    tree = minimum_spanning_tree(graph)

    assert [e.weight for e in tree.edges] == [1]


def test_empty_graph():
    tree = minimum_spanning_tree(Graph())

    assert len(tree) == 0
    assert tree.edges == []


@pytest.mark.parametrize("seed", range(15))
def test_matches_brute_force(random_graph, seed):
    graph = random_graph(seed, n=6, m=9, max_weight=9)

    tree = minimum_spanning_tree(graph)

    assert not has_cycle(tree)
    assert len(tree.edges) == len(graph) - component_count(graph)
    assert tree.total_weight() == brute_force_forest_weight(graph)
