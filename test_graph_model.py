import pytest

from api.wgraph_api.model import Edge, Graph, Node


def test_node_identity_is_its_label():
    assert Node("A") == Node("A")
    assert Node("A") != Node("B")
    assert len({Node("A"), Node("A"), Node("B")}) == 2
    assert {Node("A"): 1}[Node("A")] == 1


def test_edge_equality_is_symmetric_and_includes_weight():
    a, b, c = Node("A"), Node("B"), Node("C")

    assert Edge(a, b, 3) == Edge(b, a, 3)
    assert hash(Edge(a, b, 3)) == hash(Edge(b, a, 3))
    assert Edge(a, b, 3) != Edge(a, b, 4)
    assert Edge(a, b, 3) != Edge(a, c, 3)


def test_edge_endpoints():
    a, b, c = Node("A"), Node("B"), Node("C")
    edge = Edge(a, b, 2)

    assert edge.has_endpoint(a) and edge.has_endpoint(b)
    assert not edge.has_endpoint(c)
    assert edge.other_endpoint(a) == b
    assert edge.other_endpoint(b) == a
    assert edge.other_endpoint(c) is None


@pytest.mark.parametrize("weight", [-1, 1.5, "3", True])
def test_edge_rejects_invalid_weights(weight):
    with pytest.raises(ValueError):
        Edge(Node("A"), Node("B"), weight)


def test_add_node_is_idempotent():
    graph = Graph()
    first = graph.add_node("A")
    second = graph.add_node("A")

    assert first is second
    assert len(graph) == 1
    assert graph.get_node("A") is first
    assert graph.get_node("Z") is None


def test_add_edge_registers_both_endpoints():
    graph = Graph()
    a, b = graph.add_node("A"), graph.add_node("B")
    edge = graph.add_edge(a, b, 7)

    assert graph.incident_edges(a) == (edge,)
    assert graph.incident_edges(b) == (edge,)
    assert graph.edges == [edge]
    assert graph.neighbors(a) == [b]


def test_add_edge_requires_registered_nodes():
    graph = Graph()
    a = graph.add_node("A")

    with pytest.raises(ValueError):
        graph.add_edge(a, Node("B"), 1)


def test_self_loop_is_registered_once():
    graph = Graph()
    a = graph.add_node("A")
    graph.add_edge(a, a, 2)

    assert len(graph.incident_edges(a)) == 1
    assert len(graph.edges) == 1


def test_add_edge_object():
    graph = Graph()
    a, b = graph.add_node("A"), graph.add_node("B")
    edge = graph.add_edge_object(Edge(a, b, 4))

    assert edge in graph.incident_edges(a)
    assert edge in graph.incident_edges(b)


def test_remove_edge_removes_all_parallel_edges():
    graph = Graph()
    a, b, c = (graph.add_node(label) for label in "ABC")
    graph.add_edge(a, b, 1)
    graph.add_edge(b, a, 5)
    graph.add_edge(a, c, 2)

    graph.remove_edge(b, a)

    assert [e.weight for e in graph.edges] == [2]
    assert graph.incident_edges(b) == ()
    assert len(graph.incident_edges(a)) == 1


def test_remove_edge_object_matches_weight():
    graph = Graph()
    a, b = graph.add_node("A"), graph.add_node("B")
    graph.add_edge(a, b, 1)
    graph.add_edge(a, b, 5)

    graph.remove_edge_object(Edge(b, a, 5))

    assert [e.weight for e in graph.edges] == [1]
    assert len(graph.incident_edges(a)) == 1
    assert len(graph.incident_edges(b)) == 1


def test_remove_node_prunes_edges_on_both_sides():
    graph = Graph()
    a, b, c = (graph.add_node(label) for label in "ABC")
    graph.add_edge(a, b, 1)
    graph.add_edge(b, c, 2)
    graph.add_edge(a, c, 3)

    graph.remove_node(b)

    assert b not in graph
    assert graph.get_node("B") is None
    assert [e.weight for e in graph.edges] == [3]
    assert all(not e.has_endpoint(b) for edges in graph.get_adjacency().values() for e in edges)


def test_remove_absent_node_is_noop():
    graph = Graph()
    graph.add_node("A")

    graph.remove_node(Node("Z"))

    assert len(graph) == 1


def test_adjacency_view_is_read_only(square_graph):
    adjacency = square_graph.get_adjacency()

    assert set(adjacency) == {Node(label) for label in "ABCD"}
    assert all(len(edges) == 2 for edges in adjacency.values())
    with pytest.raises(TypeError):
        adjacency[Node("E")] = ()


def test_edges_are_listed_once(square_graph):
    assert len(square_graph.edges) == 4
    assert square_graph.total_weight() == 10


def test_adjacency_report(square_graph):
    report = square_graph.adjacency_report().splitlines()

    assert report[0] == "A -> B (1), D (4)"
    assert len(report) == 4


def test_to_dict(square_graph):
    data = square_graph.to_dict()

    assert data["directed"] is False
    assert [n["id"] for n in data["nodes"]] == ["A", "B", "C", "D"]
    assert {"source": "A", "target": "B", "weight": 1} in data["edges"]
