import random

import pytest

from api.wgraph_api.model import Graph
from datasource_dot.datasource_dot_plugin.plugin import DotDatasourcePlugin


@pytest.fixture
def dot_plugin():
    return DotDatasourcePlugin()


@pytest.fixture
def square_graph():
    # A -1- B -2- C -3- D -4- A
    graph = Graph()
    a, b, c, d = (graph.add_node(label) for label in "ABCD")
    graph.add_edge(a, b, 1)
    graph.add_edge(b, c, 2)
    graph.add_edge(c, d, 3)
    graph.add_edge(d, a, 4)
    return graph


def build_random_graph(seed: int, n: int, m: int, max_weight: int = 20) -> Graph:
    # Not necessarily connected; may contain parallel edges
    rng = random.Random(seed)
    graph = Graph()
    nodes = [graph.add_node(f"n{i}") for i in range(n)]
    for _ in range(m):
        a, b = rng.sample(nodes, 2)
        graph.add_edge(a, b, rng.randint(0, max_weight))
    return graph


@pytest.fixture
def random_graph():
    return build_random_graph
