import os
import random

from api.wgraph_api.model import Graph
from exporter_dot.exporter_dot_plugin.plugin import DotExporterPlugin

os.makedirs("test_data", exist_ok=True)

exporter = DotExporterPlugin()


def write_graph(graph: Graph, filename: str) -> None:
    path = os.path.join("test_data", filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write(exporter.render(graph))

    print(f"Generated {filename} – {len(graph)} nodes, {len(graph.edges)} edges")


def random_connected_graph(n: int, extra_edges: int, max_weight: int = 100, prefix: str = "N") -> Graph:
    # A random spanning chain keeps the graph connected, extra edges add cycles
    graph = Graph()
    nodes = [graph.add_node(f"{prefix}{i}") for i in range(1, n + 1)]

    order = nodes[:]
    random.shuffle(order)
    for a, b in zip(order, order[1:]):
        graph.add_edge(a, b, random.randint(0, max_weight))

    for _ in range(extra_edges):
        a, b = random.sample(nodes, 2)
        graph.add_edge(a, b, random.randint(0, max_weight))

    return graph


# ============================================================
# 1. Small hand-written example
# ============================================================

def generate_example():
    graph = Graph()
    a, b, c, d, e = (graph.add_node(label) for label in "ABCDE")

    graph.add_edge(a, b, 4)
    graph.add_edge(a, c, 1)
    graph.add_edge(c, b, 2)
    graph.add_edge(b, d, 5)
    graph.add_edge(c, d, 8)
    graph.add_edge(d, e, 3)
    graph.add_edge(c, e, 10)

    write_graph(graph, "example.dot")

# ============================================================
# 2. Random graphs of growing size, for timing the shortest path variants
# ============================================================

def generate_random_graphs():
    for n in (100, 500, 2000):
        graph = random_connected_graph(n, extra_edges=n * 3)
        write_graph(graph, f"random_{n}.dot")

# ============================================================
# 3. Disconnected graph – two islands
# ============================================================

def generate_disconnected():
    left = random_connected_graph(40, extra_edges=60, prefix="L")
    right = random_connected_graph(30, extra_edges=45, prefix="R")

    graph = Graph()
    for part in (left, right):
        for edge in part.edges:
            graph.add_edge(
                graph.add_node(edge.endpoint1.label),
                graph.add_node(edge.endpoint2.label),
                edge.weight,
            )

    write_graph(graph, "disconnected.dot")


if __name__ == "__main__":
    generate_example()
    generate_random_graphs()
    generate_disconnected()
