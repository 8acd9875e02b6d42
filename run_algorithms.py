import logging
import time

from core.wgraph_platform import GraphEngine
from api.wgraph_api.algorithms import INFINITY
from datasource_dot.datasource_dot_plugin.plugin import DotDatasourcePlugin
from exporter_dot.exporter_dot_plugin.plugin import DotExporterPlugin


def build_engine() -> GraphEngine:
    engine = GraphEngine()
    # Explicit registration works without the entry points being installed
    engine.registry.register_datasource("dot", DotDatasourcePlugin)
    engine.registry.register_exporter("dot", DotExporterPlugin)
    return engine


def time_shortest_paths(engine: GraphEngine, source_label: str) -> dict:
    timings = {}
    results = {}
    for method in ("scan", "heap"):
        start = time.perf_counter()
        results[method] = engine.shortest_paths(source_label, method=method)
        timings[method] = time.perf_counter() - start

    if results["scan"] != results["heap"]:
        raise RuntimeError(f"Shortest path variants disagree from {source_label}")

    return {"distances": results["heap"], "timings": timings}


def run(path: str, engine: GraphEngine) -> None:
    graph = engine.load("dot", path)

    print(f"\nLoaded graph: {path}")
    print(f"  Nodes : {len(graph)}")
    print(f"  Edges : {len(graph.edges)}")
    print(f"  Cycle : {engine.has_cycle()}")

    if len(graph) <= 10:
        print(graph.adjacency_report())

    source = graph.nodes[0].label
    report = time_shortest_paths(engine, source)
    unreachable = [label for label, d in report["distances"].items() if d == INFINITY]
    print(f"  Shortest paths from {source}: scan {report['timings']['scan'] * 1000:.2f} ms, "
          f"heap {report['timings']['heap'] * 1000:.2f} ms, unreachable {len(unreachable)}")

    tree = engine.spanning_tree()
    print(f"  Spanning tree: {len(tree.edges)} edges, total weight {tree.total_weight()}")
    engine.undo()


TESTS = [
    "test_data/example.dot",
    "test_data/random_100.dot",
    "test_data/random_500.dot",
    "test_data/random_2000.dot",
    "test_data/disconnected.dot",
]

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  shortest paths + spanning tree")
    print("=" * 60)

    engine = build_engine()
    for test in TESTS:
        try:
            run(test, engine)
            print("  OK")
        except Exception as e:
            print(f"  Error: {e}")
            import traceback
            traceback.print_exc()

    print(f"\n{'=' * 60}")
    print("  Done.")
    print(f"{'=' * 60}\n")
