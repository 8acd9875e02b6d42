"""
Single-source shortest paths over non-negative integer edge weights.

Two interchangeable implementations of Dijkstra's algorithm are provided:

- ``scan_shortest_paths`` picks the next node with a linear scan over the
  unvisited set, O(V^2 + E).
- ``heap_shortest_paths`` uses a binary heap with lazy decrease-key
  (improved nodes are pushed again, stale entries are skipped on pop),
  O(E log V).

Both return a mapping covering every node of the graph. Nodes that cannot
be reached from the source keep the ``INFINITY`` distance. Neither function
mutates the graph.
"""

import heapq
import itertools
import logging
import math
from typing import Callable, Dict, Union

from ..model import Graph, Node

LOGGER = logging.getLogger(__name__)

INFINITY = math.inf

Distance = Union[int, float]
DistanceMap = Dict[Node, Distance]


def _initial_distances(graph: Graph, source: Node) -> DistanceMap:
    distances: DistanceMap = {node: INFINITY for node in graph.nodes}
    distances[source] = 0
    return distances


def scan_shortest_paths(graph: Graph, source: Node) -> DistanceMap:
    if source not in graph:
        return {}

    distances = _initial_distances(graph, source)
    unvisited = set(distances)

    current = source
    while current is not None:
        current_distance = distances[current]
        for edge in graph.incident_edges(current):
            other = edge.other_endpoint(current)
            if other in unvisited:
                candidate = current_distance + edge.weight
                if candidate < distances[other]:
                    distances[other] = candidate
        unvisited.discard(current)

        # Linear scan for the closest unvisited node
        current = None
        best = INFINITY
        for node in unvisited:
            if distances[node] < best:
                current = node
                best = distances[node]

    LOGGER.debug("Scan search from %s settled %d of %d nodes",
                 source.label, len(distances) - len(unvisited), len(distances))
    return distances


def heap_shortest_paths(graph: Graph, source: Node) -> DistanceMap:
    if source not in graph:
        return {}

    distances = _initial_distances(graph, source)

    # (distance, tie-breaker, node); the counter keeps nodes from being compared
    counter = itertools.count()
    queue = [(0, next(counter), source)]
    settled = set()
    stale = 0

    while queue:
        current_distance, _, current = heapq.heappop(queue)
        if current in settled or current_distance > distances[current]:
            stale += 1
            continue
        settled.add(current)

        for edge in graph.incident_edges(current):
            other = edge.other_endpoint(current)
            if other in settled:
                continue
            candidate = current_distance + edge.weight
            if candidate < distances[other]:
                distances[other] = candidate
                heapq.heappush(queue, (candidate, next(counter), other))

    LOGGER.debug("Heap search from %s settled %d nodes, skipped %d stale entries",
                 source.label, len(settled), stale)
    return distances


METHODS: Dict[str, Callable[[Graph, Node], DistanceMap]] = {
    "heap": heap_shortest_paths,
    "scan": scan_shortest_paths,
}


def shortest_paths(graph: Graph, source: Node, method: str = "heap") -> DistanceMap:
    algorithm = METHODS.get(method)
    if algorithm is None:
        raise ValueError(f"Unknown shortest path method '{method}'. Use one of: {', '.join(METHODS)}.")
    return algorithm(graph, source)
