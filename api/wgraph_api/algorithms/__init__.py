"""
Graph algorithms: shortest paths, union-find and spanning trees.
"""

from .shortest_path import (
    INFINITY,
    heap_shortest_paths,
    scan_shortest_paths,
    shortest_paths,
)
from .disjoint_set import DisjointSet
from .spanning_tree import has_cycle, minimum_spanning_tree

__all__ = [
    "INFINITY",
    "heap_shortest_paths",
    "scan_shortest_paths",
    "shortest_paths",
    "DisjointSet",
    "has_cycle",
    "minimum_spanning_tree",
]
