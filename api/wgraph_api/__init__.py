"""Public API exports for wgraph_api: model, algorithms and plugin contracts."""

from .model import Node, Edge, Graph
from .errors import GraphImportError
from .services import DataSourcePlugin, ExporterPlugin
from .algorithms import (
    INFINITY,
    DisjointSet,
    has_cycle,
    heap_shortest_paths,
    minimum_spanning_tree,
    scan_shortest_paths,
    shortest_paths,
)

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphImportError",
    "DataSourcePlugin",
    "ExporterPlugin",
    "INFINITY",
    "DisjointSet",
    "has_cycle",
    "heap_shortest_paths",
    "minimum_spanning_tree",
    "scan_shortest_paths",
    "shortest_paths",
]
