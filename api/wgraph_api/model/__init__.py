"""
Core graph domain model (Node, Edge, Graph).
"""

from .node import Node
from .edge import Edge, DEFAULT_WEIGHT
from .graph import Graph

__all__ = ["Node", "Edge", "Graph", "DEFAULT_WEIGHT"]
