from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .node import Node
from .edge import Edge, DEFAULT_WEIGHT


class Graph:
    """
    Weighted undirected graph stored as an adjacency list.

    Every edge is registered in the edge list of both of its endpoints
    (a self-loop is registered once). Node labels are unique.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._adjacency: Dict[Node, List[Edge]] = {}

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_node(self, label: str) -> Node:
        label = str(label)
        existing = self._nodes.get(label)
        if existing is not None:
            return existing

        node = Node(label)
        self._nodes[label] = node
        self._adjacency[node] = []
        return node

    def get_node(self, label: str) -> Optional[Node]:
        return self._nodes.get(str(label))

    def remove_node(self, node: Node) -> None:
        edges = self._adjacency.pop(node, None)
        if edges is None:
            return
        del self._nodes[node.label]

        # Prune the other endpoint of every incident edge
        for edge in edges:
            other = edge.other_endpoint(node)
            if other is None or other == node:
                continue
            remaining = self._adjacency.get(other)
            if remaining is not None:
                remaining[:] = [e for e in remaining if not e.has_endpoint(node)]

    @property
    def nodes(self) -> List[Node]:
        return list(self._adjacency)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, node1: Node, node2: Node, weight: int = DEFAULT_WEIGHT) -> Edge:
        return self.add_edge_object(Edge(node1, node2, weight))

    def add_edge_object(self, edge: Edge) -> Edge:
        if edge.endpoint1 not in self._adjacency:
            raise ValueError(f"Node '{edge.endpoint1.label}' does not exist.")

        if edge.endpoint2 not in self._adjacency:
            raise ValueError(f"Node '{edge.endpoint2.label}' does not exist.")

        self._adjacency[edge.endpoint1].append(edge)
        if not edge.is_self_loop:
            self._adjacency[edge.endpoint2].append(edge)
        return edge

    def remove_edge(self, node1: Node, node2: Node) -> None:
        """Remove every edge joining node1 and node2, whatever its weight."""
        for endpoint in {node1, node2}:
            edges = self._adjacency.get(endpoint)
            if edges is not None:
                edges[:] = [e for e in edges if not e.joins(node1, node2)]

    def remove_edge_object(self, edge: Edge) -> None:
        """Remove every entry equal to edge (same endpoints and weight)."""
        for endpoint in {edge.endpoint1, edge.endpoint2}:
            edges = self._adjacency.get(endpoint)
            if edges is not None:
                edges[:] = [e for e in edges if e != edge]

    def incident_edges(self, node: Node) -> Tuple[Edge, ...]:
        return tuple(self._adjacency.get(node, ()))

    def neighbors(self, node: Node) -> List[Node]:
        return [edge.other_endpoint(node) for edge in self._adjacency.get(node, ())]

    @property
    def edges(self) -> List[Edge]:
        # Each logical edge once, in first-seen order
        seen = set()
        result = []
        for edges in self._adjacency.values():
            for edge in edges:
                if edge in seen:
                    continue
                seen.add(edge)
                result.append(edge)
        return result

    def get_adjacency(self) -> Mapping[Node, Tuple[Edge, ...]]:
        return MappingProxyType({node: tuple(edges) for node, edges in self._adjacency.items()})

    # -----------------
    # SUMMARIES
    # -----------------

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    def adjacency_report(self) -> str:
        lines = []
        for node, edges in self._adjacency.items():
            neighbours = ", ".join(
                f"{edge.other_endpoint(node).label} ({edge.weight})" for edge in edges
            )
            lines.append(f"{node.label} -> {neighbours}".rstrip())
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "directed": False,
            "nodes": [node.to_dict() for node in self._adjacency],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    def __contains__(self, node) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._adjacency)}, edges={len(self.edges)})"
