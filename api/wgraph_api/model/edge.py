from typing import Optional

from .node import Node

DEFAULT_WEIGHT = 1


class Edge:
    # Undirected weighted edge
    # (a, b, w) == (b, a, w), so both adjacency-list copies of one edge compare equal

    __slots__ = ("endpoint1", "endpoint2", "weight")

    def __init__(self, endpoint1: Node, endpoint2: Node, weight: int = DEFAULT_WEIGHT):
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Edge weight must be an integer, got {weight!r}.")
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}.")

        self.endpoint1 = endpoint1
        self.endpoint2 = endpoint2
        self.weight = weight

    @property
    def is_self_loop(self) -> bool:
        return self.endpoint1 == self.endpoint2

    def has_endpoint(self, node: Node) -> bool:
        return self.endpoint1 == node or self.endpoint2 == node

    def other_endpoint(self, node: Node) -> Optional[Node]:
        if self.endpoint1 == node:
            return self.endpoint2
        if self.endpoint2 == node:
            return self.endpoint1
        return None

    def joins(self, node1: Node, node2: Node) -> bool:
        """Return True if this edge connects node1 and node2, in either direction."""
        return (
            (self.endpoint1 == node1 and self.endpoint2 == node2)
            or (self.endpoint1 == node2 and self.endpoint2 == node1)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight == other.weight and self.joins(other.endpoint1, other.endpoint2)

    def __hash__(self) -> int:
        return hash((frozenset((self.endpoint1, self.endpoint2)), self.weight))

    def __repr__(self) -> str:
        return f"Edge({self.endpoint1.label!r}, {self.endpoint2.label!r}, weight={self.weight})"

    def to_dict(self) -> dict:
        return {
            "source": self.endpoint1.label,
            "target": self.endpoint2.label,
            "weight": self.weight,
        }
