class Node:
    # A node is nothing more than its label
    # Equality and hashing go through the label so nodes can be dict keys and set members

    __slots__ = ("label",)

    def __init__(self, label: str):
        self.label = str(label)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.label == other.label

    def __hash__(self) -> int:
        return hash(self.label)

    def __repr__(self) -> str:
        return f"Node({self.label!r})"

    def to_dict(self) -> dict:
        return {
            "id": self.label,
            "label": self.label,
        }
