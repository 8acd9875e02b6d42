from typing import Optional, List, Callable
from api.wgraph_api.model import Graph, Node, Edge


class Workspace:
    """
    Central application state container.

    Responsibilities:
    - Manage current graph state
    - Maintain history (undo support), e.g. to return from a spanning tree to its input
    - Provide search/filter helpers over nodes and logical edges
    """

    def __init__(self):
        self._current_graph: Optional[Graph] = None
        self._history: List[Graph] = []

    # ==========================================================
    # GRAPH STATE MANAGEMENT
    # ==========================================================

    def set_graph(self, graph: Graph) -> None:
        if self._current_graph is not None:
            self._history.append(self._current_graph)
        self._current_graph = graph

    def get_graph(self) -> Optional[Graph]:
        return self._current_graph

    def has_graph(self) -> bool:
        return self._current_graph is not None

    def clear(self) -> None:
        self._current_graph = None
        self._history.clear()

    def undo(self) -> Optional[Graph]:
        if not self._history:
            return None
        self._current_graph = self._history.pop()
        return self._current_graph

    def history_size(self) -> int:
        return len(self._history)

    # ==========================================================
    # NODE OPERATIONS
    # ==========================================================

    def list_nodes(self) -> List[Node]:
        if self._current_graph is None:
            return []
        return self._current_graph.nodes

    def find_node_by_label(self, label: str) -> Optional[Node]:
        if self._current_graph is None:
            return None
        return self._current_graph.get_node(label)

    def filter_nodes(self, predicate: Callable[[Node], bool]) -> List[Node]:
        return [node for node in self.list_nodes() if predicate(node)]

    # ==========================================================
    # EDGE OPERATIONS
    # ==========================================================

    def list_edges(self) -> List[Edge]:
        if self._current_graph is None:
            return []
        return self._current_graph.edges

    def filter_edges(self, predicate: Callable[[Edge], bool]) -> List[Edge]:
        return [edge for edge in self.list_edges() if predicate(edge)]

    # -----------------
    # PREDEFINED FILTERS / SEARCH
    # -----------------
    def find_nodes_by_label(self, label_substr: str) -> List[Node]:
        """Return nodes whose label contains the given substring."""
        return self.filter_nodes(lambda n: label_substr.lower() in n.label.lower())

    def find_edges_by_weight(self, min_weight: int = None, max_weight: int = None) -> List[Edge]:
        """Return edges whose weight is within the given range."""
        def predicate(e: Edge):
            if min_weight is not None and e.weight < min_weight:
                return False
            if max_weight is not None and e.weight > max_weight:
                return False
            return True
        return self.filter_edges(predicate)
