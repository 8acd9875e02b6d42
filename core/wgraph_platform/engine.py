import logging
from typing import Dict, Optional, Union

from .registry import PluginRegistry
from .workspace import Workspace
from api.wgraph_api.algorithms import has_cycle, minimum_spanning_tree, shortest_paths
from api.wgraph_api.model import Graph
from api.wgraph_api.services import DataSourcePlugin, ExporterPlugin

LOGGER = logging.getLogger(__name__)


class GraphEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Plugin execution (import / export)
    - Running the graph algorithms against the current graph
    - Delegation to Workspace
    """

    def __init__(self, registry: Optional[PluginRegistry] = None, workspace: Optional[Workspace] = None):
        self.registry = registry or PluginRegistry()
        self.workspace = workspace or Workspace()

    # ==========================================================
    # MAIN ORCHESTRATION
    # ==========================================================

    def load(self, datasource_name: str, source, **options) -> Graph:
        datasource_cls = self.registry.get_datasource(datasource_name)
        if not datasource_cls:
            raise ValueError(f"Datasource '{datasource_name}' not found.")

        datasource: DataSourcePlugin = datasource_cls()
        graph = datasource.load_graph(source, **options)
        LOGGER.info("Loaded graph through '%s': %d nodes, %d edges",
                    datasource_name, len(graph), len(graph.edges))

        # Store graph inside workspace
        self.workspace.set_graph(graph)
        return graph

    def export(self, exporter_name: str, **options) -> str:
        exporter_cls = self.registry.get_exporter(exporter_name)
        if not exporter_cls:
            raise ValueError(f"Exporter '{exporter_name}' not found.")

        exporter: ExporterPlugin = exporter_cls()
        return exporter.render(self._require_graph(), **options)

    def process(
        self,
        datasource_name: str,
        exporter_name: str,
        source,
        **options,
    ) -> str:
        if not self.registry.get_exporter(exporter_name):
            raise ValueError(f"Exporter '{exporter_name}' not found.")

        self.load(datasource_name, source, **options)
        return self.export(exporter_name, **options)

    # ==========================================================
    # ALGORITHMS
    # ==========================================================

    def shortest_paths(self, source_label: str, method: str = "heap") -> Dict[str, Union[int, float]]:
        """Distances from source_label keyed by label; empty if the label is unknown."""
        graph = self._require_graph()
        source = graph.get_node(source_label)
        if source is None:
            return {}
        distances = shortest_paths(graph, source, method=method)
        return {node.label: distance for node, distance in distances.items()}

    def spanning_tree(self) -> Graph:
        tree = minimum_spanning_tree(self._require_graph())
        # The input stays reachable through undo()
        self.workspace.set_graph(tree)
        return tree

    def has_cycle(self) -> bool:
        return has_cycle(self._require_graph())

    def _require_graph(self) -> Graph:
        graph = self.workspace.get_graph()
        if graph is None:
            raise ValueError("No graph loaded in the workspace.")
        return graph

    # ==========================================================
    # WORKSPACE DELEGATION API
    # ==========================================================

    def get_current_graph(self):
        return self.workspace.get_graph()

    def clear_workspace(self):
        self.workspace.clear()

    def undo(self):
        return self.workspace.undo()

    def list_nodes(self):
        return self.workspace.list_nodes()

    def find_node(self, label: str):
        return self.workspace.find_node_by_label(label)

    def list_edges(self):
        return self.workspace.list_edges()

    def search_nodes_by_label(self, label_substr: str):
        return self.workspace.find_nodes_by_label(label_substr)

    def search_edges_by_weight(self, min_weight: int = None, max_weight: int = None):
        return self.workspace.find_edges_by_weight(min_weight, max_weight)
