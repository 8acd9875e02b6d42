# base.py
from __future__ import annotations

import logging
import os
from abc import abstractmethod
from typing import Any

from api.wgraph_api.errors import GraphImportError
from api.wgraph_api.model import Graph, DEFAULT_WEIGHT
from api.wgraph_api.services.datasource_plugin import DataSourcePlugin

LOGGER = logging.getLogger(__name__)


class BaseDatasourcePlugin(DataSourcePlugin):
    # Base class for defining the flow of creating a Graph object
    # The flow is always to first parse the source (this is different based on plugin)
    # Secondly, we build the nodes and the edges (which is the same for all)
    # The graph is only built once parsing succeeded, so a failed import never leaves a partial graph

    def load_graph(self, source: Any, **options: Any) -> Graph:
        # Parse the data
        # This step is different based on each plugin implementation
        try:
            raw_data = self._parse_source(source, **options)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            # LookupError: unknown encoding option
            LOGGER.warning("Reading graph source failed: %s", exc)
            raise GraphImportError(f"Unable to read graph source: {exc}") from exc

        graph = Graph()
        self._build_nodes(raw_data, graph)
        self._build_edges(raw_data, graph)
        LOGGER.debug("Loaded graph with %d nodes and %d edges", len(graph), len(graph.edges))
        return graph

    @staticmethod
    def _resolve_path(source: Any, options: dict[str, Any]) -> str:
        if isinstance(source, os.PathLike):
            return os.fspath(source)
        if isinstance(source, str) and source.strip():
            return source
        fp = options.get("file_path")
        if isinstance(fp, (str, os.PathLike)) and str(fp).strip():
            return os.fspath(fp)
        raise GraphImportError("Missing file path. Provide it as 'source' or as option 'file_path'.")

    @abstractmethod
    def _parse_source(self, source: Any, **options: Any) -> Any:
        # Returns {"nodes": [label, ...], "edges": [{"source", "target", "weight"}, ...]}
        pass

    def _build_nodes(self, raw_data: Any, graph: Graph) -> None:
        for label in raw_data.get("nodes", []):
            graph.add_node(label)

    def _build_edges(self, raw_data: Any, graph: Graph) -> None:
        for edge_dict in raw_data.get("edges", []):
            # add_node hands back the registered node for labels already seen
            node1 = graph.add_node(edge_dict["source"])
            node2 = graph.add_node(edge_dict["target"])
            graph.add_edge(node1, node2, edge_dict.get("weight", DEFAULT_WEIGHT))
