"""Service-level plugin contracts for wgraph_api."""

from .datasource_plugin import DataSourcePlugin
from .exporter_plugin import ExporterPlugin

__all__ = ["DataSourcePlugin", "ExporterPlugin"]
