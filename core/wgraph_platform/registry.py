import logging
from importlib.metadata import entry_points
from api.wgraph_api.services import DataSourcePlugin
from api.wgraph_api.services import ExporterPlugin
from typing import Dict, Type

LOGGER = logging.getLogger(__name__)

DATASOURCE_GROUP = "wgraph_platform.datasource"
EXPORTER_GROUP = "wgraph_platform.exporter"


class PluginRegistry:

    _instance = None
    _datasources: Dict[str, Type[DataSourcePlugin]]
    _exporters: Dict[str, Type[ExporterPlugin]]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._datasources = {}
            cls._instance._exporters = {}
            cls._instance._load_plugins()
        return cls._instance

    def _load_plugins(self):
        eps = entry_points()

        for ep in eps.select(group=DATASOURCE_GROUP):
            self._datasources[ep.name] = ep.load()

        for ep in eps.select(group=EXPORTER_GROUP):
            self._exporters[ep.name] = ep.load()

        LOGGER.debug(
            "Loaded plugins: datasources=%s exporters=%s",
            sorted(self._datasources), sorted(self._exporters),
        )

    def register_datasource(self, name: str, plugin_cls: Type[DataSourcePlugin]) -> None:
        LOGGER.info("Registering datasource plugin '%s'", name)
        self._datasources[name] = plugin_cls

    def register_exporter(self, name: str, plugin_cls: Type[ExporterPlugin]) -> None:
        LOGGER.info("Registering exporter plugin '%s'", name)
        self._exporters[name] = plugin_cls

    def get_datasource(self, name: str) -> Type[DataSourcePlugin] | None:
        return self._datasources.get(name)

    def get_exporter(self, name: str) -> Type[ExporterPlugin] | None:
        return self._exporters.get(name)

    def list_datasources(self) -> list[str]:
        return list(self._datasources.keys())

    def list_exporters(self) -> list[str]:
        return list(self._exporters.keys())
