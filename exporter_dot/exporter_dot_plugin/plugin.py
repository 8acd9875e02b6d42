import os
import re
from jinja2 import Environment, FileSystemLoader
from api.wgraph_api.services.exporter_plugin import ExporterPlugin
from api.wgraph_api.model import Graph, DEFAULT_WEIGHT

TEMPLATE_NAME = "strict_graph.dot"

# Labels the dot datasource can read back
LABEL_PATTERN = re.compile(r"\w+", re.ASCII)


class DotExporterPlugin(ExporterPlugin):
    # Writes the logical edges of a graph back in the "strict graph" subset the dot datasource reads
    # Nodes without edges cannot be expressed in that subset and are left out
    # Labels outside [A-Za-z0-9_] cannot be read back either and raise ValueError

    @property
    def plugin_id(self) -> str:
        return "dot"

    @property
    def display_name(self) -> str:
        return "GraphViz strict graph"

    def render_options_schema(self) -> dict:
        return {
            "explicit_weights": {
                "type": "bool",
                "label": "Write [weight = 1] for default-weight edges",
                "required": False,
                "default": False
            }
        }

    def render(self, graph: Graph, **options) -> str:
        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(
            loader=FileSystemLoader(template_path),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        template = env.get_template(TEMPLATE_NAME)

        edges = graph.edges
        for edge in edges:
            for node in (edge.endpoint1, edge.endpoint2):
                if not LABEL_PATTERN.fullmatch(node.label):
                    raise ValueError(f"Label '{node.label}' cannot be written as a strict graph node.")

        return template.render(
            edges=edges,
            explicit_weights=bool(options.get("explicit_weights", False)),
            default_weight=DEFAULT_WEIGHT,
        )
