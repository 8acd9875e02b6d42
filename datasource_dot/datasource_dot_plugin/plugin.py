import io
import logging
import re
from typing import Any, Dict, Iterable, List, NoReturn, Optional

from api.wgraph_api.errors import GraphImportError
from api.wgraph_api.model import Graph, DEFAULT_WEIGHT
from api.wgraph_api.datasource_common.base import BaseDatasourcePlugin

LOGGER = logging.getLogger(__name__)

# "strict graph" declares an undirected graph without duplicate edges in GraphViz
# A trailing "{" is accepted since real DOT files carry one
HEADER_PATTERN = re.compile(r"strict graph(?:\s*\{)?\s*", re.ASCII)
TERMINATOR = "}"

# node1 -- node2;  or  node1 -- node2 [weight = 5];
# ASCII only: labels, digits and separators outside ASCII are rejected
EDGE_PATTERN = re.compile(
    r"\s*(?P<source>\w+)\s+--\s+(?P<target>\w+)"
    r"(?:\s*\[\s*weight\s*=\s*(?P<weight>\d+)\s*\])?"
    r"\s*;\s*",
    re.ASCII,
)


class DotDatasourcePlugin(BaseDatasourcePlugin):
    # Adapter to read the restricted "strict graph" subset of GraphViz DOT
    # Only undirected edge declarations with an optional integer weight are understood
    # Any line outside that subset fails the whole import

    @property
    def plugin_id(self) -> str:
        return "dot"

    @property
    def display_name(self) -> str:
        return "GraphViz strict graph"

    def parameters_schema(self) -> dict:
        return {
            "file_path": {
                "type": "str",
                "label": "Path to .dot file",
                "required": True
            },
            "encoding": {
                "type": "str",
                "label": "File encoding",
                "required": False,
                "default": "utf-8"
            }
        }

    def load_graph_from_text(self, text: str, **options: Any) -> Graph:
        return self.load_graph(io.StringIO(text), **options)

    def _parse_source(self, source, **kwargs) -> dict:
        # Streams are read as they are, anything else is treated as a path
        if hasattr(source, "readline"):
            return self._parse_lines(source)

        path = self._resolve_path(source, kwargs)
        encoding = kwargs.get("encoding") or "utf-8"
        with open(path, "r", encoding=encoding) as f:
            raw_data = self._parse_lines(f)

        LOGGER.debug("Parsed %s: %d nodes, %d edges", path, len(raw_data["nodes"]), len(raw_data["edges"]))
        return raw_data

    def _parse_lines(self, lines: Iterable[str]) -> dict:
        nodes: Dict[str, None] = {}  # ordered set of labels
        edges: List[dict] = []

        iterator = iter(lines)
        header = next(iterator, None)
        if header is None:
            self._fail("empty input, expected 'strict graph' header", 1)
        self._require_text(header, 1)
        if not HEADER_PATTERN.fullmatch(header.rstrip("\r\n")):
            self._fail(f"expected 'strict graph' header, got {header.strip()!r}", 1)

        for line_number, raw_line in enumerate(iterator, start=2):
            self._require_text(raw_line, line_number)
            line = raw_line.rstrip("\r\n")

            if line == TERMINATOR:
                return {"nodes": list(nodes), "edges": edges}

            match = EDGE_PATTERN.fullmatch(line)
            if match is None:
                self._fail(f"malformed edge declaration {line.strip()!r}", line_number)

            weight = DEFAULT_WEIGHT
            if match.group("weight") is not None:
                try:
                    weight = int(match.group("weight"))
                except ValueError as exc:
                    LOGGER.warning("Rejected weight on line %d: %s", line_number, exc)
                    raise GraphImportError(f"malformed weight {match.group('weight')!r}", line_number) from exc

            source, target = match.group("source"), match.group("target")
            nodes.setdefault(source)
            nodes.setdefault(target)
            edges.append({"source": source, "target": target, "weight": weight})

        self._fail(f"missing closing '{TERMINATOR}' line")

    def _require_text(self, line: Any, line_number: int) -> None:
        # Binary streams yield bytes, which the dialect does not describe
        if not isinstance(line, str):
            self._fail(f"expected text, got {type(line).__name__}", line_number)

    @staticmethod
    def _fail(message: str, line_number: Optional[int] = None) -> NoReturn:
        LOGGER.warning("Rejected graph source (line %s): %s", line_number, message)
        raise GraphImportError(message, line_number)
