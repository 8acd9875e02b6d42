"""Exception types shared by the graph API and its plugins."""

from typing import Optional


class GraphImportError(Exception):
    """Raised when a source cannot be turned into a complete graph.

    Syntax problems, bad integers and I/O failures all surface as this one
    type; the original cause is chained as ``__cause__``.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
