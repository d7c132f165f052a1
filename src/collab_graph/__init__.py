from .errors import (
    CollabGraphError,
    EmptyGraphError,
    MalformedLineError,
    NonConvergenceWarning,
    UnknownNodeError,
)
from .graph import Graph
from .models import Edge, ParseResult
from .parser import EdgeParser, parse_edge_line, parse_edge_lines

__all__ = [
    "CollabGraphError",
    "Edge",
    "EdgeParser",
    "EmptyGraphError",
    "Graph",
    "MalformedLineError",
    "NonConvergenceWarning",
    "ParseResult",
    "UnknownNodeError",
    "parse_edge_line",
    "parse_edge_lines",
]
