"""Top-level package for searchgraph.

A generic directed graph keyed by ordered, unique vertex values, with
breadth-first shortest-path and depth-first path queries.
"""

from .domain.errors import (
    NoPathFoundError,
    SearchGraphError,
    UnknownVertexError,
    VertexNotFoundError,
)
from .domain.models import Edge, PathResult, SearchStrategy, Vertex, VertexId
from .graph import GraphIndex, VertexStore

__all__ = [
    "GraphIndex",
    "VertexStore",
    "Vertex",
    "VertexId",
    "Edge",
    "PathResult",
    "SearchStrategy",
    "SearchGraphError",
    "UnknownVertexError",
    "VertexNotFoundError",
    "NoPathFoundError",
]
