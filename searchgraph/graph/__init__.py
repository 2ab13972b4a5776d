"""Graph core: sorted vertex storage, adjacency and traversals.

This subpackage contains the vertex store, the graph built on top of it
and the breadth-first and depth-first searches that answer path queries.
"""

from .index import GraphIndex
from .vertex_store import VertexStore

__all__ = ["GraphIndex", "VertexStore"]
