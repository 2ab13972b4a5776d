"""Immutable domain models for the searchable graph.

All models are frozen dataclasses with slots. They carry values and
identities only; the graph itself lives in ``searchgraph.graph``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, NewType, TypeVar

T = TypeVar("T")

# Stable, store-internal handle of a vertex (its slot in the store arena).
VertexId = NewType("VertexId", int)


class SearchStrategy(str, Enum):
    """Traversal order used by path and reachability queries."""

    BFS = "bfs"
    DFS = "dfs"


@dataclass(frozen=True, slots=True)
class Vertex(Generic[T]):
    """A uniquely-valued node of the graph.

    Attributes:
        id: Stable identity assigned on first insertion
        value: The ordered value the vertex wraps
    """

    id: VertexId
    value: T


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    """A directed relation from one vertex value to another."""

    source: T
    target: T


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a path query between two vertices.

    Attributes:
        path: Ordered tuple of vertex values from start to end (inclusive)
        strategy: Traversal order that produced the path
    """

    path: tuple[Any, ...] = field(default_factory=tuple)
    strategy: SearchStrategy = SearchStrategy.BFS

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def hops(self) -> int:
        """Return the number of edges traversed, 0 for an empty path."""
        return max(len(self.path) - 1, 0)
