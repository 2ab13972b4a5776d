"""Graph ports - Capability contracts for searchable graphs.

These protocols define what a searchable graph offers and how path
solvers consume it. Implementations satisfy them structurally; nothing
inherits from them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult, SearchStrategy


class SearchableGraphPort(Protocol):
    """Port for a graph of uniquely-valued vertices and directed edges.

    Implementation: graph/index.py (GraphIndex)
    """

    def add_vertex(self, value: Any) -> Any:
        """Add a vertex if no equal value is present.

        Args:
            value: The vertex value; must be totally ordered.

        Returns:
            The identity of the new or existing vertex.
        """
        ...

    def add_edge(self, source: Any, target: Any) -> None:
        """Add a directed edge between two existing vertices.

        Raises:
            UnknownVertexError: If either endpoint is absent.
        """
        ...

    def exists(self, value: Any) -> bool:
        """Check whether a vertex with this value is present."""
        ...

    def find_path(
        self,
        start: Any,
        end: Any,
        strategy: SearchStrategy = ...,
    ) -> List[Any]:
        """Find a path with the given traversal order.

        Returns:
            Values from start to end inclusive, empty if there is none.
        """
        ...

    def shortest_path(self, start: Any, end: Any) -> List[Any]:
        """Find a path with the fewest edges.

        Args:
            start: Value of the first vertex.
            end: Value of the last vertex.

        Returns:
            Values from start to end inclusive, empty if there is none.
        """
        ...


class PathSolverPort(Protocol):
    """Port for path computation over a searchable graph.

    Implementations: adapters/graph/path_solver.py

    Unlike the graph queries, solvers tell an unknown endpoint apart from
    an unreachable one.
    """

    def solve(self, graph: SearchableGraphPort, start: Any, end: Any) -> PathResult:
        """Find a path between two vertices.

        Returns:
            PathResult with the path and the strategy used.

        Raises:
            UnknownVertexError: If start or end is not in the graph.
            NoPathFoundError: If end cannot be reached from start.
        """
        ...

    def solve_safe(self, graph: SearchableGraphPort, start: Any, end: Any) -> PathResult:
        """Find a path, returning an empty result instead of raising."""
        ...
