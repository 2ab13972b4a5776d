"""Traversal-based path solver adapters.

These adapters wrap a graph's path queries and add:
- Domain model output (PathResult)
- Typed errors separating unknown endpoints from unreachable ones
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ...domain.errors import NoPathFoundError, UnknownVertexError
from ...domain.models import PathResult, SearchStrategy
from ...ports.graph import SearchableGraphPort


@dataclass
class TraversalPathSolver:
    """Path solver delegating to the graph's own traversal.

    This adapter implements PathSolverPort for any SearchableGraphPort.
    """

    strategy: SearchStrategy = SearchStrategy.BFS
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: SearchableGraphPort, start: Any, end: Any) -> PathResult:
        """Find a path between two vertices.

        Args:
            graph: The graph to search.
            start: Value of the first vertex.
            end: Value of the last vertex.

        Returns:
            PathResult with the path and the strategy used.

        Raises:
            UnknownVertexError: If start or end not in graph.
            NoPathFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving path",
            extra={"start": repr(start), "end": repr(end), "strategy": self.strategy.value},
        )

        if not graph.exists(start):
            raise UnknownVertexError(f"Start vertex not in graph: {start!r}", value=start)
        if not graph.exists(end):
            raise UnknownVertexError(f"End vertex not in graph: {end!r}", value=end)

        path = graph.find_path(start, end, self.strategy)

        if not path:
            self._logger.warning(
                "No path found",
                extra={"start": repr(start), "end": repr(end)},
            )
            raise NoPathFoundError(
                f"No path from {start!r} to {end!r}",
                start=start,
                end=end,
            )

        result = PathResult(path=tuple(path), strategy=self.strategy)
        self._logger.info(
            "Path found",
            extra={"start": repr(start), "end": repr(end), "hops": result.hops},
        )
        return result

    def solve_safe(self, graph: SearchableGraphPort, start: Any, end: Any) -> PathResult:
        """Find a path, returning an empty result on failure.

        Like solve(), but returns an empty PathResult instead of raising.
        """
        path = graph.find_path(start, end, self.strategy)
        return PathResult(path=tuple(path), strategy=self.strategy)


@dataclass
class BreadthFirstPathSolver(TraversalPathSolver):
    """Solver returning a path with the fewest edges."""

    strategy: SearchStrategy = SearchStrategy.BFS


@dataclass
class DepthFirstPathSolver(TraversalPathSolver):
    """Solver returning the first path a depth-first search completes."""

    strategy: SearchStrategy = SearchStrategy.DFS


SOLVERS: dict[str, type[TraversalPathSolver]] = {
    SearchStrategy.BFS.value: BreadthFirstPathSolver,
    SearchStrategy.DFS.value: DepthFirstPathSolver,
}
