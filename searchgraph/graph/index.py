"""Directed graph over a VertexStore, answering path queries.

``GraphIndex`` owns the vertex store and the adjacency relation (vertex id
to the ordered ids of its direct neighbors). It is the concrete type that
satisfies ``SearchableGraphPort``.

Not synchronized: callers sharing one graph between threads must
serialize access to it themselves.
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterable, Iterator, List, Optional, Set, TypeVar

from ..config import get_config
from ..domain.errors import UnknownVertexError
from ..domain.models import Edge, SearchStrategy, VertexId
from . import search
from .vertex_store import VertexStore

T = TypeVar("T")

logger = logging.getLogger(__name__)


class GraphIndex(Generic[T]):
    """Uniquely-keyed vertices plus directed edges between them.

    Example:
        graph = GraphIndex[int]()
        for value in (5, 3, 8, 1):
            graph.add_vertex(value)
        graph.add_edge(1, 3)
        graph.add_edge(1, 8)
        graph.shortest_path(1, 8)  # [1, 8]

    Args:
        dedupe_edges: When True a repeated ``add_edge(u, v)`` is ignored.
            Defaults to ``GraphConfig.dedupe_edges``.
    """

    def __init__(self, dedupe_edges: Optional[bool] = None) -> None:
        if dedupe_edges is None:
            dedupe_edges = get_config().graph.dedupe_edges
        self.dedupe_edges = dedupe_edges
        self._store: VertexStore[T] = VertexStore()
        self._adjacency: Dict[VertexId, List[VertexId]] = {}

    @property
    def store(self) -> VertexStore[T]:
        return self._store

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def add_vertex(self, value: T) -> VertexId:
        """Add ``value`` if absent; return its identity either way."""
        vertex_id = self._store.insert(value)
        self._adjacency.setdefault(vertex_id, [])
        return vertex_id

    def add_vertices(self, values: Iterable[T]) -> List[VertexId]:
        return [self.add_vertex(value) for value in values]

    def _require(self, value: T) -> VertexId:
        vertex_id = self._store.id_of(value)
        if vertex_id is None:
            logger.warning("Edge rejected, unknown vertex", extra={"value": repr(value)})
            raise UnknownVertexError(f"Vertex not in graph: {value!r}", value=value)
        return vertex_id

    def _link(self, source: VertexId, target: VertexId) -> bool:
        neighbors = self._adjacency.setdefault(source, [])
        if self.dedupe_edges and target in neighbors:
            return False
        neighbors.append(target)
        return True

    def add_edge(self, source: T, target: T) -> None:
        """Record a directed edge ``source -> target``.

        Raises:
            UnknownVertexError: If either endpoint has not been added. No
                edge is recorded in that case.
        """
        source_id = self._require(source)
        target_id = self._require(target)
        added = self._link(source_id, target_id)
        logger.debug(
            "Edge added" if added else "Duplicate edge ignored",
            extra={"source_id": source_id, "target_id": target_id},
        )

    def add_undirected_edge(self, u: T, v: T) -> None:
        """Record both ``u -> v`` and ``v -> u``.

        Both endpoints are checked before either direction is recorded.
        """
        u_id = self._require(u)
        v_id = self._require(v)
        self._link(u_id, v_id)
        if u_id != v_id:
            self._link(v_id, u_id)

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #
    def exists(self, value: T) -> bool:
        return value in self._store

    def neighbors(self, value: T) -> List[T]:
        """Direct neighbors of ``value`` in edge insertion order, or []."""
        vertex_id = self._store.id_of(value)
        if vertex_id is None:
            return []
        return [self._store.get(n) for n in self._adjacency.get(vertex_id, ())]

    def has_edge(self, source: T, target: T) -> bool:
        source_id = self._store.id_of(source)
        target_id = self._store.id_of(target)
        if source_id is None or target_id is None:
            return False
        return target_id in self._adjacency.get(source_id, ())

    def vertices(self) -> List[T]:
        """All vertex values in ascending order."""
        return self._store.values()

    def edges(self) -> List[Edge[T]]:
        """All edges, grouped by source in ascending order."""
        return [
            Edge(self._store.get(source), self._store.get(target))
            for source in self._store.ids()
            for target in self._adjacency.get(source, ())
        ]

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def _values(self, ids: Iterable[int]) -> List[T]:
        return [self._store.get(i) for i in ids]

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def find_path(
        self,
        start: T,
        end: T,
        strategy: SearchStrategy = SearchStrategy.BFS,
    ) -> List[T]:
        """Path from ``start`` to ``end`` inclusive, [] if there is none."""
        strategy = SearchStrategy(strategy)
        start_id = self._store.id_of(start)
        end_id = self._store.id_of(end)
        if start_id is None or end_id is None:
            logger.debug(
                "Path query on unknown vertex",
                extra={"start": repr(start), "end": repr(end)},
            )
            return []

        path = search.find_path(self._adjacency, start_id, end_id, strategy)
        logger.debug(
            "Path search finished",
            extra={
                "strategy": strategy.value,
                "start_id": start_id,
                "end_id": end_id,
                "hops": len(path) - 1 if path else None,
            },
        )
        return self._values(path)

    def shortest_path(self, start: T, end: T) -> List[T]:
        """Shortest path by edge count between two values.

        Returns ``[start]`` when ``start == end`` and ``[]`` when either
        value is absent or ``end`` is unreachable. Among equally short
        paths the one built from earlier-added edges is returned.
        """
        return self.find_path(start, end, SearchStrategy.BFS)

    def depth_first_path(self, start: T, end: T) -> List[T]:
        return self.find_path(start, end, SearchStrategy.DFS)

    def distance(self, start: T, end: T) -> Optional[int]:
        """Number of edges on a shortest path, None when there is no path."""
        path = self.shortest_path(start, end)
        return len(path) - 1 if path else None

    def traverse(
        self,
        start: T,
        strategy: SearchStrategy = SearchStrategy.BFS,
    ) -> List[T]:
        """Values reachable from ``start`` (itself first) in visiting order."""
        strategy = SearchStrategy(strategy)
        start_id = self._store.id_of(start)
        if start_id is None:
            return []
        return self._values(search.traverse(self._adjacency, start_id, strategy))

    def reachable(
        self,
        start: T,
        strategy: SearchStrategy = SearchStrategy.BFS,
    ) -> Set[T]:
        """Set of values reachable from ``start``; values must be hashable."""
        return set(self.traverse(start, strategy))

    # ------------------------------------------------------------------ #
    # Container protocol
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[T]:
        return iter(self._store)

    def __contains__(self, value: object) -> bool:
        return value in self._store

    def __repr__(self) -> str:
        return f"GraphIndex(vertices={len(self)}, edges={self.edge_count})"
