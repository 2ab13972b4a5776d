"""Sorted, deduplicated storage of vertex values.

Vertices live in an arena indexed by their ``VertexId``; a second list
holds the ids ordered ascending by value and is what binary search runs
over. Ids therefore never move when a smaller value is inserted later.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from ..domain.errors import VertexNotFoundError
from ..domain.models import Vertex, VertexId

T = TypeVar("T")

logger = logging.getLogger(__name__)


class VertexStore(Generic[T]):
    """Unique vertex values kept in ascending order.

    Values must support ``<`` and ``==`` consistently (a total order).
    Duplicates are detected by value equality, so two equal values built
    separately still map to the same vertex.
    """

    def __init__(self) -> None:
        self._values: List[T] = []
        self._order: List[VertexId] = []

    def _locate(self, value: T) -> Tuple[int, bool]:
        """Return the insertion point for ``value`` and whether it is present."""
        pos = bisect_left(self._order, value, key=self._values.__getitem__)
        found = pos < len(self._order) and self._values[self._order[pos]] == value
        return pos, found

    def insert(self, value: T) -> VertexId:
        """Insert ``value`` keeping the order, or return the existing id.

        Returns:
            Identity of the newly inserted or already present vertex.
        """
        pos, found = self._locate(value)
        if found:
            return self._order[pos]

        vertex_id = VertexId(len(self._values))
        self._values.append(value)
        self._order.insert(pos, vertex_id)
        logger.debug(
            "Vertex inserted",
            extra={"vertex_id": vertex_id, "position": pos, "size": len(self._order)},
        )
        return vertex_id

    def exists(self, value: T) -> bool:
        return self.id_of(value) is not None

    def id_of(self, value: T) -> Optional[VertexId]:
        """Look up the identity of ``value`` without mutating the store.

        A value that cannot be ordered against the stored ones is absent.
        """
        try:
            pos, found = self._locate(value)
        except TypeError:
            return None
        return self._order[pos] if found else None

    def get(self, vertex_id: int) -> T:
        """Return the value stored under ``vertex_id``.

        Raises:
            VertexNotFoundError: If the id was not handed out by this store.
        """
        if not 0 <= vertex_id < len(self._values):
            raise VertexNotFoundError(
                f"Unknown vertex id: {vertex_id}",
                vertex_id=vertex_id,
            )
        return self._values[vertex_id]

    def vertex(self, vertex_id: int) -> Vertex[T]:
        return Vertex(VertexId(vertex_id), self.get(vertex_id))

    def ids(self) -> List[VertexId]:
        """Return all ids ordered by their values."""
        return list(self._order)

    def values(self) -> List[T]:
        """Return all values in ascending order."""
        return [self._values[i] for i in self._order]

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __contains__(self, value: object) -> bool:
        return self.exists(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"VertexStore({self.values()!r})"
