"""Typed domain errors for the searchable graph.

All errors inherit from SearchGraphError and can optionally wrap a
root cause exception for debugging.

Only mutations report errors. Queries (``exists``, ``shortest_path``,
``neighbors``) are total and express absence with ``False`` or an
empty sequence instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SearchGraphError(Exception):
    """Base error for the searchable graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownVertexError(SearchGraphError):
    """An edge endpoint is not present in the vertex store.

    Raised by ``add_edge`` before anything is recorded, so the graph is
    left unchanged.

    Attributes:
        value: The missing vertex value
    """

    value: Any = None


@dataclass
class VertexNotFoundError(SearchGraphError):
    """A vertex identity does not belong to the store.

    Identities handed out by a store stay valid for its whole lifetime,
    so seeing this error means a handle from another store was used.

    Attributes:
        vertex_id: The identity that was looked up
    """

    vertex_id: Optional[int] = None


@dataclass
class NoPathFoundError(SearchGraphError):
    """No path exists between the requested vertices.

    Attributes:
        start: Start vertex value
        end: End vertex value
    """

    start: Any = None
    end: Any = None


@dataclass
class ConfigurationError(SearchGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
