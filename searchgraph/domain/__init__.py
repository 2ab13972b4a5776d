"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    NoPathFoundError,
    SearchGraphError,
    UnknownVertexError,
    VertexNotFoundError,
)
from .models import Edge, PathResult, SearchStrategy, Vertex, VertexId

__all__ = [
    # Models
    "Vertex",
    "VertexId",
    "Edge",
    "PathResult",
    "SearchStrategy",
    # Errors
    "SearchGraphError",
    "UnknownVertexError",
    "VertexNotFoundError",
    "NoPathFoundError",
    "ConfigurationError",
]
