"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph core and the adapters that
consume it. They enable dependency injection and make the system testable.
"""

from .graph import PathSolverPort, SearchableGraphPort

__all__ = [
    "SearchableGraphPort",
    "PathSolverPort",
]
