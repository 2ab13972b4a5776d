"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- BreadthFirstPathSolver: Finds paths with the fewest edges
- DepthFirstPathSolver: Finds any path with depth-first search
"""

from .path_solver import (
    SOLVERS,
    BreadthFirstPathSolver,
    DepthFirstPathSolver,
    TraversalPathSolver,
)

__all__ = [
    "SOLVERS",
    "BreadthFirstPathSolver",
    "DepthFirstPathSolver",
    "TraversalPathSolver",
]
