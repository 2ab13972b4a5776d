"""Unweighted traversals over an id-indexed adjacency relation.

The functions here know nothing about vertex values: they take the
adjacency as a mapping from vertex id to the ordered ids of its direct
neighbors and work purely on ids. ``GraphIndex`` translates values to ids
and back around them.
"""

from collections import deque
from typing import Deque, Dict, List, Mapping, Sequence, Set

from ..domain.models import SearchStrategy

Adjacency = Mapping[int, Sequence[int]]


def _reconstruct(previous: Dict[int, int], start: int, end: int) -> List[int]:
    path: List[int] = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def bfs_path(adjacency: Adjacency, start: int, end: int) -> List[int]:
    """Compute a shortest path by edge count using breadth-first search.

    Parameters
    ----------
    adjacency:
        Mapping of vertex id to its neighbor ids in edge insertion order.
    start:
        Id of the first vertex of the path.
    end:
        Id of the last vertex of the path.

    Returns
    -------
    list[int]
        Ids from ``start`` to ``end`` inclusive, ``[start]`` when both are
        the same vertex, or ``[]`` if ``end`` cannot be reached. When several
        shortest paths exist, the one using earlier-added edges wins.
    """
    if start == end:
        return [start]

    queue: Deque[int] = deque([start])
    visited: Set[int] = {start}
    previous: Dict[int, int] = {}

    while queue:
        current = queue.popleft()
        if current == end:
            return _reconstruct(previous, start, end)

        for neighbor in adjacency.get(current, ()):
            # marked on enqueue so nothing is queued twice
            if neighbor in visited:
                continue
            visited.add(neighbor)
            previous[neighbor] = current
            queue.append(neighbor)

    return []


def dfs_path(adjacency: Adjacency, start: int, end: int) -> List[int]:
    """Find some path from ``start`` to ``end`` with depth-first search.

    Neighbors are explored in edge insertion order. The path returned is
    the first one the search completes, which need not be the shortest.
    """
    if start == end:
        return [start]

    stack: List[int] = [start]
    visited: Set[int] = set()
    previous: Dict[int, int] = {}

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        if current == end:
            return _reconstruct(previous, start, end)

        for neighbor in reversed(adjacency.get(current, ())):
            if neighbor not in visited:
                previous[neighbor] = current
                stack.append(neighbor)

    return []


def bfs_distances(adjacency: Adjacency, start: int) -> Dict[int, int]:
    """Return the edge count from ``start`` to every vertex it reaches."""
    distances: Dict[int, int] = {start: 0}
    queue: Deque[int] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in adjacency.get(current, ()):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)

    return distances


def traverse(
    adjacency: Adjacency,
    start: int,
    strategy: SearchStrategy = SearchStrategy.BFS,
) -> List[int]:
    """Return every id reachable from ``start`` in visiting order."""
    if strategy is SearchStrategy.BFS:
        return list(bfs_distances(adjacency, start))

    order: List[int] = []
    visited: Set[int] = set()
    stack: List[int] = [start]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        stack.extend(n for n in reversed(adjacency.get(current, ())) if n not in visited)
    return order


def find_path(
    adjacency: Adjacency,
    start: int,
    end: int,
    strategy: SearchStrategy = SearchStrategy.BFS,
) -> List[int]:
    if strategy is SearchStrategy.DFS:
        return dfs_path(adjacency, start, end)
    return bfs_path(adjacency, start, end)
