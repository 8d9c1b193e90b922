"""Directed graphs as adjacency lists, with breadth-first and depth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence


def build_adjacency(
    edges: Iterable[tuple[Hashable, Hashable]],
) -> dict[Hashable, list[Hashable]]:
    """Map each source vertex to its destinations, in the order the edges were given."""
    adjacency: dict[Hashable, list[Hashable]] = {}
    for source, destination in edges:
        adjacency.setdefault(source, []).append(destination)
    return adjacency


def bfs(
    adjacency: Mapping[Hashable, Sequence[Hashable]], start: Hashable
) -> list[Hashable]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    order: list[Hashable] = []
    visited = {start}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in adjacency.get(vertex, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(
    adjacency: Mapping[Hashable, Sequence[Hashable]], start: Hashable
) -> list[Hashable]:
    """Return the vertices reachable from ``start`` in depth-first order."""
    order = [start]
    visited = {start}
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order