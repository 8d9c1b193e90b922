"""Minimum spanning trees by Kruskal's and Prim's methods.

Vertices are numbered from 1 to ``vertex_count``. An edge of weight 0, or of
weight 999 or more, is treated as absent.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_NO_EDGE = 999

Edge = tuple[int, int, int]


@dataclass(frozen=True)
class SpanningTree:
    """The chosen edges as (source, destination, weight) and their total weight."""

    edges: tuple[Edge, ...]
    cost: int


def _edge_costs(
    vertex_count: int, edges: Iterable[Edge], symmetric: bool
) -> dict[tuple[int, int], int]:
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    costs: dict[tuple[int, int], int] = {}
    for source, destination, weight in edges:
        if not (1 <= source <= vertex_count and 1 <= destination <= vertex_count) or weight < 0:
            raise ValueError(f"invalid edge {(source, destination, weight)}")
        costs[(source, destination)] = weight
        if symmetric:
            costs[(destination, source)] = weight
    return {pair: weight for pair, weight in costs.items() if 0 < weight < _NO_EDGE}


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> SpanningTree:
    """Build a minimum spanning tree by taking the cheapest edges that join components.

    Edges are considered in order of weight, then source, then destination.
    Raises ValueError for an invalid edge or a disconnected graph.
    """
    costs = _edge_costs(vertex_count, edges, symmetric=False)
    candidates = iter(sorted((w, s, d) for (s, d), w in costs.items()))
    parent: dict[int, int] = {}

    def find(vertex: int) -> int:
        while vertex in parent:
            vertex = parent[vertex]
        return vertex

    removed: set[tuple[int, int]] = set()
    chosen: list[Edge] = []
    while len(chosen) < vertex_count - 1:
        for weight, source, destination in candidates:
            if (source, destination) not in removed:
                break
        else:
            raise ValueError("graph is not connected")
        removed.add((source, destination))
        removed.add((destination, source))
        root_u, root_v = find(source), find(destination)
        if root_u != root_v:
            parent[root_v] = root_u
            chosen.append((source, destination, weight))
    return SpanningTree(tuple(chosen), sum(w for _, _, w in chosen))


def prim(vertex_count: int, edges: Iterable[Edge]) -> SpanningTree:
    """Build a minimum spanning tree by growing it outward from vertex 1.

    Edges are undirected. Raises ValueError for an invalid edge or a
    disconnected graph.
    """
    costs = _edge_costs(vertex_count, edges, symmetric=True)
    visited = {1}
    chosen: list[Edge] = []
    while len(chosen) < vertex_count - 1:
        best = min(
            (
                (weight, a, b)
                for (a, b), weight in costs.items()
                if a in visited and b not in visited
            ),
            default=None,
        )
        if best is None:
            raise ValueError("graph is not connected")
        weight, a, b = best
        chosen.append((a, b, weight))
        visited.add(b)
    return SpanningTree(tuple(chosen), sum(w for _, _, w in chosen))