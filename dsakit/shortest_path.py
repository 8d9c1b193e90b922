"""Single-source shortest paths by Dijkstra's method.

Vertices are numbered from 1 to ``vertex_count``; edges are directed and an
edge of weight 0 is treated as absent.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INFINITY = 99999


@dataclass(frozen=True)
class Route:
    """The shortest route to ``target``; ``path`` runs from the source to ``target``.

    An unreachable target has ``distance`` None and an empty path.
    """

    target: int
    distance: int | None
    path: tuple[int, ...]

    @property
    def reachable(self) -> bool:
        return self.distance is not None


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[Route]:
    """Return the route from ``source`` to every other vertex, in vertex order.

    Raises ValueError if an edge or the source names a vertex out of range.
    """
    if not 1 <= source <= vertex_count:
        raise ValueError(f"invalid source {source}")
    weights: dict[tuple[int, int], int] = {}
    for start, end, weight in edges:
        if not (1 <= start <= vertex_count and 1 <= end <= vertex_count):
            raise ValueError(f"invalid edge {(start, end, weight)}")
        weights[(start, end)] = weight

    def cost(a: int, b: int) -> int:
        weight = weights.get((a, b), 0)
        return INFINITY if weight == 0 else weight

    vertices = range(1, vertex_count + 1)
    distance = {v: cost(source, v) for v in vertices}
    predecessor = {v: source for v in vertices}
    distance[source] = 0
    visited = {source}
    for _ in range(vertex_count - 2):
        candidates = [v for v in vertices if v not in visited and distance[v] < INFINITY]
        if not candidates:
            break
        nearest = min(candidates, key=distance.__getitem__)
        reach = distance[nearest]
        visited.add(nearest)
        for v in vertices:
            if v not in visited and reach + cost(nearest, v) < distance[v]:
                distance[v] = reach + cost(nearest, v)
                predecessor[v] = nearest

    routes = []
    for target in vertices:
        if target == source:
            continue
        if distance[target] == INFINITY:
            routes.append(Route(target, None, ()))
            continue
        path = [target]
        while path[-1] != source:
            path.append(predecessor[path[-1]])
        routes.append(Route(target, distance[target], tuple(reversed(path))))
    return routes


def format_routes(routes: Sequence[Route]) -> str:
    """Render routes as a tab-separated table, paths written target first."""
    lines = ["Node\tDistance\tPath"]
    for route in routes:
        if route.distance is None:
            lines.append(f"{route.target:4d}\t{'INF':>8}\tNO PATH")
        else:
            trail = "<-".join(str(v) for v in reversed(route.path))
            lines.append(f"{route.target:4d}\t{route.distance:8d}\t{trail}")
    return "\n".join(lines) + "\n"