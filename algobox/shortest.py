"""Single-source and all-pairs shortest distances on weighted graphs."""

import math
from collections.abc import Iterable, Mapping, Sequence

WeightedEdge = tuple[int, int, int]
Adjacency = Mapping[int, Sequence[tuple[int, int]]]

UNREACHABLE = -1


def dijkstra(vertices: int, adjacency: Adjacency, source: int) -> list[int]:
    """Distances from source to every vertex 1..vertices.

    adjacency maps a vertex to (neighbour, weight) pairs; among parallel edges
    the lightest is used. Unreachable vertices get -1. Raises ValueError when
    source is outside 1..vertices.
    """
    if not 1 <= source <= vertices:
        raise ValueError(f"vertex {source} is outside 1..{vertices}")

    dist: dict[int, float] = {vertex: math.inf for vertex in range(1, vertices + 1)}
    dist[source] = 0
    unvisited = set(dist)

    while unvisited:
        current = min(sorted(unvisited), key=dist.__getitem__)
        if dist[current] == math.inf:
            break
        unvisited.discard(current)

        lightest: dict[int, int] = {}
        for neighbour, weight in adjacency.get(current, ()):
            if neighbour not in lightest or weight < lightest[neighbour]:
                lightest[neighbour] = weight
        for neighbour, weight in lightest.items():
            if neighbour in dist and dist[neighbour] > dist[current] + weight:
                dist[neighbour] = dist[current] + weight

    return [
        UNREACHABLE if dist[vertex] == math.inf else int(dist[vertex])
        for vertex in range(1, vertices + 1)
    ]


def all_pairs_distances(vertices: int, edges: Iterable[WeightedEdge]) -> list[list[int]]:
    """Distance matrix of an undirected graph, one row per source vertex."""
    adjacency: dict[int, list[tuple[int, int]]] = {}
    for a, b, weight in edges:
        for vertex in (a, b):
            if not 1 <= vertex <= vertices:
                raise ValueError(f"vertex {vertex} is outside 1..{vertices}")
        adjacency.setdefault(a, []).append((b, weight))
        adjacency.setdefault(b, []).append((a, weight))
    return [dijkstra(vertices, adjacency, source) for source in range(1, vertices + 1)]