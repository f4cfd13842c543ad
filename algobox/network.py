"""Maximum spanning tree weight of an undirected weighted graph."""

import heapq
from collections.abc import Iterable

WeightedEdge = tuple[int, int, int]


def max_spanning_tree_weight(vertices: int, edges: Iterable[WeightedEdge]) -> int:
    """Total weight of a maximum spanning tree over vertices 1..vertices.

    The tree is grown greedily from vertex 1, always taking the heaviest edge
    that reaches a vertex not yet in the tree. Raises ValueError when the graph
    has no vertices, when an edge names a vertex outside 1..vertices, or when
    the graph is not connected.
    """
    if vertices < 1:
        raise ValueError("graph has no vertices")

    adjacency: dict[int, list[tuple[int, int]]] = {
        vertex: [] for vertex in range(1, vertices + 1)
    }
    for u, v, weight in edges:
        for vertex in (u, v):
            if vertex not in adjacency:
                raise ValueError(f"vertex {vertex} is outside 1..{vertices}")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    added: set[int] = set()
    frontier: list[tuple[int, int]] = []

    def add(vertex: int) -> None:
        added.add(vertex)
        for neighbour, weight in adjacency[vertex]:
            if neighbour not in added:
                heapq.heappush(frontier, (-weight, neighbour))

    add(1)
    total = 0
    while len(added) < vertices and frontier:
        negated, vertex = heapq.heappop(frontier)
        if vertex not in added:
            add(vertex)
            total -= negated

    if len(added) < vertices:
        raise ValueError("graph is not connected")
    return total