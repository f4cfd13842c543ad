"""Adjacency representations of a directed graph given as an edge list."""

from collections.abc import Iterable

Edge = tuple[int, int]


def adjacency_lists(vertices: int, edges: Iterable[Edge]) -> dict[int, list[int]]:
    """Map every vertex 1..vertices to its outgoing neighbours in input order.

    Edges that start at a vertex outside 1..vertices are not reported.
    """
    lists: dict[int, list[int]] = {vertex: [] for vertex in range(1, vertices + 1)}
    for source, target in edges:
        if source in lists:
            lists[source].append(target)
    return lists


def adjacency_matrix(vertices: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Build a vertices x vertices 0/1 matrix; row a-1, column b-1 marks edge a->b.

    Raises IndexError when an edge names a vertex outside 1..vertices.
    """
    matrix = [[0] * vertices for _ in range(vertices)]
    for source, target in edges:
        for vertex in (source, target):
            if not 1 <= vertex <= vertices:
                raise IndexError(f"vertex {vertex} is outside 1..{vertices}")
        matrix[source - 1][target - 1] = 1
    return matrix