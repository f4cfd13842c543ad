"""Check whether a railway network of one-way "B" and "R" roads has a cycle."""

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum


class _Color(Enum):
    WHITE = 0
    GRAY = 1
    BLACK = 2


def road_graph(count: int, rows: Iterable[str]) -> dict[int, list[int]]:
    """Build the directed graph of roads between cities 1..count.

    Row i (0-based) describes the roads from city i + 1 to cities i + 2, i + 3, ...
    A 'B' road points forward to the larger city; any other letter points back.
    Raises ValueError when a row names a city beyond count.
    """
    graph: dict[int, list[int]] = {city: [] for city in range(1, count + 1)}
    for index, row in enumerate(rows):
        city = index + 1
        for offset, letter in enumerate(row):
            other = city + offset + 1
            if other > count or city > count:
                raise ValueError(f"city {other} is outside 1..{count}")
            if letter == "B":
                graph[city].append(other)
            else:
                graph[other].append(city)
    return graph


def has_cycle(vertices: int, adjacency: Mapping[int, Sequence[int]]) -> bool:
    """Whether the directed graph on vertices 1..vertices contains a cycle."""
    color = {vertex: _Color.WHITE for vertex in range(1, vertices + 1)}
    for start in range(1, vertices + 1):
        if color[start] is not _Color.WHITE:
            continue
        stack = [start]
        while stack:
            vertex = stack.pop()
            state = color.get(vertex, _Color.WHITE)
            if state is _Color.WHITE:
                color[vertex] = _Color.GRAY
                stack.append(vertex)
                for neighbour in adjacency.get(vertex, ()):
                    neighbour_state = color.get(neighbour, _Color.WHITE)
                    if neighbour_state is _Color.WHITE:
                        stack.append(neighbour)
                    elif neighbour_state is _Color.GRAY:
                        return True
            elif state is _Color.GRAY:
                color[vertex] = _Color.BLACK
    return False


def is_optimal(count: int, rows: Iterable[str]) -> bool:
    """Whether the road network between count cities has no directed cycle."""
    graph = road_graph(count, rows)
    if count <= 2:
        return True
    return not has_cycle(count, graph)