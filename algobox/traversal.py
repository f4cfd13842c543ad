"""Depth- and breadth-first traversals over graphs with vertices 1..N."""

from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum

Edge = tuple[int, int]
Graph = dict[int, list[int]]


class _Color(Enum):
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


def _check_vertex(vertex: int, vertices: int) -> None:
    if not 1 <= vertex <= vertices:
        raise ValueError(f"vertex {vertex} is outside 1..{vertices}")


def _build(
    vertices: int, edges: Iterable[Edge], *, undirected: bool, descending: bool
) -> Graph:
    graph: Graph = {}
    for a, b in edges:
        _check_vertex(a, vertices)
        _check_vertex(b, vertices)
        graph.setdefault(a, []).append(b)
        if undirected:
            graph.setdefault(b, []).append(a)
    for neighbours in graph.values():
        neighbours.sort(reverse=descending)
    return graph


def _walk(graph: Graph, start: int, color: dict[int, _Color]) -> Iterator[tuple[bool, int]]:
    """Iterative DFS yielding (True, v) on entry and (False, v) on leave."""
    stack = [start]
    while stack:
        vertex = stack.pop()
        state = color.get(vertex, _Color.WHITE)
        if state is _Color.WHITE:
            color[vertex] = _Color.GRAY
            stack.append(vertex)
            yield True, vertex
            stack.extend(
                w for w in graph.get(vertex, ())
                if color.get(w, _Color.WHITE) is _Color.WHITE
            )
        elif state is _Color.GRAY:
            color[vertex] = _Color.BLACK
            yield False, vertex


def dfs_order(vertices: int, edges: Iterable[Edge], start: int) -> list[int]:
    """Vertices of an undirected graph in DFS visiting order from start.

    Smaller neighbours are visited first.
    """
    _check_vertex(start, vertices)
    graph = _build(vertices, edges, undirected=True, descending=True)
    return [v for entering, v in _walk(graph, start, {}) if entering]


def bfs_order(vertices: int, edges: Iterable[Edge], start: int) -> list[int]:
    """Vertices of an undirected graph in BFS order from start, smaller neighbours first."""
    _check_vertex(start, vertices)
    graph = _build(vertices, edges, undirected=True, descending=False)
    seen = {start}
    order = [start]
    planned = deque([start])
    while planned:
        vertex = planned.popleft()
        for w in graph.get(vertex, ()):
            if w not in seen:
                seen.add(w)
                planned.append(w)
                order.append(w)
    return order


def connected_components(vertices: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Components of an undirected graph, each sorted, ordered by smallest vertex."""
    graph = _build(vertices, edges, undirected=True, descending=True)
    color: dict[int, _Color] = {}
    components: list[list[int]] = []
    for vertex in range(1, vertices + 1):
        if vertex not in color:
            members = [v for entering, v in _walk(graph, vertex, color) if entering]
            components.append(sorted(members))
    return components


def entry_leave_times(vertices: int, edges: Iterable[Edge]) -> list[tuple[int, int]]:
    """Entry and leave times of a directed DFS started at vertex 1.

    One pair per vertex 1..vertices; vertices not reached keep (0, 0).
    """
    if vertices < 1:
        return []
    graph = _build(vertices, edges, undirected=False, descending=True)
    entry = [0] * (vertices + 1)
    leave = [0] * (vertices + 1)
    for time, (entering, vertex) in enumerate(_walk(graph, 1, {})):
        (entry if entering else leave)[vertex] = time
    return list(zip(entry[1:], leave[1:]))


def topological_order(vertices: int, edges: Iterable[Edge]) -> list[int]:
    """All vertices of a directed graph in reverse DFS finishing order."""
    graph = _build(vertices, edges, undirected=False, descending=True)
    color: dict[int, _Color] = {}
    finished: list[int] = []
    for vertex in range(1, vertices + 1):
        if color.get(vertex, _Color.WHITE) is _Color.WHITE:
            finished.extend(v for entering, v in _walk(graph, vertex, color) if not entering)
    finished.reverse()
    return finished