import itertools

import pytest

from algobox.shortest import all_pairs_distances, dijkstra

EXAMPLE = [(1, 2, 1), (2, 3, 3), (3, 4, 5), (1, 4, 2)]


def test_worked_example_first_row():
    assert all_pairs_distances(4, EXAMPLE)[0] == [0, 1, 4, 2]


def test_diagonal_is_zero():
    matrix = all_pairs_distances(4, EXAMPLE)
    assert [matrix[i][i] for i in range(4)] == [0, 0, 0, 0]


def test_matrix_is_symmetric():
    matrix = all_pairs_distances(4, EXAMPLE)
    for i, j in itertools.product(range(4), repeat=2):
        assert matrix[i][j] == matrix[j][i]


def test_triangle_inequality():
    edges = [(1, 2, 4), (2, 3, 1), (1, 3, 7), (3, 5, 2), (4, 5, 3), (2, 4, 9)]
    matrix = all_pairs_distances(5, edges)
    for i, j, k in itertools.product(range(5), repeat=3):
        assert matrix[i][j] <= matrix[i][k] + matrix[k][j]


def test_distances_not_longer_than_direct_edges():
    matrix = all_pairs_distances(4, EXAMPLE)
    for a, b, weight in EXAMPLE:
        assert matrix[a - 1][b - 1] <= weight


def test_unreachable_vertices_are_minus_one():
    matrix = all_pairs_distances(3, [(1, 2, 5)])
    assert matrix[0][2] == -1
    assert matrix[2] == [-1, -1, 0]


def test_no_edges():
    assert all_pairs_distances(2, []) == [[0, -1], [-1, 0]]


def test_parallel_edges_use_lightest():
    edges = [(1, 2, 5), (2, 1, 3), (1, 2, 8)]
    assert all_pairs_distances(2, edges)[0][1] == min(w for _, _, w in edges)


def test_self_loop_does_not_change_distance():
    plain = all_pairs_distances(3, [(1, 2, 2), (2, 3, 2)])
    looped = all_pairs_distances(3, [(1, 2, 2), (2, 2, 1), (2, 3, 2)])
    assert plain == looped


def test_dijkstra_directed_adjacency():
    adjacency = {1: [(2, 3)], 2: [(3, 4)]}
    result = dijkstra(3, adjacency, 3)
    assert result == [-1, -1, 0]


def test_dijkstra_matches_all_pairs_row():
    adjacency: dict[int, list[tuple[int, int]]] = {}
    for a, b, w in EXAMPLE:
        adjacency.setdefault(a, []).append((b, w))
        adjacency.setdefault(b, []).append((a, w))
    assert dijkstra(4, adjacency, 3) == all_pairs_distances(4, EXAMPLE)[2]


def test_dijkstra_source_out_of_range():
    with pytest.raises(ValueError):
        dijkstra(3, {}, 4)


def test_edge_vertex_out_of_range():
    with pytest.raises(ValueError):
        all_pairs_distances(2, [(1, 5, 1)])