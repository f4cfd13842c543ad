import random

import pytest

from algobox.network import max_spanning_tree_weight


def test_worked_example():
    edges = [(1, 2, 5), (1, 3, 6), (2, 4, 8), (3, 4, 3)]
    assert max_spanning_tree_weight(4, edges) == 19


def test_single_vertex_has_zero_weight():
    assert max_spanning_tree_weight(1, []) == 0


def test_single_vertex_ignores_self_loops():
    assert max_spanning_tree_weight(1, [(1, 1, 7)]) == 0


def test_no_vertices_raises():
    with pytest.raises(ValueError):
        max_spanning_tree_weight(0, [])


def test_no_edges_is_disconnected():
    with pytest.raises(ValueError):
        max_spanning_tree_weight(2, [])


def test_disconnected_graph_raises():
    edges = [(1, 2, 1), (1, 2, 2), (2, 2, 2)]
    with pytest.raises(ValueError):
        max_spanning_tree_weight(3, edges)


def test_vertex_out_of_range_raises():
    with pytest.raises(ValueError):
        max_spanning_tree_weight(2, [(1, 3, 4)])


def test_tree_weight_is_sum_of_its_edges():
    edges = [(1, 2, 4), (2, 3, 9), (2, 4, 1), (4, 5, 6)]
    assert max_spanning_tree_weight(5, edges) == sum(w for _, _, w in edges)


def test_parallel_edges_take_heaviest():
    edges = [(1, 2, 3), (2, 1, 10), (1, 2, 7)]
    assert max_spanning_tree_weight(2, edges) == max(w for _, _, w in edges)


def test_equal_weights_give_weight_times_tree_size():
    edges = [(a, b, 5) for a in range(1, 6) for b in range(a + 1, 6)]
    assert max_spanning_tree_weight(5, edges) == 5 * (5 - 1)


def test_edge_order_does_not_matter():
    rng = random.Random(7)
    edges = [(a, b, rng.randint(1, 50)) for a in range(1, 8) for b in range(a + 1, 8)]
    expected = max_spanning_tree_weight(7, edges)
    for _ in range(5):
        shuffled = edges[:]
        rng.shuffle(shuffled)
        assert max_spanning_tree_weight(7, shuffled) == expected


def test_adding_edges_never_decreases_weight():
    base = [(1, 2, 2), (2, 3, 2), (3, 4, 2)]
    extra = base + [(1, 4, 9), (1, 3, 1)]
    assert max_spanning_tree_weight(4, extra) >= max_spanning_tree_weight(4, base)


def test_result_bounded_by_heaviest_edges():
    edges = [(1, 2, 3), (2, 3, 8), (1, 3, 6), (3, 4, 2), (2, 4, 5)]
    heaviest = sorted((w for _, _, w in edges), reverse=True)[:3]
    assert max_spanning_tree_weight(4, edges) <= sum(heaviest)