import pytest

from algobox.knapsack import max_weight


def test_worked_example():
    assert max_weight(15, [3, 8, 1, 2, 5]) == 15


def test_everything_fits():
    weights = [3, 8, 1]
    assert max_weight(100, weights) == sum(weights)


def test_zero_capacity_holds_nothing():
    assert max_weight(0, [3, 8, 1]) == 0


def test_no_bars_hold_nothing():
    assert max_weight(10, []) == 0


@pytest.mark.parametrize("capacity", [0, 4, 7, 11, 20])
def test_result_never_exceeds_capacity_or_total(capacity):
    weights = [6, 9, 13, 5]
    result = max_weight(capacity, weights)
    assert result <= capacity
    assert result <= sum(weights)


def test_exact_subset_sum_is_reached():
    weights = [6, 9, 13, 5]
    assert max_weight(6 + 13, weights) == 6 + 13


def test_result_grows_with_capacity():
    weights = [6, 9, 13, 5]
    results = [max_weight(c, weights) for c in range(40)]
    assert results == sorted(results)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        max_weight(-1, [1])


def test_negative_weight_is_rejected():
    with pytest.raises(ValueError):
        max_weight(5, [2, -3])