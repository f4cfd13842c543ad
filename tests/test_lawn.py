import pytest

from algobox.lawn import best_path, max_flowers

LAWNS = [
    ["101", "110"],
    ["0"],
    ["7"],
    ["1234", "5678", "9012"],
    ["0101", "1010", "0110", "1001"],
    ["9", "1", "5"],
    ["31415"],
]


def _follow(rows, path):
    grid = rows[::-1]
    i = j = 0
    total = int(grid[0][0])
    for move in path:
        if move == "U":
            i += 1
        else:
            j += 1
        total += int(grid[i][j])
    return total, (i, j)


@pytest.mark.parametrize("rows", LAWNS)
def test_path_gathers_the_reported_flowers(rows):
    total, path = best_path(rows)
    gathered, end = _follow(rows, path)
    assert gathered == total
    assert end == (len(rows) - 1, len(rows[0]) - 1)


@pytest.mark.parametrize("rows", LAWNS)
def test_path_total_matches_max_flowers(rows):
    assert best_path(rows)[0] == max_flowers(rows)


@pytest.mark.parametrize("rows", LAWNS)
def test_path_has_the_right_moves(rows):
    _, path = best_path(rows)
    assert path.count("U") == len(rows) - 1
    assert path.count("R") == len(rows[0]) - 1


def test_worked_example():
    assert max_flowers(["101", "110"]) == 3


def test_ties_prefer_the_upward_move_last():
    assert best_path(["00", "00"]) == (0, "RU")


def test_single_column_sums_all_cells():
    rows = ["9", "1", "5"]
    assert max_flowers(rows) == sum(int(r) for r in rows)


def test_empty_lawn():
    assert max_flowers([]) == 0
    with pytest.raises(ValueError):
        best_path([])


def test_ragged_rows_are_rejected():
    with pytest.raises(ValueError):
        max_flowers(["12", "3"])


def test_non_digits_are_rejected():
    with pytest.raises(ValueError):
        best_path(["1a", "23"])