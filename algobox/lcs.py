"""Longest common subsequence of two sequences with the matched positions."""

from collections.abc import Sequence


def longest_common_subsequence(
    first: Sequence[int], second: Sequence[int]
) -> tuple[int, list[int], list[int]]:
    """Length of a longest common subsequence and its 1-based positions.

    Returns (length, positions in first, positions in second), both position
    lists in increasing order.
    """
    rows = len(first)
    cols = len(second)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, a in enumerate(first, start=1):
        above, row = table[i - 1], table[i]
        for j, b in enumerate(second, start=1):
            row[j] = above[j - 1] + 1 if a == b else max(above[j], row[j - 1])

    first_positions: list[int] = []
    second_positions: list[int] = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            first_positions.append(i)
            second_positions.append(j)
            i -= 1
            j -= 1
        elif table[i - 1][j] == table[i][j]:
            i -= 1
        else:
            j -= 1
    first_positions.reverse()
    second_positions.reverse()
    return table[rows][cols], first_positions, second_positions