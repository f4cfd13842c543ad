"""Collecting flowers on a lawn while walking only up and right."""

from collections.abc import Sequence


def _grid(rows: Sequence[str]) -> list[list[int]]:
    """Cells with the bottom row first; rows are given top row first."""
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ValueError("all rows must have the same length")
    grid = []
    for row in reversed(rows):
        if any(ch not in "0123456789" for ch in row):
            raise ValueError(f"row {row!r} holds a non-digit cell")
        grid.append([int(ch) for ch in row])
    return grid


def _totals(grid: list[list[int]]) -> list[list[int]]:
    totals: list[list[int]] = []
    for i, row in enumerate(grid):
        line: list[int] = []
        for j, cell in enumerate(row):
            below = totals[i - 1][j] if i else 0
            left = line[j - 1] if j else 0
            line.append(max(below, left) + cell)
        totals.append(line)
    return totals


def max_flowers(rows: Sequence[str]) -> int:
    """Most flowers gathered from the bottom-left cell to the top-right one.

    rows are strings of digits, the top row first. Raises ValueError on rows
    of unequal length or on non-digit cells.
    """
    totals = _totals(_grid(rows))
    if not totals or not totals[-1]:
        return 0
    return totals[-1][-1]


def best_path(rows: Sequence[str]) -> tuple[int, str]:
    """Most flowers and a path of 'U' and 'R' moves that gathers them.

    Raises ValueError on an empty lawn, rows of unequal length or non-digit cells.
    """
    grid = _grid(rows)
    if not grid or not grid[0]:
        raise ValueError("the lawn is empty")
    totals = _totals(grid)
    i, j = len(grid) - 1, len(grid[0]) - 1
    moves: list[str] = []
    while (i, j) != (0, 0):
        before = totals[i][j] - grid[i][j]
        if i > 0 and totals[i - 1][j] == before:
            moves.append("U")
            i -= 1
        else:
            moves.append("R")
            j -= 1
    return totals[-1][-1], "".join(reversed(moves))