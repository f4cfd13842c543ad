"""Whether numbers can be split into two groups with equal sums."""

from collections.abc import Iterable


def can_split_equally(numbers: Iterable[int]) -> bool:
    """Whether the numbers divide into two subsets of equal sum.

    Raises ValueError for negative numbers.
    """
    values = list(numbers)
    if any(value < 0 for value in values):
        raise ValueError("numbers must not be negative")
    total = sum(values)
    if total % 2:
        return False
    half = total // 2
    mask = (1 << (half + 1)) - 1
    reachable = 1
    for value in values:
        if reachable >> half & 1:
            break
        reachable = (reachable | reachable << value) & mask
    return bool(reachable >> half & 1)