"""Heaviest load of whole gold bars that fits into a bag."""

from collections.abc import Iterable


def max_weight(capacity: int, weights: Iterable[int]) -> int:
    """Largest total of a subset of weights not exceeding capacity.

    Raises ValueError for a negative capacity or negative weights.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    mask = (1 << (capacity + 1)) - 1
    reachable = 1
    for weight in weights:
        if weight < 0:
            raise ValueError("weights must not be negative")
        reachable = (reachable | reachable << weight) & mask
    return reachable.bit_length() - 1