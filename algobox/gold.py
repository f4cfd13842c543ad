"""Greedy filling of a sack with divisible heaps of gold."""

from collections.abc import Iterable


def max_gold_value(capacity: int, heaps: Iterable[tuple[int, int]]) -> int:
    """Most valuable load of at most capacity kilograms.

    heaps holds (price per kilogram, mass) pairs; any part of a heap may be
    taken, so the dearest gold is loaded first.
    """
    remaining = capacity
    total = 0
    for price, mass in sorted(heaps, key=lambda heap: heap[0], reverse=True):
        if remaining <= 0:
            break
        taken = min(mass, remaining)
        total += taken * price
        remaining -= taken
    return total