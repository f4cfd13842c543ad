"""Finding a pattern in a sequence up to a constant shift of all values."""

from collections.abc import Sequence


def shifted_occurrences(sequence: Sequence[int], pattern: Sequence[int]) -> list[int]:
    """1-based starts where sequence matches pattern plus a constant.

    Raises ValueError when sequence or pattern is empty.
    """
    if not sequence or not pattern:
        raise ValueError("sequence and pattern must not be empty")
    values = list(sequence)
    template = list(pattern)
    width = len(template)
    if width > len(values):
        return []
    return [
        start + 1
        for start in range(len(values) - width + 1)
        if all(
            value - expected == values[start] - template[0]
            for value, expected in zip(values[start:start + width], template)
        )
    ]