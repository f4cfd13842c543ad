"""Unpacking strings with repeat groups and finding their common prefix."""

from collections.abc import Iterable

_DIGITS = "0123456789"


def unpack(packed: str) -> str:
    """Expand every "k[...]" group of packed into k copies of its contents.

    Counts are single digits and groups may nest; a count of 0 is treated as 1.
    Raises ValueError on unbalanced brackets or a count not followed by '['.
    """
    frames: list[tuple[int, list[str]]] = []
    current: list[str] = []
    pending: int | None = None
    for char in packed:
        if char in _DIGITS:
            if pending is not None:
                raise ValueError("a count must be a single digit followed by '['")
            pending = int(char)
        elif char == "[":
            if pending is None:
                raise ValueError("'[' must follow a count")
            frames.append((pending, current))
            current = []
            pending = None
        elif char == "]":
            if pending is not None or not frames:
                raise ValueError("unbalanced ']'")
            count, outer = frames.pop()
            outer.append("".join(current) * max(count, 1))
            current = outer
        else:
            if pending is not None:
                raise ValueError("a count must be followed by '['")
            current.append(char)
    if pending is not None or frames:
        raise ValueError("packed string ends inside a group")
    return "".join(current)


def common_prefix(first: str, second: str) -> str:
    """The longest string that both first and second start with."""
    for index, (a, b) in enumerate(zip(first, second)):
        if a != b:
            return first[:index]
    return first[: min(len(first), len(second))]


def longest_common_prefix(packed_strings: Iterable[str]) -> str:
    """Longest common prefix of the unpacked forms of packed_strings.

    Raises ValueError when no strings are given or one is malformed.
    """
    strings = iter(packed_strings)
    try:
        prefix = unpack(next(strings))
    except StopIteration:
        raise ValueError("at least one packed string is needed") from None
    for packed in strings:
        prefix = common_prefix(prefix, unpack(packed))
    return prefix