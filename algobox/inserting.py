"""Inserting several strings into a text at given positions."""

from collections.abc import Iterable


def insert_strings(text: str, insertions: Iterable[tuple[str, int]]) -> str:
    """Text with each (string, position) inserted before text[position].

    Positions refer to the original text; a position equal to its length
    appends. Strings sharing a position go in sorted order. Raises ValueError
    for a position outside 0..len(text).
    """
    ordered = sorted((position, string) for string, position in insertions)
    for position, _ in ordered:
        if not 0 <= position <= len(text):
            raise ValueError(f"position {position} is outside 0..{len(text)}")
    pieces: list[str] = []
    last = 0
    for position, string in ordered:
        pieces.append(text[last:position])
        pieces.append(string)
        last = position
    pieces.append(text[last:])
    return "".join(pieces)