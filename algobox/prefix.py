"""Prefix function of a string and pattern replacement built on it."""


def prefix_function(text: str) -> list[int]:
    """For each position, the length of the longest proper border of text[:i + 1]."""
    pi = [0] * len(text)
    for i in range(1, len(text)):
        k = pi[i - 1]
        while k > 0 and text[k] != text[i]:
            k = pi[k - 1]
        if text[k] == text[i]:
            k += 1
        pi[i] = k
    return pi


def _occurrences(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence of pattern in text."""
    pi = prefix_function(pattern)
    starts = []
    k = 0
    for i, char in enumerate(text):
        while k > 0 and pattern[k] != char:
            k = pi[k - 1]
        if pattern[k] == char:
            k += 1
        if k == len(pattern):
            starts.append(i - len(pattern) + 1)
            k = pi[k - 1]
    return starts


def replace_all(text: str, pattern: str, replacement: str) -> str:
    """Text with non-overlapping occurrences of pattern, leftmost first, replaced.

    Raises ValueError for an empty pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    pieces: list[str] = []
    last = 0
    for start in _occurrences(text, pattern):
        if start < last:
            continue
        pieces.append(text[last:start])
        pieces.append(replacement)
        last = start + len(pattern)
    pieces.append(text[last:])
    return "".join(pieces)