"""Splitting a line into space-separated words."""


def split_words(text: str) -> list[str]:
    """Words of text separated by runs of spaces."""
    return [word for word in text.split(" ") if word]


def reverse_words(text: str) -> str:
    """The words of text in reverse order, joined by single spaces."""
    return " ".join(reversed(split_words(text)))