"""Prefix tree of words and composing a text from those words."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words stored as a prefix tree."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.terminal = True

    def _find(self, text: str) -> _Node | None:
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Whether word was inserted."""
        node = self._find(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word starts with prefix."""
        return self._find(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def can_compose(self, text: str) -> bool:
        """Whether text is a concatenation of inserted words, each usable many times."""
        reachable = [False] * (len(text) + 1)
        reachable[0] = True
        for start in range(len(text)):
            if not reachable[start]:
                continue
            node = self._root
            for index in range(start, len(text)):
                child = node.children.get(text[index])
                if child is None:
                    break
                node = child
                if node.terminal:
                    reachable[index + 1] = True
        return reachable[-1]


def can_compose_from(text: str, words: Iterable[str]) -> bool:
    """Whether text is a concatenation of the given words, each usable many times."""
    return Trie(words).can_compose(text)