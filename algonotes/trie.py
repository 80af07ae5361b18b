"""A prefix tree for whole-word membership queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words stored character by character."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.terminal = True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return node.terminal