"""Letter trie with case-insensitive prefix search."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


def _normalise(word: str) -> str:
    upper = word.upper()
    for char in upper:
        if not "A" <= char <= "Z":
            raise ValueError(f"trie only holds letters A-Z, got {char!r}")
    return upper


class Trie:
    """A trie over the letters A to Z; case is ignored."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Store ``word``; an empty word stores nothing."""
        letters = _normalise(word)
        if not letters:
            return
        node = self._root
        for char in letters:
            node = node.children.setdefault(char, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` is a prefix of some stored word; empty gives False."""
        letters = _normalise(word)
        if not letters:
            return False
        node = self._root
        for char in letters:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return True