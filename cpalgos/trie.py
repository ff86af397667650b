"""Prefix tree with word and prefix counts."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    passing: int = 0
    ending: int = 0


class Trie:
    """A multiset of strings supporting prefix counting."""

    def __init__(self) -> None:
        self._root = _Node()

    def __len__(self) -> int:
        return self._root.passing

    def _find(self, prefix: str) -> _Node | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        node.passing += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.passing += 1
        node.ending += 1

    def count_equal(self, word: str) -> int:
        """How many times ``word`` is stored."""
        node = self._find(word)
        return node.ending if node else 0

    def count_prefix(self, prefix: str) -> int:
        """How many stored words start with ``prefix``."""
        node = self._find(prefix)
        return node.passing if node else 0

    def contains(self, word: str) -> bool:
        """Whether ``word`` is stored at least once."""
        return self.count_equal(word) > 0

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def starts_with(self, prefix: str) -> bool:
        """Whether any stored word starts with ``prefix``."""
        return self.count_prefix(prefix) > 0

    def erase(self, word: str) -> None:
        """Remove one occurrence of ``word``; does nothing if it is absent."""
        if not self.contains(word):
            return
        node = self._root
        node.passing -= 1
        for ch in word:
            child = node.children[ch]
            child.passing -= 1
            if child.passing == 0:
                del node.children[ch]
                return
            node = child
        node.ending -= 1