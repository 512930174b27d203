"""Prefix tree and prefix-based product suggestions."""

from __future__ import annotations

from collections.abc import Iterable

_SUGGESTIONS = 3


class Trie:
    """A prefix tree of strings."""

    def __init__(self) -> None:
        self._children: dict[str, Trie] = {}
        self._is_end = False

    def insert(self, word: str) -> None:
        """Add word to the tree."""
        node = self
        for char in word:
            node = node._children.setdefault(char, Trie())
        node._is_end = True

    def _walk(self, text: str) -> Trie | None:
        node: Trie | None = self
        for char in text:
            node = node._children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Return True if word was inserted."""
        node = self._walk(word)
        return node is not None and node._is_end

    def starts_with(self, prefix: str) -> bool:
        """Return True if some inserted word begins with prefix."""
        return self._walk(prefix) is not None


def suggested_products(products: Iterable[str], search_word: str) -> list[list[str]]:
    """For each typed prefix of search_word, up to three smallest matching products."""
    candidates = sorted(products)
    suggestions = []
    for end in range(1, len(search_word) + 1):
        prefix = search_word[:end]
        candidates = [product for product in candidates if product.startswith(prefix)]
        suggestions.append(candidates[:_SUGGESTIONS])
    return suggestions