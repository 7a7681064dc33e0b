"""Prefix trie for fast full-word and prefix lookups."""

from __future__ import annotations

import logging
from typing import Iterable

log = logging.getLogger("prefixtrie")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def __repr__(self) -> str:
        return f"TrieNode(children={len(self.children)}, is_terminal={self.is_terminal})"


class Trie:
    """Prefix trie keyed by single characters.

    Each character of a word is one edge; a node's ``is_terminal`` flag
    marks the end of an inserted word.  The root stands for the empty
    prefix, so ``search_prefix("")`` is always true while
    ``search_full_word("")`` only holds after ``insert("")``.

    Not thread-safe: callers sharing a trie across threads must serialize
    access themselves.
    """

    __slots__ = ("root",)

    def __init__(self, words: Iterable[str] | None = None):
        self.root = TrieNode()
        if words is not None:
            self.insert_all(words)

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
            node = nxt
        node.is_terminal = True

    def insert_all(self, words: Iterable[str]) -> int:
        """Insert every word from *words*, in order.  Returns how many were consumed."""
        count = 0
        for word in words:
            self.insert(word)
            count += 1
        log.debug("Inserted %d words into trie", count)
        return count

    def search_prefix(self, word: str) -> bool:
        """True if some inserted word starts with *word*."""
        return self._walk(word) is not None

    def search_full_word(self, word: str) -> bool:
        """True if *word* itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_terminal

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self.search_full_word(word)

    def _walk(self, s: str) -> TrieNode | None:
        # read-only: never creates nodes
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
