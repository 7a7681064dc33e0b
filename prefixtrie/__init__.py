"""Prefix trie with full-word and prefix queries."""

from prefixtrie.trie import Trie, TrieNode

__all__ = [
    "Trie",
    "TrieNode",
]
