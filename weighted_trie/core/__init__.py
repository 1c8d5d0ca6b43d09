"""
weighted_trie.core

The trie itself:
 - TrieNode / Trie (insertion, lookups, autocomplete, snapshot accessor)
 - the argument error taxonomy raised by Trie
"""

from .errors import (
    ArgumentOutOfRangeError,
    EmptyArgumentError,
    SnapshotFormatError,
    TrieArgumentError,
)
from .trie import DEFAULT_MAX_SUGGESTIONS, MAX_WORD_LENGTH, NodeView, Trie, TrieNode

__all__ = [
    "Trie",
    "TrieNode",
    "NodeView",
    "MAX_WORD_LENGTH",
    "DEFAULT_MAX_SUGGESTIONS",
    "TrieArgumentError",
    "ArgumentOutOfRangeError",
    "EmptyArgumentError",
    "SnapshotFormatError",
]
