# weighted_trie/__init__.py
# Weighted prefix tree with frequency-ranked autocompletion.

from .core import (
    DEFAULT_MAX_SUGGESTIONS,
    MAX_WORD_LENGTH,
    ArgumentOutOfRangeError,
    EmptyArgumentError,
    NodeView,
    SnapshotFormatError,
    Trie,
    TrieArgumentError,
    TrieNode,
)
from .utils.serializer import from_json, to_json

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
    "to_json",
    "from_json",
]

__version__ = "0.1.0"
