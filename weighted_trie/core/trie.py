# trie.py
# Weighted prefix tree (trie) for frequency-ranked autocompletion.
# Each node keeps two counters: the weight of words ending at it and the
# weight of every insertion that passed through it.

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Tuple

from .errors import (
    ArgumentOutOfRangeError,
    EmptyArgumentError,
    SnapshotFormatError,
    TrieArgumentError,
)

logger = logging.getLogger(__name__)

MAX_WORD_LENGTH = 50
DEFAULT_MAX_SUGGESTIONS = 5

Word = str
Frequency = int
Suggestion = Tuple[Word, Frequency]
Snapshot = Dict[str, Any]

_SNAPSHOT_KEYS = ("children", "is_end_of_word", "word_frequency", "prefix_frequency")


class TrieNode:
    """
    One character position in the Trie.
    children: char -> TrieNode (insertion ordered)
    is_end_of_word: some inserted word terminates exactly here
    word_frequency: summed weight of the words ending here (0 unless is_end_of_word)
    prefix_frequency: summed weight of every insertion whose path visits this node
    """

    __slots__ = ("children", "is_end_of_word", "word_frequency", "prefix_frequency")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_end_of_word = False
        self.word_frequency = 0
        self.prefix_frequency = 0

    def __repr__(self) -> str:
        return (
            f"TrieNode(children={list(self.children)!r}, end={self.is_end_of_word}, "
            f"word_freq={self.word_frequency}, prefix_freq={self.prefix_frequency})"
        )


class NodeView(NamedTuple):
    """Read-only record of a single node, as handed out by Trie.walk()."""

    char: str
    is_end_of_word: bool
    word_frequency: int
    prefix_frequency: int
    child_count: int


def _rejected(error: TrieArgumentError) -> TrieArgumentError:
    logger.debug("rejected argument %s", error)
    return error


class Trie:
    """
    Trie storing weighted words for prefix lookup and autocompletion:
     - insert() accumulates weights, it never overwrites
     - lookups are read-only and never create nodes
     - autocomplete() ranks completions by word frequency
     - walk()/snapshot() expose the full node structure to serializers
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._word_count = 0

    @property
    def root(self) -> TrieNode:
        """The root node (empty prefix). Callers must treat it as read-only."""
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str, frequency: int = 1) -> None:
        """
        Insert `word` with weight `frequency`.
        Re-inserting a word adds to its counters. All arguments are validated
        before any node is touched, so a rejected call leaves the trie unchanged.
        """
        if isinstance(frequency, bool) or not isinstance(frequency, int):
            raise _rejected(
                ArgumentOutOfRangeError("frequency", f"must be an int, got {type(frequency).__name__}")
            )
        if frequency < 1:
            raise _rejected(
                ArgumentOutOfRangeError("frequency", f"must be greater than 0, got {frequency}")
            )
        if not word:
            raise _rejected(EmptyArgumentError("word", "cannot be None or empty"))
        if len(word) > MAX_WORD_LENGTH:
            raise _rejected(
                ArgumentOutOfRangeError(
                    "word",
                    f"length {len(word)} exceeds the maximum of {MAX_WORD_LENGTH} characters",
                )
            )

        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
            node.prefix_frequency += frequency
        if not node.is_end_of_word:
            node.is_end_of_word = True
            self._word_count += 1
        node.word_frequency += frequency
        logger.debug("inserted %r (+%d, now %d)", word, frequency, node.word_frequency)

    # lookups ---------------------------------------------------------
    def _find_node(self, chars: str) -> Optional[TrieNode]:
        """Follow `chars` from the root. None as soon as a child is missing."""
        node = self._root
        for ch in chars:
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def word_exists(self, word: str) -> bool:
        node = self._find_node(word)
        return node is not None and node.is_end_of_word

    def get_word_frequency(self, word: str) -> int:
        """Summed insertion weight of `word`, 0 if it was never inserted."""
        node = self._find_node(word)
        if node is None or not node.is_end_of_word:
            return 0
        return node.word_frequency

    def get_prefix_frequency(self, prefix: str) -> int:
        """
        Summed weight of all insertions sharing `prefix`.
        The empty prefix maps to the root, whose counter is never incremented.
        """
        node = self._find_node(prefix)
        return 0 if node is None else node.prefix_frequency

    def starts_with(self, prefix: str) -> bool:
        return self._find_node(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.word_exists(word)

    def __len__(self) -> int:
        """Number of distinct words inserted."""
        return self._word_count

    # autocomplete ----------------------------------------------------
    def autocomplete(
        self, prefix: str, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    ) -> List[Suggestion]:
        """
        Return up to `max_suggestions` (word, frequency) pairs completing `prefix`,
        highest frequency first. Equal frequencies are ordered alphabetically.
        An unknown prefix gives an empty list.
        """
        if not prefix:
            raise _rejected(EmptyArgumentError("prefix", "cannot be None or empty"))
        if isinstance(max_suggestions, bool) or not isinstance(max_suggestions, int):
            raise _rejected(
                ArgumentOutOfRangeError(
                    "max_suggestions", f"must be an int, got {type(max_suggestions).__name__}"
                )
            )
        if max_suggestions < 1:
            raise _rejected(
                ArgumentOutOfRangeError(
                    "max_suggestions", f"must be greater than 0, got {max_suggestions}"
                )
            )

        node = self._find_node(prefix)
        if node is None:
            return []

        out: List[Suggestion] = [
            (word, current.word_frequency)
            for word, current in self._iter_nodes(node, prefix)
            if current.is_end_of_word
        ]
        out.sort(key=lambda t: (-t[1], t[0]))
        return out[:max_suggestions]

    # traversal / snapshot --------------------------------------------
    @staticmethod
    def _iter_nodes(start: TrieNode, path: str) -> Iterator[Tuple[str, TrieNode]]:
        """Pre-order DFS with an explicit stack, children in insertion order."""
        stack: List[Tuple[str, TrieNode]] = [(path, start)]
        while stack:
            current_path, node = stack.pop()
            yield current_path, node
            for ch, child in reversed(list(node.children.items())):
                stack.append((current_path + ch, child))

    def walk(self) -> Iterator[Tuple[str, NodeView]]:
        """
        Yield (path, NodeView) for every node, root first (path "").
        Views are copies, mutating the trie afterwards doesn't change them.
        """
        for path, node in self._iter_nodes(self._root, ""):
            yield path, NodeView(
                char=path[-1:],
                is_end_of_word=node.is_end_of_word,
                word_frequency=node.word_frequency,
                prefix_frequency=node.prefix_frequency,
                child_count=len(node.children),
            )

    def words(self) -> Iterator[Suggestion]:
        """All (word, frequency) pairs in pre-order."""
        for path, node in self._iter_nodes(self._root, ""):
            if node.is_end_of_word:
                yield path, node.word_frequency

    def snapshot(self) -> Snapshot:
        """Nested plain-dict copy of the whole node graph, starting at the root."""
        return _node_to_dict(self._root)

    @classmethod
    def from_snapshot(cls, data: Snapshot) -> "Trie":
        """
        Rebuild a Trie from snapshot() output.
        The snapshot must be consistent with what insert() could have produced:
        counters are non-negative ints, a node's prefix_frequency equals its
        word_frequency plus its children's prefix_frequency, and no path is
        longer than MAX_WORD_LENGTH.
        """
        trie = cls()
        _check_snapshot_node(data, "")
        if data["is_end_of_word"] or data["word_frequency"] or data["prefix_frequency"]:
            raise SnapshotFormatError("snapshot", "root node must be empty (not a word, zero counters)")

        stack: List[Tuple[TrieNode, Snapshot, str]] = [(trie._root, data, "")]
        while stack:
            node, raw, path = stack.pop()
            node.is_end_of_word = raw["is_end_of_word"]
            node.word_frequency = raw["word_frequency"]
            node.prefix_frequency = raw["prefix_frequency"]
            if node.is_end_of_word:
                trie._word_count += 1

            child_total = 0
            for ch, child_raw in raw["children"].items():
                if not isinstance(ch, str) or len(ch) != 1:
                    raise SnapshotFormatError("snapshot", f"child key {ch!r} under {path!r} is not a single character")
                child_path = path + ch
                if len(child_path) > MAX_WORD_LENGTH:
                    raise SnapshotFormatError("snapshot", f"path {child_path[:10]!r}... is longer than {MAX_WORD_LENGTH}")
                _check_snapshot_node(child_raw, child_path)
                child_total += child_raw["prefix_frequency"]
                child = node.children[ch] = TrieNode()
                stack.append((child, child_raw, child_path))

            if path and node.prefix_frequency < 1:
                raise SnapshotFormatError("snapshot", f"{path!r} is on no inserted path (prefix_frequency 0)")
            if path and node.prefix_frequency != node.word_frequency + child_total:
                raise SnapshotFormatError(
                    "snapshot",
                    f"prefix_frequency of {path!r} is {node.prefix_frequency}, "
                    f"expected {node.word_frequency + child_total}",
                )

        logger.debug("restored trie with %d words", trie._word_count)
        return trie

    def __repr__(self) -> str:
        return f"Trie(words={self._word_count})"


def _node_to_dict(node: TrieNode) -> Snapshot:
    return {
        "children": {ch: _node_to_dict(child) for ch, child in node.children.items()},
        "is_end_of_word": node.is_end_of_word,
        "word_frequency": node.word_frequency,
        "prefix_frequency": node.prefix_frequency,
    }


def _check_snapshot_node(raw: Any, path: str) -> None:
    if not isinstance(raw, dict):
        raise SnapshotFormatError("snapshot", f"node at {path!r} is not a mapping")
    missing = [k for k in _SNAPSHOT_KEYS if k not in raw]
    if missing:
        raise SnapshotFormatError("snapshot", f"node at {path!r} is missing {', '.join(missing)}")
    if not isinstance(raw["children"], dict):
        raise SnapshotFormatError("snapshot", f"children of {path!r} is not a mapping")
    if not isinstance(raw["is_end_of_word"], bool):
        raise SnapshotFormatError("snapshot", f"is_end_of_word of {path!r} is not a bool")
    for key in ("word_frequency", "prefix_frequency"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise SnapshotFormatError("snapshot", f"{key} of {path!r} must be a non-negative int")
    if raw["is_end_of_word"] and raw["word_frequency"] < 1 and path:
        raise SnapshotFormatError("snapshot", f"word {path!r} has no frequency")
    if not raw["is_end_of_word"] and raw["word_frequency"]:
        raise SnapshotFormatError("snapshot", f"{path!r} has a word_frequency but is not a word")
