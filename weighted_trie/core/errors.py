# errors.py
# Argument errors raised by the Trie before it touches any node.
# Everything else in the trie is total: absence is 0 / False / [].

from __future__ import annotations


class TrieArgumentError(ValueError):
    """Base class for rejected trie arguments. `argument` names the offending parameter."""

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{argument}: {message}")
        self.argument = argument
        self.message = message


class ArgumentOutOfRangeError(TrieArgumentError):
    """frequency / max_suggestions below 1, or a word longer than the limit."""


class EmptyArgumentError(TrieArgumentError):
    """word or prefix is None or the empty string."""


class SnapshotFormatError(TrieArgumentError):
    """A snapshot dict handed to Trie.from_snapshot doesn't describe a valid trie."""
