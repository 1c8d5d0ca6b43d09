# serializer.py - JSON text form of a Trie's node structure

# - to_json() walks Trie.snapshot(), children keep insertion order
# - from_json() parses the same shape back into an equivalent Trie
# - text only, writing it somewhere is the caller's business

from __future__ import annotations

import json
import logging
from typing import Optional

from weighted_trie.core.errors import SnapshotFormatError
from weighted_trie.core.trie import Trie

logger = logging.getLogger(__name__)


def to_json(trie: Trie, indent: Optional[int] = None) -> str:
    """
    Serialize the whole node graph of `trie` to a JSON string.
    Each node becomes:
        {"children": {char: node, ...}, "is_end_of_word": bool,
         "word_frequency": int, "prefix_frequency": int}
    """
    text = json.dumps(trie.snapshot(), indent=indent, ensure_ascii=False)
    logger.debug("serialized %d words into %d chars", len(trie), len(text))
    return text


def from_json(text: str) -> Trie:
    """
    Rebuild a Trie from to_json() output.
    Raises SnapshotFormatError for invalid JSON or a structure no insert sequence could produce.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError("snapshot", f"invalid JSON: {e}") from e
    return Trie.from_snapshot(data)
