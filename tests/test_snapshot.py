# tests/test_snapshot.py
# structural accessor (root / walk / snapshot) and the JSON serializer

import json

import pytest

from weighted_trie import NodeView, SnapshotFormatError, Trie, from_json, to_json


def test_root_is_stable_and_empty(trie):
    root = trie.root
    trie.insert("abc", 2)
    assert trie.root is root
    assert not root.is_end_of_word
    assert root.word_frequency == 0
    assert root.prefix_frequency == 0
    assert list(root.children) == ["a"]


def test_snapshot_shape(trie):
    trie.insert("ab", 2)
    trie.insert("a", 1)
    assert trie.snapshot() == {
        "children": {
            "a": {
                "children": {
                    "b": {
                        "children": {},
                        "is_end_of_word": True,
                        "word_frequency": 2,
                        "prefix_frequency": 2,
                    }
                },
                "is_end_of_word": True,
                "word_frequency": 1,
                "prefix_frequency": 3,
            }
        },
        "is_end_of_word": False,
        "word_frequency": 0,
        "prefix_frequency": 0,
    }


def test_snapshot_is_a_copy(seeded):
    snap = seeded.snapshot()
    snap["children"]["p"]["prefix_frequency"] = 999
    assert seeded.get_prefix_frequency("p") == 15


def test_walk_is_preorder_in_insertion_order(trie):
    trie.insert("ba", 1)
    trie.insert("ab", 1)
    trie.insert("bc", 1)
    paths = [path for path, _ in trie.walk()]
    assert paths == ["", "b", "ba", "bc", "a", "ab"]


def test_walk_views(seeded):
    views = dict(seeded.walk())
    assert views[""] == NodeView("", False, 0, 0, 3)
    assert views["python"] == NodeView("n", True, 10, 10, 0)
    assert views["neural"].child_count == 1
    assert views["neural"].prefix_frequency == 9


def test_to_json_is_valid_json(seeded):
    data = json.loads(to_json(seeded))
    assert data == seeded.snapshot()
    assert list(data["children"]) == ["n", "p", "q"]


def test_to_json_indent(trie):
    trie.insert("a")
    assert "\n" in to_json(trie, indent=2)
    assert "\n" not in to_json(trie)


def test_json_round_trip_is_lossless(seeded):
    restored = from_json(to_json(seeded))
    assert restored.snapshot() == seeded.snapshot()
    assert len(restored) == len(seeded)
    assert restored.autocomplete("ne", 5) == seeded.autocomplete("ne", 5)
    restored.insert("python", 1)
    assert restored.get_word_frequency("python") == 11


def test_from_json_rejects_garbage():
    with pytest.raises(SnapshotFormatError):
        from_json("{not json")


def _snap(trie_words):
    t = Trie()
    for w, f in trie_words:
        t.insert(w, f)
    return t.snapshot()


def test_from_snapshot_rejects_inconsistent_counters():
    snap = _snap([("ab", 2)])
    snap["children"]["a"]["prefix_frequency"] = 5
    with pytest.raises(SnapshotFormatError):
        Trie.from_snapshot(snap)


def test_from_snapshot_rejects_word_root():
    snap = _snap([("a", 1)])
    snap["is_end_of_word"] = True
    with pytest.raises(SnapshotFormatError):
        Trie.from_snapshot(snap)


@pytest.mark.parametrize(
    "field, value",
    [
        ("word_frequency", -1),
        ("word_frequency", "2"),
        ("prefix_frequency", True),
        ("is_end_of_word", 1),
        ("children", []),
    ],
)
def test_from_snapshot_rejects_bad_fields(field, value):
    snap = _snap([("a", 2)])
    snap["children"]["a"][field] = value
    with pytest.raises(SnapshotFormatError):
        Trie.from_snapshot(snap)


def test_from_snapshot_rejects_multi_char_keys():
    snap = _snap([("a", 2)])
    snap["children"]["ab"] = snap["children"].pop("a")
    with pytest.raises(SnapshotFormatError):
        Trie.from_snapshot(snap)


def test_from_snapshot_rejects_missing_keys():
    with pytest.raises(SnapshotFormatError):
        Trie.from_snapshot({"children": {}})
