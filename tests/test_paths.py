from __future__ import annotations

from types import MappingProxyType

import pytest

from ledgerstate.state.paths import deep_merge, get_in, set_in, split_key, thaw


def test_split_key_handles_dotted_and_sequence_keys() -> None:
    assert split_key("info.balance") == ("info", "balance")
    assert split_key(("a", "b.c")) == ("a", "b.c")


def test_set_in_copies_only_the_written_path() -> None:
    tree = {"a": {"b": 1}, "c": {"d": 2}}

    result = set_in(tree, ("a", "b"), 5)

    assert result == {"a": {"b": 5}, "c": {"d": 2}}
    assert tree["a"]["b"] == 1
    assert result["c"] is tree["c"]


def test_set_in_replaces_non_mapping_intermediates() -> None:
    result = set_in({"a": 3}, ("a", "b"), 1)

    assert result == {"a": {"b": 1}}


def test_set_in_rejects_empty_path() -> None:
    with pytest.raises(ValueError):
        set_in({}, (), 1)


def test_get_in_returns_default_through_non_mappings() -> None:
    assert get_in({"a": 1}, ("a", "b")) is None
    assert get_in({"a": 1}, ("x",), default={}) == {}


def test_deep_merge_keeps_siblings_and_overwrites_leaves() -> None:
    base = {"wallet": {"empty": {"notification": {"message": "Hi", "title": "T"}}, "other": 1}}
    patch = {"wallet": {"empty": {"notification": {"message": "Hello"}}}}

    merged = deep_merge(base, patch)

    assert merged == {"wallet": {"empty": {"notification": {"message": "Hello", "title": "T"}}, "other": 1}}
    assert base["wallet"]["empty"]["notification"]["message"] == "Hi"


def test_thaw_converts_nested_mappings_and_tuples() -> None:
    frozen = MappingProxyType({"a": MappingProxyType({"b": (1, 2)})})

    assert thaw(frozen) == {"a": {"b": [1, 2]}}
