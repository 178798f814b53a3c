from __future__ import annotations

import pytest

from jpdict_results.meta import merge_meta


def _pair(key, meta):
    return (key, meta)


def test_merge_meta_aligns_by_position():
    merged = merge_meta(["a", "b", "c"], [{"p": ["x"]}, None, {"i": ["y"]}], _pair)
    assert merged == [("a", {"p": ["x"]}), ("b", None), ("c", {"i": ["y"]})]


def test_merge_meta_treats_storage_sentinel_as_missing():
    merged = merge_meta(["a", "b"], [0, {"p": ["x"]}], _pair)
    assert merged == [("a", None), ("b", {"p": ["x"]})]


@pytest.mark.parametrize("meta_len", [0, 1, 2, 3, 4])
def test_merge_meta_short_metadata_pads_with_none(meta_len):
    keys = ["k0", "k1", "k2", "k3"]
    meta = [{"p": [str(i)]} for i in range(meta_len)]

    merged = merge_meta(keys, meta, _pair)

    assert [key for key, _ in merged] == keys
    for index, (_, slot) in enumerate(merged):
        if index >= meta_len:
            assert slot is None
        else:
            assert slot == {"p": [str(index)]}


def test_merge_meta_without_metadata():
    assert merge_meta(["a", "b"], None, _pair) == [("a", None), ("b", None)]


def test_merge_meta_without_keys_returns_empty_list():
    assert merge_meta(None, [{"p": ["x"]}], _pair) == []


def test_merge_meta_does_not_touch_input():
    keys = ["a", "b"]
    meta = [0, {"p": ["x"]}]
    merge_meta(keys, meta, lambda key, slot: {"ent": key, **(slot or {})})
    assert keys == ["a", "b"]
    assert meta == [0, {"p": ["x"]}]
