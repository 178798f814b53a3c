from __future__ import annotations

import copy
import json

import pytest

from jpdict_results.assembler import expand_senses, strip_fields, to_word_result
from jpdict_results.common.types import GlossType
from jpdict_results.glosses import pack_gloss_types


@pytest.fixture()
def taberu():
    return {
        "k": ["食べる", "喫べる"],
        "km": [{"p": ["i1"]}, 0],
        "r": ["たべる"],
        "rm": [{"p": ["i1"], "a": 2}],
        "s": [
            {
                "g": ["to eat", "to consume"],
                "gt": pack_gloss_types([GlossType.EXPL, GlossType.NONE]),
                "pos": ["v1", "vt"],
                "misc": ["uk"],
            },
            {"g": ["to live on"], "field": ["food"], "dial": ["ksb"]},
        ],
    }


def test_kanji_selection_result(taberu):
    result = to_word_result(taberu, "食べる")

    assert result["k"] == [
        {"ent": "食べる", "p": ["i1"], "match": True},
        {"ent": "喫べる", "match": False},
    ]
    assert result["r"] == [{"ent": "たべる", "p": ["i1"], "a": 2, "match": True}]


def test_reading_selection_result(taberu):
    result = to_word_result(taberu, "たべる")

    assert [entry["match"] for entry in result["k"]] == [True, True]
    assert [entry["match"] for entry in result["r"]] == [True]


def test_senses_decode_glosses_and_pass_other_fields_through(taberu):
    result = to_word_result(taberu, "食べる")

    first, second = result["s"]
    assert first == {
        "g": [{"str": "to eat", "type": GlossType.EXPL}, {"str": "to consume"}],
        "pos": ["v1", "vt"],
        "misc": ["uk"],
        "match": True,
    }
    assert "gt" not in first
    assert second == {
        "g": [{"str": "to live on"}],
        "field": ["food"],
        "dial": ["ksb"],
        "match": True,
    }
    # Passthrough values are shared, not rebuilt.
    assert first["pos"] is taberu["s"][0]["pos"]


def test_every_sense_matches_even_when_nothing_was_selected(taberu):
    result = to_word_result(taberu, "のむ")
    assert all(sense["match"] is True for sense in result["s"])


def test_reason_and_romaji_are_forwarded(taberu):
    result = to_word_result(taberu, "食べる", reason="< past", romaji=["taberu"])
    assert result["reason"] == "< past"
    assert result["romaji"] == ["taberu"]

    bare = to_word_result(taberu, "食べる")
    assert bare["reason"] is None
    assert bare["romaji"] is None


def test_kana_only_word_without_metadata():
    record = {"r": ["テレビ"], "s": [{"g": ["television"]}]}

    result = to_word_result(record, "てれび")

    assert result["k"] == []
    assert result["r"] == [{"ent": "テレビ", "match": True}]
    assert result["s"] == [{"g": [{"str": "television"}], "match": True}]


def test_missing_metadata_slots_add_no_fields():
    record = {
        "k": ["一", "壱", "弌"],
        "km": [0],
        "r": ["いち"],
        "rm": [None],
        "s": [{"g": ["one"]}],
    }

    result = to_word_result(record, "いち")

    assert result["k"] == [
        {"ent": "一", "match": True},
        {"ent": "壱", "match": True},
        {"ent": "弌", "match": True},
    ]
    assert result["r"] == [{"ent": "いち", "match": True}]


def test_input_record_is_not_mutated(taberu):
    before = copy.deepcopy(taberu)
    to_word_result(taberu, "食べる", reason="r", romaji=["taberu"])
    assert taberu == before


def test_assembling_twice_gives_identical_output(taberu):
    first = to_word_result(taberu, "たべる", romaji=["taberu"])
    second = to_word_result(taberu, "たべる", romaji=["taberu"])
    assert first == second
    assert json.dumps(first, ensure_ascii=False) == json.dumps(second, ensure_ascii=False)


def test_expand_senses_empty():
    assert expand_senses([]) == []


def test_strip_fields_returns_copy_without_fields():
    record = {"g": ["x"], "gt": 1, "pos": ["n"]}
    stripped = strip_fields(record, ("g", "gt"))
    assert stripped == {"pos": ["n"]}
    assert record == {"g": ["x"], "gt": 1, "pos": ["n"]}
