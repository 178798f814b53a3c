"""Shared record shapes for compact and expanded dictionary words.

The raw shapes mirror the flat-file records produced by the dictionary
storage engine; the expanded shapes are what the popup renderer consumes.
Metadata and sense fields beyond the ones listed here are opaque to the
expansion layer and are carried through unchanged.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, NotRequired, TypeAlias, TypedDict


class GlossType(IntEnum):
    NONE = 0
    EXPL = 1
    LIT = 2
    FIG = 3
    TM = 4


GLOSS_TYPE_MAX = GlossType.TM

# Normalizes a surface form before comparison (e.g. katakana -> hiragana).
Normalizer: TypeAlias = Callable[[str], str]


class RawKanjiMeta(TypedDict, total=False):
    i: list[str]
    p: list[str]


class RawReadingMeta(TypedDict, total=False):
    i: list[str]
    p: list[str]
    # Bitfield of the kanji entries this reading applies to.
    app: int
    # Pitch accent: either a single mora index or a list of accent records.
    a: int | list[dict[str, Any]]


class RawWordSense(TypedDict):
    g: list[str]
    gt: NotRequired[int]
    lang: NotRequired[str]
    kapp: NotRequired[int]
    rapp: NotRequired[int]
    pos: NotRequired[list[str]]
    field: NotRequired[list[str]]
    misc: NotRequired[list[str]]
    dial: NotRequired[list[str]]
    inf: NotRequired[str]
    xref: NotRequired[list[dict[str, Any]]]
    ant: NotRequired[list[dict[str, Any]]]
    lsrc: NotRequired[list[dict[str, Any]]]


class RawWordRecord(TypedDict):
    k: NotRequired[list[str]]
    # ``None`` (or the storage sentinel ``0``) marks a slot without metadata.
    km: NotRequired[list[RawKanjiMeta | None]]
    r: list[str]
    rm: NotRequired[list[RawReadingMeta | None]]
    s: list[RawWordSense]


# Functional form: the field names shadow builtins.
Gloss = TypedDict("Gloss", {"str": str, "type": NotRequired[GlossType | int]})


class KanjiEntry(RawKanjiMeta):
    ent: str
    match: bool


class ReadingEntry(RawReadingMeta):
    ent: str
    match: bool


class ExpandedSense(TypedDict, total=False):
    g: list[Gloss]
    match: bool
    lang: str
    kapp: int
    rapp: int
    pos: list[str]
    field: list[str]
    misc: list[str]
    dial: list[str]
    inf: str
    xref: list[dict[str, Any]]
    ant: list[dict[str, Any]]
    lsrc: list[dict[str, Any]]


class WordResult(TypedDict):
    k: list[KanjiEntry]
    r: list[ReadingEntry]
    s: list[ExpandedSense]
    reason: str | None
    romaji: list[str] | None


__all__ = [
    "ExpandedSense",
    "GLOSS_TYPE_MAX",
    "Gloss",
    "GlossType",
    "KanjiEntry",
    "Normalizer",
    "RawKanjiMeta",
    "RawReadingMeta",
    "RawWordRecord",
    "RawWordSense",
    "ReadingEntry",
    "WordResult",
]
