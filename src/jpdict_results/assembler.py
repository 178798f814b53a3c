from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from .common.types import (
    ExpandedSense,
    KanjiEntry,
    Normalizer,
    RawKanjiMeta,
    RawReadingMeta,
    RawWordRecord,
    RawWordSense,
    ReadingEntry,
    WordResult,
)
from .glosses import expand_glosses
from .matching import annotate_matches
from .meta import merge_meta
from .normalization import kana_to_hiragana

LOGGER = logging.getLogger(__name__)

# Sense fields replaced by their decoded form.
_PACKED_SENSE_FIELDS = ("g", "gt")


def to_word_result(
    entry: RawWordRecord,
    matching_text: str,
    *,
    reason: Optional[str] = None,
    romaji: Optional[Sequence[str]] = None,
    normalize: Normalizer = kana_to_hiragana,
) -> WordResult:
    """Expand a compact word record into the shape the popup renders.

    ``matching_text`` is the user's selection after ``normalize``; ``reason``
    and ``romaji`` are forwarded untouched.
    """
    kanji = entry.get("k")
    flags = annotate_matches(kanji, entry["r"], matching_text, normalize=normalize)

    kanji_flags = iter(flags.kanji)
    reading_flags = iter(flags.readings)

    def merge_kanji(key: str, meta: Optional[RawKanjiMeta]) -> KanjiEntry:
        return {"ent": key, **(meta or {}), "match": next(kanji_flags)}

    def merge_reading(key: str, meta: Optional[RawReadingMeta]) -> ReadingEntry:
        return {"ent": key, **(meta or {}), "match": next(reading_flags)}

    result: WordResult = {
        "k": merge_meta(kanji, entry.get("km"), merge_kanji),
        "r": merge_meta(entry["r"], entry.get("rm"), merge_reading),
        "s": expand_senses(entry["s"]),
        "reason": reason,
        "romaji": list(romaji) if romaji is not None else None,
    }
    LOGGER.debug(
        "Expanded %d kanji, %d readings, %d senses",
        len(result["k"]),
        len(result["r"]),
        len(result["s"]),
    )
    return result


def expand_senses(senses: Iterable[RawWordSense]) -> list[ExpandedSense]:
    # Senses are not discriminated against the selection; all are shown.
    return [
        {
            "g": expand_glosses(sense),
            **strip_fields(sense, _PACKED_SENSE_FIELDS),
            "match": True,
        }
        for sense in senses
    ]


def strip_fields(record: Mapping[str, object], fields: Iterable[str]) -> dict[str, object]:
    """Return a shallow copy of ``record`` without ``fields``."""
    dropped = set(fields)
    return {key: value for key, value in record.items() if key not in dropped}
