from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .common.types import Normalizer
from .normalization import kana_to_hiragana

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchFlags:
    """Which field the selection matched, plus one flag per entry.

    When a field matched, only the entries equal to the selection are
    flagged. When it did not, every entry in that field is flagged since
    there is nothing to tell them apart.
    """

    kanji_matched: bool
    kana_matched: bool
    kanji: tuple[bool, ...]
    readings: tuple[bool, ...]


def annotate_matches(
    kanji: Optional[Sequence[str]],
    readings: Sequence[str],
    matching_text: str,
    *,
    normalize: Normalizer = kana_to_hiragana,
) -> MatchFlags:
    """Flag the kanji and reading forms that ``matching_text`` selected.

    ``matching_text`` must already be normalized with ``normalize``. A kanji
    match takes priority: when any kanji form matches, the reading field is
    left permissive.
    """
    normalized_kanji = [normalize(form) for form in kanji or ()]
    kanji_matched = matching_text in normalized_kanji

    normalized_readings = [normalize(form) for form in readings]
    kana_matched = not kanji_matched and matching_text in normalized_readings

    LOGGER.debug(
        "Selection %r: kanji_matched=%s kana_matched=%s",
        matching_text,
        kanji_matched,
        kana_matched,
    )

    return MatchFlags(
        kanji_matched=kanji_matched,
        kana_matched=kana_matched,
        kanji=_field_flags(normalized_kanji, matching_text, kanji_matched),
        readings=_field_flags(normalized_readings, matching_text, kana_matched),
    )


def _field_flags(
    normalized: Sequence[str], matching_text: str, field_matched: bool
) -> tuple[bool, ...]:
    return tuple(
        (field_matched and form == matching_text) or not field_matched
        for form in normalized
    )
