"""Shared types and configuration for the word-result expansion layer."""

from __future__ import annotations

from .config import LOG_FORMAT, get_config_paths
from .types import (
    GLOSS_TYPE_MAX,
    ExpandedSense,
    Gloss,
    GlossType,
    KanjiEntry,
    Normalizer,
    RawKanjiMeta,
    RawReadingMeta,
    RawWordRecord,
    RawWordSense,
    ReadingEntry,
    WordResult,
)

__all__ = [
    "ExpandedSense",
    "GLOSS_TYPE_MAX",
    "Gloss",
    "GlossType",
    "KanjiEntry",
    "LOG_FORMAT",
    "Normalizer",
    "RawKanjiMeta",
    "RawReadingMeta",
    "RawWordRecord",
    "RawWordSense",
    "ReadingEntry",
    "WordResult",
    "get_config_paths",
]
