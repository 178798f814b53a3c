"""Expansion of compact dictionary word records into popup-ready results."""

from .assembler import expand_senses, strip_fields, to_word_result
from .glosses import BITS_PER_GLOSS_TYPE, expand_glosses, gloss_type_at, pack_gloss_types
from .matching import MatchFlags, annotate_matches
from .meta import merge_meta
from .normalization import kana_to_hiragana

__all__ = [
    "BITS_PER_GLOSS_TYPE",
    "MatchFlags",
    "annotate_matches",
    "expand_glosses",
    "expand_senses",
    "gloss_type_at",
    "kana_to_hiragana",
    "merge_meta",
    "pack_gloss_types",
    "strip_fields",
    "to_word_result",
]
