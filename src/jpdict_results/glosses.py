from __future__ import annotations

"""Decoding of the packed per-gloss type field ``gt``.

Each gloss in a sense owns a fixed-width slot of ``BITS_PER_GLOSS_TYPE`` bits
in ``gt``; slot ``i`` starts at bit ``i * BITS_PER_GLOSS_TYPE``. A sense
without ``gt`` has no typed glosses.
"""

import logging
from typing import Iterable, Mapping

from .common.types import GLOSS_TYPE_MAX, Gloss, GlossType

LOGGER = logging.getLogger(__name__)

BITS_PER_GLOSS_TYPE = int(GLOSS_TYPE_MAX).bit_length()
GLOSS_TYPE_MASK = (1 << BITS_PER_GLOSS_TYPE) - 1

# Width of the integer the upstream encoder packs into.
PACKED_GLOSS_TYPE_WIDTH = 32
MAX_PACKED_GLOSS_TYPES = PACKED_GLOSS_TYPE_WIDTH // BITS_PER_GLOSS_TYPE


def gloss_type_at(gt: int, index: int) -> GlossType | int:
    """Return the type stored in slot ``index`` of ``gt``.

    Bit patterns above ``GLOSS_TYPE_MAX`` are returned as plain ints.
    """
    value = (gt >> (index * BITS_PER_GLOSS_TYPE)) & GLOSS_TYPE_MASK
    if value > GLOSS_TYPE_MAX:
        LOGGER.debug("Unknown gloss type %d in slot %d of %d", value, index, gt)
        return value
    return GlossType(value)


def expand_glosses(sense: Mapping[str, object]) -> list[Gloss]:
    gt = sense.get("gt") or 0
    glosses: list[Gloss] = []
    for index, text in enumerate(sense["g"]):
        gloss: Gloss = {"str": text}
        gloss_type = gloss_type_at(gt, index)
        # Untyped glosses carry no "type" key at all.
        if gloss_type != GlossType.NONE:
            gloss["type"] = gloss_type
        glosses.append(gloss)
    return glosses


def pack_gloss_types(types: Iterable[int]) -> int:
    """Pack per-gloss types into a single ``gt`` integer."""
    packed = 0
    for index, gloss_type in enumerate(types):
        if index >= MAX_PACKED_GLOSS_TYPES:
            raise ValueError(
                f"At most {MAX_PACKED_GLOSS_TYPES} gloss types fit in "
                f"{PACKED_GLOSS_TYPE_WIDTH} bits"
            )
        value = int(gloss_type)
        if not 0 <= value <= GLOSS_TYPE_MAX:
            raise ValueError(f"Gloss type {value} out of range [0, {int(GLOSS_TYPE_MAX)}]")
        packed |= value << (index * BITS_PER_GLOSS_TYPE)
    return packed
