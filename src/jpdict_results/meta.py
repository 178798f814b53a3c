from __future__ import annotations

from typing import Callable, Mapping, Optional, Sequence, TypeVar

MetaT = TypeVar("MetaT", bound=Mapping)
MergedT = TypeVar("MergedT")

# Compact records use 0 in place of an absent metadata slot.
META_SENTINEL = 0


def merge_meta(
    keys: Optional[Sequence[str]],
    meta: Optional[Sequence[MetaT | int | None]],
    merge: Callable[[str, Optional[MetaT]], MergedT],
) -> list[MergedT]:
    """Pair each key with the metadata at the same position.

    ``meta`` may be shorter than ``keys`` or missing altogether; positions it
    does not cover, and slots holding ``None`` or the storage sentinel, are
    passed to ``merge`` as ``None``. Keys are never reordered or dropped.
    """
    merged: list[MergedT] = []
    meta_len = len(meta) if meta else 0
    for index, key in enumerate(keys or ()):
        slot = meta[index] if index < meta_len else None
        merged.append(merge(key, _resolve_slot(slot)))
    return merged


def _resolve_slot(slot: object) -> Optional[MetaT]:
    if slot is None:
        return None
    if isinstance(slot, int) and slot == META_SENTINEL:
        return None
    return slot  # type: ignore[return-value]
