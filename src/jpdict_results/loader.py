from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common.types import RawWordRecord
from .meta import META_SENTINEL

# Module-level logger
logger = logging.getLogger(__name__)


class KanjiMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    i: Optional[List[str]] = None
    p: Optional[List[str]] = None


class ReadingMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    i: Optional[List[str]] = None
    p: Optional[List[str]] = None
    app: Optional[int] = None
    a: Optional[Union[int, List[Dict[str, Any]]]] = None


class WordSense(BaseModel):
    model_config = ConfigDict(extra="allow")

    g: List[str]
    gt: Optional[int] = None


class WordRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    k: Optional[List[str]] = None
    km: Optional[List[Optional[KanjiMeta]]] = None
    r: List[str] = Field(min_length=1)
    rm: Optional[List[Optional[ReadingMeta]]] = None
    s: List[WordSense]

    @field_validator("km", "rm", mode="before")
    def resolve_sentinels(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        return [None if _is_sentinel(slot) else slot for slot in v]


def _is_sentinel(slot: Any) -> bool:
    return isinstance(slot, int) and not isinstance(slot, bool) and slot == META_SENTINEL


def parse_raw_record(payload: Dict[str, Any]) -> RawWordRecord:
    """
    Validate one compact word record and return it as a plain dict.
    - Metadata sentinels (0) in km/rm become None.
    - Only fields present in the payload are emitted; unknown fields are kept.
    """
    record = WordRecord.model_validate(payload)
    return record.model_dump(exclude_unset=True)  # type: ignore[return-value]


def parse_raw_records(payload: Union[Dict[str, Any], List[Dict[str, Any]]]) -> List[RawWordRecord]:
    if isinstance(payload, dict):
        return [parse_raw_record(payload)]
    if isinstance(payload, list):
        logger.info("Parsing %d word records", len(payload))
        return [parse_raw_record(item) for item in payload]
    raise ValueError(f"Unsupported JSON root type: {type(payload).__name__}")


def load_raw_records(json_path: Union[str, Path]) -> List[RawWordRecord]:
    path = Path(json_path)
    if not path.is_file():
        raise FileNotFoundError(f"Word record file '{path}' does not exist or is not a file")

    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)

    return parse_raw_records(raw)
