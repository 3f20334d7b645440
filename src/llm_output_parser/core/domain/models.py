from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Union


class Provenance(str, Enum):
    """Extraction stage that produced a candidate."""

    MARKDOWN = "markdown"
    RAW = "raw"
    FALLBACK = "fallback"


class MissReason(str, Enum):
    STRUCTURAL_MISS = "structural_miss"
    PARSE_FAILURE = "parse_failure"
    EMPTY_ARRAY = "empty_array"
    SALVAGE_MISS = "salvage_miss"
    DUPLICATE_CANDIDATE = "duplicate_candidate"
    UNEXPECTED_SHAPE = "unexpected_shape"


class RespondToken(str, Enum):
    RESPOND = "RESPOND"
    IGNORE = "IGNORE"
    STOP = "STOP"


@dataclass(frozen=True)
class Candidate:
    """A located substring believed to hold a JSON object or array.

    ``span`` is the (start, end) offset of ``content`` in the text the locator
    searched: the input text for markdown blocks, the fence-stripped text
    for raw structures.
    """
    content: str
    provenance: Provenance
    span: tuple[int, int]


@dataclass(frozen=True)
class StageMiss:
    """Why a stage produced nothing."""
    provenance: Provenance
    reason: MissReason
    detail: str | None = None


@dataclass(frozen=True)
class StageHit:
    provenance: Provenance
    value: Any


StageResult = Union[StageHit, StageMiss]

JsonValue = Any
AttributeMap = dict[str, str]


@dataclass
class ActionResponse:
    """Independent action flags recovered from free text."""
    like: bool = False
    retweet: bool = False
    quote: bool = False
    reply: bool = False

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)
