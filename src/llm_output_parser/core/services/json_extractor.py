from __future__ import annotations

import json
from functools import partial
from typing import Any, Callable, Optional

from ..domain.models import (
    Candidate,
    MissReason,
    Provenance,
    StageHit,
    StageMiss,
    StageResult,
)
from ..ports import LoggerPort
from .locator import ARRAY_ONLY, OBJECT_THEN_ARRAY, find_bare_structure, find_code_block
from .normalizer import normalize_json_array_string, normalize_json_string
from .salvage import extract_attributes
from .validator import looks_like_json


Acceptor = Callable[[Provenance, Any], StageResult]
Stage = Callable[[str, set], StageResult]


def _accept_object(provenance: Provenance, value: Any) -> StageResult:
    if isinstance(value, dict):
        return StageHit(provenance, value)
    if isinstance(value, list):
        if value:
            return StageHit(provenance, value)
        return StageMiss(provenance, MissReason.EMPTY_ARRAY)
    return StageMiss(provenance, MissReason.UNEXPECTED_SHAPE, type(value).__name__)


def _accept_array(provenance: Provenance, value: Any) -> StageResult:
    if isinstance(value, list):
        if value:
            return StageHit(provenance, value)
        return StageMiss(provenance, MissReason.EMPTY_ARRAY)
    return StageMiss(provenance, MissReason.UNEXPECTED_SHAPE, type(value).__name__)


class JsonExtractor:
    """Domain service for recovering JSON objects and arrays from LLM responses.

    Runs an ordered chain of stages and returns the first success:

    1. markdown: a ```json fenced block
    2. raw: the widest bracketed span once fences are stripped
    3. fallback (objects only): regex salvage of ``"key": "value"`` pairs

    Each structural candidate is parsed as-is when it is already valid JSON and
    is otherwise repaired by the normalizer first. Failures are logged and turn
    into the next stage; nothing is raised to the caller.
    """

    def __init__(self, *, logger: LoggerPort, snippet_chars: int = 100) -> None:
        self._logger = logger
        self._snippet_chars = snippet_chars

    def parse_object(self, text: str) -> Optional[Any]:
        """Parse a JSON object from text.

        Returns:
            A dict (possibly empty), a non-empty list, a salvaged attribute
            map, or None when every stage missed.
        """
        hit = self.extract_object(text)
        return hit.value if hit is not None else None

    def parse_array(self, text: str) -> Optional[list]:
        """Parse a non-empty JSON array from text, or None."""
        hit = self.extract_array(text)
        return hit.value if hit is not None else None

    def extract_object(self, text: str) -> Optional[StageHit]:
        """Like ``parse_object`` but keeps the provenance of the result."""
        if not isinstance(text, str) or not text:
            return None

        stages: tuple[Stage, ...] = (
            partial(self._markdown_stage, repair=normalize_json_string, accept=_accept_object),
            partial(
                self._raw_stage,
                brackets=OBJECT_THEN_ARRAY,
                repair=normalize_json_string,
                accept=_accept_object,
            ),
            self._fallback_stage,
        )
        return self._run(text, stages)

    def extract_array(self, text: str) -> Optional[StageHit]:
        if not isinstance(text, str) or not text:
            return None

        stages: tuple[Stage, ...] = (
            partial(self._markdown_stage, repair=normalize_json_array_string, accept=_accept_array),
            partial(
                self._raw_stage,
                brackets=ARRAY_ONLY,
                repair=normalize_json_array_string,
                accept=_accept_array,
            ),
        )
        return self._run(text, stages)

    def _run(self, text: str, stages: tuple[Stage, ...]) -> Optional[StageHit]:
        # Contents that already failed; a later stage never retries them.
        attempted: set[str] = set()

        for stage in stages:
            result = stage(text, attempted)
            if isinstance(result, StageHit):
                self._logger.debug(
                    "stage_success",
                    type="stage_success",
                    provenance=result.provenance.value,
                )
                return result
            self._logger.debug(
                "stage_miss",
                type="stage_miss",
                provenance=result.provenance.value,
                reason=result.reason.value,
                detail=result.detail,
            )
        return None

    def _markdown_stage(
        self,
        text: str,
        attempted: set,
        *,
        repair: Callable[[str], str],
        accept: Acceptor,
    ) -> StageResult:
        candidate = find_code_block(text)
        if candidate is None or not candidate.content.strip():
            return StageMiss(Provenance.MARKDOWN, MissReason.STRUCTURAL_MISS)
        return self._parse_candidate(candidate, attempted, repair=repair, accept=accept)

    def _raw_stage(
        self,
        text: str,
        attempted: set,
        *,
        brackets: tuple[tuple[str, str], ...],
        repair: Callable[[str], str],
        accept: Acceptor,
    ) -> StageResult:
        candidate = find_bare_structure(text, brackets)
        if candidate is None:
            return StageMiss(Provenance.RAW, MissReason.STRUCTURAL_MISS)
        return self._parse_candidate(candidate, attempted, repair=repair, accept=accept)

    def _fallback_stage(self, text: str, attempted: set) -> StageResult:
        # Only text that looks like it carries key/value structure is salvaged.
        if ":" not in text or '"' not in text:
            return StageMiss(Provenance.FALLBACK, MissReason.STRUCTURAL_MISS)

        attributes = extract_attributes(text)
        if not attributes:
            return StageMiss(Provenance.FALLBACK, MissReason.SALVAGE_MISS)

        self._logger.info(
            "salvage_used",
            type="salvage_used",
            provenance=Provenance.FALLBACK.value,
            keys=sorted(attributes),
            snippet=self._snippet(text),
        )
        return StageHit(Provenance.FALLBACK, attributes)

    def _parse_candidate(
        self,
        candidate: Candidate,
        attempted: set,
        *,
        repair: Callable[[str], str],
        accept: Acceptor,
    ) -> StageResult:
        content = candidate.content.strip()
        if content in attempted:
            return StageMiss(candidate.provenance, MissReason.DUPLICATE_CANDIDATE)
        attempted.add(content)

        # Well-formed JSON is parsed untouched so numbers and booleans keep their type.
        parsing_text = content if looks_like_json(content) else repair(content)
        try:
            value = json.loads(parsing_text)
        except json.JSONDecodeError as e:
            self._logger.warning(
                "parse_failure",
                type="parse_failure",
                provenance=candidate.provenance.value,
                error=str(e),
                snippet=self._snippet(content),
            )
            return StageMiss(candidate.provenance, MissReason.PARSE_FAILURE, str(e))

        return accept(candidate.provenance, value)

    def _snippet(self, content: str) -> str:
        if len(content) <= self._snippet_chars:
            return content
        return content[: self._snippet_chars] + "..."
