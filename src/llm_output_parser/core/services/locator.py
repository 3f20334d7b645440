from __future__ import annotations

import re
from typing import Optional

from ..domain.models import Candidate, Provenance
from .validator import looks_like_json


JSON_BLOCK_PATTERN = re.compile(r"```json\n([\s\S]*?)\n```")

_FENCE_OPEN = re.compile(r"```(?:json)?\n")
_FENCE_CLOSE = re.compile(r"\n```")

# Bracket pairs tried in order; the first consistent pair wins.
OBJECT_THEN_ARRAY: tuple[tuple[str, str], ...] = (("{", "}"), ("[", "]"))
ARRAY_ONLY: tuple[tuple[str, str], ...] = (("[", "]"),)


def find_code_block(text: str) -> Optional[Candidate]:
    """Return the verbatim content of the first ```json fenced block, if any."""
    match = JSON_BLOCK_PATTERN.search(text)
    if match is None:
        return None
    return Candidate(
        content=match.group(1),
        provenance=Provenance.MARKDOWN,
        span=match.span(1),
    )


def strip_code_fences(text: str) -> str:
    """Remove fence markers and stray backticks, then trim."""
    cleaned = _FENCE_OPEN.sub("", text)
    cleaned = _FENCE_CLOSE.sub("", cleaned)
    return cleaned.replace("`", "").strip()


def find_bare_structure(
    text: str,
    brackets: tuple[tuple[str, str], ...] = OBJECT_THEN_ARRAY,
) -> Optional[Candidate]:
    """Locate the widest bracketed span in fence-stripped text.

    For each bracket pair the span runs from the first opener to the last
    closer. Pairs are tried in order, so objects win over arrays by default
    even when the array span is tighter. The span offsets refer to the
    fence-stripped text.
    """
    cleaned = strip_code_fences(text)

    for opener, closer in brackets:
        start = cleaned.find(opener)
        end = cleaned.rfind(closer)
        if start != -1 and end != -1 and end > start:
            return Candidate(
                content=cleaned[start:end + 1],
                provenance=Provenance.RAW,
                span=(start, end + 1),
            )
    return None


def clean_json_response(text: str) -> str:
    """Extract a bracketed JSON value from noisy text.

    Returns the extracted JSON text only when it is valid as-is, otherwise an
    empty string.
    """
    if not text:
        return ""

    candidate = find_bare_structure(text)
    if candidate is not None and looks_like_json(candidate.content):
        return candidate.content
    return ""
