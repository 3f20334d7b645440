from __future__ import annotations

import json


_CLOSERS = {"{": "}", "[": "]"}


def looks_like_json(text: str) -> bool:
    """Return True only if ``text`` is a bracketed JSON value that really parses.

    The bracket check is a cheap gate; the final word belongs to ``json.loads``,
    so a True result means the text is provably parseable.
    """
    trimmed = text.strip()
    if not trimmed:
        return False

    closer = _CLOSERS.get(trimmed[0])
    if closer is None or not trimmed.endswith(closer):
        return False

    try:
        json.loads(trimmed)
    except json.JSONDecodeError:
        return False
    return True
