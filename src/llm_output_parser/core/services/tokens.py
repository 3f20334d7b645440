from __future__ import annotations

import re
from typing import Optional

from ..domain.models import ActionResponse, RespondToken


_RESPOND_LINE = re.compile(r"^(RESPOND|IGNORE|STOP)$", re.IGNORECASE)

# Substring fallback order matters: RESPOND beats IGNORE beats STOP.
_RESPOND_PRIORITY = (RespondToken.RESPOND, RespondToken.IGNORE, RespondToken.STOP)

AFFIRMATIVE = frozenset({"YES", "Y", "TRUE", "T", "1", "ON", "ENABLE"})
NEGATIVE = frozenset({"NO", "N", "FALSE", "F", "0", "OFF", "DISABLE"})

_ACTION_PATTERNS = {
    "like": re.compile(r"\[LIKE\]", re.IGNORECASE),
    "retweet": re.compile(r"\[RETWEET\]", re.IGNORECASE),
    "quote": re.compile(r"\[QUOTE\]", re.IGNORECASE),
    "reply": re.compile(r"\[REPLY\]", re.IGNORECASE),
}

_ACTION_LINES = {
    "[LIKE]": "like",
    "[RETWEET]": "retweet",
    "[QUOTE]": "quote",
    "[REPLY]": "reply",
}


def parse_should_respond(text: str) -> Optional[RespondToken]:
    """Classify a should-respond answer as RESPOND, IGNORE or STOP.

    The first line is checked for an exact (bracket-insensitive,
    case-insensitive) token; failing that, the whole text is searched for the
    literal uppercase words in priority order.
    """
    if not isinstance(text, str) or not text:
        return None

    first_line = text.split("\n")[0].strip().replace("[", "", 1).upper().replace("]", "", 1)
    match = _RESPOND_LINE.match(first_line)
    if match:
        return RespondToken(match.group(1).upper())

    for token in _RESPOND_PRIORITY:
        if token.value in text:
            return token
    return None


def parse_boolean(text: str) -> Optional[bool]:
    """Map a yes/no style answer to True/False.

    Recognized affirmative values: YES, Y, TRUE, T, 1, ON, ENABLE.
    Recognized negative values: NO, N, FALSE, F, 0, OFF, DISABLE.
    Anything else, including empty input, gives None.
    """
    if not isinstance(text, str) or not text:
        return None

    normalized = text.strip().upper()
    if normalized in AFFIRMATIVE:
        return True
    if normalized in NEGATIVE:
        return False
    return None


def parse_action_response(text: str) -> ActionResponse:
    """Detect [LIKE], [RETWEET], [QUOTE] and [REPLY] flags anywhere in the text."""
    actions = ActionResponse()
    if not isinstance(text, str) or not text:
        return actions

    for field_name, pattern in _ACTION_PATTERNS.items():
        setattr(actions, field_name, bool(pattern.search(text)))

    # line scan can only add flags
    for line in text.split("\n"):
        field_name = _ACTION_LINES.get(line.strip())
        if field_name is not None:
            setattr(actions, field_name, True)

    return actions
