from __future__ import annotations


ELLIPSIS = "..."


def truncate_to_complete_sentence(text: str, max_length: int) -> str:
    """Truncate text to fit within max_length, preferring a complete sentence.

    Tries, in order: the last period inside the limit, the last whitespace
    inside the limit (plus an ellipsis), and finally a hard cut with an
    ellipsis.
    """
    if not isinstance(text, str):
        return ""
    if len(text) <= max_length:
        return text
    if max_length < len(ELLIPSIS):
        return text[: max(max_length, 0)]

    last_period = text.rfind(".", 0, max_length)
    if last_period != -1:
        truncated = text[: last_period + 1].strip()
        if truncated:
            return truncated

    last_space = _rfind_whitespace(text, max_length)
    if last_space != -1:
        truncated = text[:last_space].strip()
        if truncated:
            return truncated + ELLIPSIS

    return text[: max_length - len(ELLIPSIS)].strip() + ELLIPSIS


def _rfind_whitespace(text: str, end: int) -> int:
    for i in range(min(end, len(text)) - 1, -1, -1):
        if text[i].isspace():
            return i
    return -1
