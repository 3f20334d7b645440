"""Ordered textual repairs that turn quasi-JSON into parseable JSON.

Rule order is load-bearing: the single-quote and bareword rules assume the
unquoted-value rule has already quoted everything it could, and the final
mixed-quote collapse cleans up boundaries left over by the earlier rules.
No rule raises; a rule whose pattern does not match leaves the text as is.
"""

from __future__ import annotations

import re
from typing import Callable


_BRACE_OPEN_PADDING = re.compile(r"\{\s+")
_BRACE_CLOSE_PADDING = re.compile(r"\s+\}")

# "key": value  (value not starting with a quote or bracket, up to , "key or the final })
_UNQUOTED_VALUE = re.compile(r'("[\w-]+")\s*: \s*(?!"|\[)([\s\S]+?)(?=(,\s*"|\}$))')

# "key": 'value'
_SINGLE_QUOTED_VALUE = re.compile(r"\"([^\"]+)\"\s*:\s*'([^']*)'")

# "key": word
_BARE_WORD_VALUE = re.compile(r'("[\w-]+")\s*:\s*([A-Za-z_]+)(?!["\w])')

_MIXED_QUOTES = re.compile(r"\"'|'\"")

# 'item' followed by , } or ]
_SINGLE_QUOTED_ITEM = re.compile(r"(?<!\\)'([^']*)'(?=\s*[,}\]])")


def collapse_brace_padding(text: str) -> str:
    """Drop whitespace after the first ``{`` and before the first ``}``, then trim."""
    text = _BRACE_OPEN_PADDING.sub("{", text, count=1)
    text = _BRACE_CLOSE_PADDING.sub("}", text, count=1)
    return text.strip()


def quote_unquoted_values(text: str) -> str:
    """Wrap an unquoted, unbracketed value run in double quotes.

    The value is kept as an opaque string; numbers and booleans become strings.
    A nested object value is swallowed whole (``{"a": {"b": 1}}`` becomes
    ``{"a": "{"b": 1}"}``), which is not valid JSON and is not stable under a
    second pass. Callers normalize only text that failed to parse as is.
    """
    return _UNQUOTED_VALUE.sub(r'\1: "\2"', text)


def double_quote_single_quoted_values(text: str) -> str:
    return _SINGLE_QUOTED_VALUE.sub(r'"\1": "\2"', text)


def quote_bare_words(text: str) -> str:
    return _BARE_WORD_VALUE.sub(r'\1: "\2"', text)


def collapse_mixed_quotes(text: str) -> str:
    return _MIXED_QUOTES.sub('"', text)


NORMALIZATION_RULES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("collapse_brace_padding", collapse_brace_padding),
    ("quote_unquoted_values", quote_unquoted_values),
    ("double_quote_single_quoted_values", double_quote_single_quoted_values),
    ("quote_bare_words", quote_bare_words),
    ("collapse_mixed_quotes", collapse_mixed_quotes),
)


def normalize_json_string(text: str) -> str:
    """Apply every normalization rule in order and return the rewritten text."""
    for _name, rule in NORMALIZATION_RULES:
        text = rule(text)
    return text


def normalize_array_items(text: str) -> str:
    """Turn single-quoted items (``['a', 'b']``) into double-quoted ones.

    Escaped quotes are left alone; only quotes that close before a ``,``,
    ``}`` or ``]`` are treated as string delimiters.
    """
    return _SINGLE_QUOTED_ITEM.sub(r'"\1"', text)


def normalize_json_array_string(text: str) -> str:
    return normalize_json_string(normalize_array_items(text))
