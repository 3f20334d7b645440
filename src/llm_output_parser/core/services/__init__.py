from __future__ import annotations

from .json_extractor import JsonExtractor
from .locator import clean_json_response, find_bare_structure, find_code_block, strip_code_fences
from .normalizer import normalize_array_items, normalize_json_array_string, normalize_json_string
from .salvage import extract_attributes
from .tokens import parse_action_response, parse_boolean, parse_should_respond
from .truncation import truncate_to_complete_sentence
from .validator import looks_like_json

__all__ = [
    "JsonExtractor",
    "clean_json_response",
    "find_bare_structure",
    "find_code_block",
    "strip_code_fences",
    "normalize_array_items",
    "normalize_json_array_string",
    "normalize_json_string",
    "extract_attributes",
    "parse_action_response",
    "parse_boolean",
    "parse_should_respond",
    "truncate_to_complete_sentence",
    "looks_like_json",
]
