import pytest

from llm_output_parser.core.services.validator import looks_like_json


@pytest.mark.parametrize("text", ['{"a": 1}', "  [1, 2]  ", "{}", "[]", '{"a": {"b": [true, null]}}'])
def test_accepts_parseable_structures(text):
    assert looks_like_json(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        '{"a": 1',
        "[1, 2}",
        '"just a string"',
        "42",
        "{a: 1}",
        "{'a': 'b'}",
    ],
)
def test_rejects_everything_else(text):
    assert looks_like_json(text) is False
