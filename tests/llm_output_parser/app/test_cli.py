import json

from typer.testing import CliRunner

from llm_output_parser.app.cli import app


runner = CliRunner()


def test_object_from_argument():
    result = runner.invoke(app, ["object", 'Result: {"a": 1}'])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"a": 1}


def test_object_no_data_exits_1():
    result = runner.invoke(app, ["object", "no data here"])

    assert result.exit_code == 1
    assert result.stdout.strip() == "null"


def test_object_with_provenance():
    result = runner.invoke(app, ["object", "--provenance", '```json\n{"a": 1}\n```'])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"provenance": "markdown", "value": {"a": 1}}


def test_object_indent():
    result = runner.invoke(app, ["object", "--indent", "2", '{"a": 1}'])

    assert result.exit_code == 0
    assert result.stdout == '{\n  "a": 1\n}\n'


def test_array_from_stdin():
    result = runner.invoke(app, ["array"], input="Here: [1, 2]\n")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [1, 2]


def test_array_empty_exits_1():
    result = runner.invoke(app, ["array", "-"], input="[]")

    assert result.exit_code == 1


def test_object_from_file(tmp_path):
    path = tmp_path / "response.txt"
    path.write_text('Sure:\n```json\n{"user": "eliza"}\n```\n', encoding="utf-8")

    result = runner.invoke(app, ["object", "--file", str(path)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"user": "eliza"}


def test_missing_file_exits_2(tmp_path):
    result = runner.invoke(app, ["object", "--file", str(tmp_path / "nope.txt")])

    assert result.exit_code == 2


def test_attributes_targeted():
    result = runner.invoke(app, ["attributes", "--name", "user", '"user": "bob", "text": "hi"'])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"user": "bob"}


def test_attributes_none_found_exits_1():
    result = runner.invoke(app, ["attributes", "plain text"])

    assert result.exit_code == 1
    assert json.loads(result.stdout) == {}


def test_clean():
    result = runner.invoke(app, ["clean", 'junk {"a": 1} junk'])

    assert result.exit_code == 0
    assert result.stdout.strip() == '{"a": 1}'


def test_clean_invalid_exits_1():
    result = runner.invoke(app, ["clean", "{not json}"])

    assert result.exit_code == 1
    assert result.stdout == ""


def test_normalize():
    result = runner.invoke(app, ["normalize", '{"a": hello}'])

    assert result.exit_code == 0
    assert result.stdout.strip() == '{"a": "hello"}'


def test_respond():
    result = runner.invoke(app, ["respond", "Result: [STOP]"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "STOP"


def test_respond_unrecognized():
    result = runner.invoke(app, ["respond", "maybe"])

    assert result.exit_code == 1
    assert result.stdout.strip() == "null"


def test_boolean():
    assert runner.invoke(app, ["boolean", "yes"]).stdout.strip() == "true"
    assert runner.invoke(app, ["boolean", "off"]).stdout.strip() == "false"

    result = runner.invoke(app, ["boolean", "banana"])
    assert result.exit_code == 1
    assert result.stdout.strip() == "null"


def test_actions():
    result = runner.invoke(app, ["actions"], input="[LIKE]\n[REPLY]\n")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"like": True, "retweet": False, "quote": False, "reply": True}


def test_truncate_with_explicit_limit():
    result = runner.invoke(app, ["truncate", "--max-length", "4", "A. B. C."])

    assert result.exit_code == 0
    assert result.stdout.strip() == "A."


def test_truncate_uses_configured_limit(monkeypatch):
    monkeypatch.setenv("LLM_OUTPUT_PARSER_TRUNCATION__MAX_LENGTH", "5")

    result = runner.invoke(app, ["truncate", "A. B. C."])

    assert result.exit_code == 0
    assert result.stdout.strip() == "A. B."


def test_log_file_receives_diagnostics(tmp_path, monkeypatch):
    home = tmp_path / "cli-home"
    monkeypatch.setenv("LLM_OUTPUT_PARSER_DIRECTORIES__HOME", str(home))

    result = runner.invoke(
        app,
        ["--log-level", "debug", "--log-file", "diag.jsonl", "object", '{"a": [1, 2}'],
    )

    assert result.exit_code == 1
    entries = [
        json.loads(line)
        for line in (home / "logs" / "diag.jsonl").read_text(encoding="utf-8").splitlines()
    ]
    messages = [e["message"] for e in entries]
    assert "parse_failure" in messages
    assert "stage_miss" in messages
    assert all(e["logger"] == "llm_output_parser" for e in entries)


def test_footer_fills_agent_name():
    result = runner.invoke(app, ["footer", "respond", "--agent-name", "Ava"])

    assert result.exit_code == 0
    assert "[RESPOND]" in result.stdout
    assert "If Ava is talking too much" in result.stdout


def test_footer_matches_boolean_parser():
    result = runner.invoke(app, ["footer", "boolean"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "Respond with only a YES or a NO."


def test_footer_unknown_kind_exits_2():
    result = runner.invoke(app, ["footer", "poem"])

    assert result.exit_code == 2
