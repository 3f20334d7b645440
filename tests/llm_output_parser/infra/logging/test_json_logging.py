import json
import logging
import sys

from llm_output_parser.core.services import JsonExtractor
from llm_output_parser.infra.logging import (
    HumanReadableFormatter,
    ParserLogger,
    StructuredLogger,
    build_handlers,
    build_human_console_handler,
    build_json_file_handler,
)


def test_build_human_console_handler():
    handler = build_human_console_handler(level=logging.INFO)

    assert handler is not None
    assert handler.level == logging.INFO
    assert isinstance(handler.formatter, HumanReadableFormatter)


def test_build_json_file_handler_creates_parent_dirs(tmp_path):
    log_file = tmp_path / "nested" / "diag.jsonl"

    handler = build_json_file_handler(log_file, level=logging.DEBUG)
    handler.close()

    assert handler.level == logging.DEBUG
    assert log_file.parent.exists()


def test_json_logging_with_structured_fields(tmp_path):
    log_file = tmp_path / "test.jsonl"

    logger = logging.getLogger("test_structured_fields")
    logger.setLevel(logging.INFO)
    for h in logger.handlers[:]:
        logger.removeHandler(h)

    handler = build_json_file_handler(log_file, level=logging.INFO)
    logger.addHandler(handler)

    StructuredLogger(logger).warning(
        "parse_failure",
        type="parse_failure",
        provenance="raw",
        snippet='{"a": [1',
    )

    handler.flush()
    handler.close()
    logger.removeHandler(handler)

    entry = json.loads(log_file.read_text(encoding="utf-8").strip())
    assert entry["message"] == "parse_failure"
    assert entry["level"] == "WARNING"
    assert entry["logger"] == "test_structured_fields"
    assert entry["type"] == "parse_failure"
    assert entry["provenance"] == "raw"
    assert entry["snippet"] == '{"a": [1'


def test_human_formatter_appends_stage_details():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "parse_failure", None, None)
    record.provenance = "markdown"
    record.reason = "parse_failure"

    line = HumanReadableFormatter().format(record)

    assert line.endswith("WARNING - parse_failure [markdown] (parse_failure)")


def test_parser_logger_resource_writes_and_closes(tmp_path):
    resource = ParserLogger()
    logger = resource.init(
        logs_dir=tmp_path,
        log_file="diag.jsonl",
        logger_name="test_parser_logger",
        level="DEBUG",
    )

    logger.debug("stage_miss", type="stage_miss", provenance="markdown", reason="structural_miss")
    resource.shutdown(logger)

    assert logging.getLogger("test_parser_logger").handlers == []
    lines = (tmp_path / "diag.jsonl").read_text(encoding="utf-8").splitlines()
    entry = json.loads(lines[0])
    assert entry["message"] == "stage_miss"
    assert entry["reason"] == "structural_miss"


def test_parser_logger_without_channels_drops_records(tmp_path):
    resource = ParserLogger()
    logger = resource.init(logs_dir=tmp_path, logger_name="test_parser_logger_quiet")

    handlers = logging.getLogger("test_parser_logger_quiet").handlers
    assert logger.name == "test_parser_logger_quiet"
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    assert not any(tmp_path.iterdir())

    resource.shutdown(logger)


def test_parser_logger_restores_previous_logger_state(tmp_path):
    target = logging.getLogger("test_parser_logger_restore")
    existing = logging.NullHandler()
    target.addHandler(existing)
    target.setLevel(logging.ERROR)
    target.propagate = True

    resource = ParserLogger()
    logger = resource.init(
        logs_dir=tmp_path,
        log_file="diag.jsonl",
        logger_name="test_parser_logger_restore",
        level="DEBUG",
    )
    assert existing not in target.handlers
    assert target.propagate is False
    assert target.level == logging.DEBUG

    resource.shutdown(logger)

    assert target.handlers == [existing]
    assert target.level == logging.ERROR
    assert target.propagate is True
    target.removeHandler(existing)


def test_parser_logger_unknown_level_means_warning(tmp_path):
    resource = ParserLogger()
    logger = resource.init(logs_dir=tmp_path, logger_name="test_parser_logger_level", level="chatty")

    assert logging.getLogger("test_parser_logger_level").level == logging.WARNING

    resource.shutdown(logger)


def test_build_handlers_selects_channels(tmp_path):
    handlers = build_handlers(
        logs_dir=tmp_path,
        log_file="diag.jsonl",
        console_output=True,
        level=logging.INFO,
    )
    try:
        assert [type(h) for h in handlers] == [logging.FileHandler, logging.StreamHandler]
        assert handlers[1].stream is sys.stderr
    finally:
        for h in handlers:
            h.close()


def test_extractor_diagnostics_reach_jsonl(tmp_path):
    resource = ParserLogger()
    logger = resource.init(
        logs_dir=tmp_path,
        log_file="extract.jsonl",
        logger_name="test_extractor_diagnostics",
        level="INFO",
    )
    extractor = JsonExtractor(logger=logger)

    assert extractor.parse_object('Here: {"a": [1, 2}') is None
    resource.shutdown(logger)

    entries = [json.loads(line) for line in (tmp_path / "extract.jsonl").read_text(encoding="utf-8").splitlines()]
    messages = [e["message"] for e in entries]
    assert messages == ["parse_failure"]
    assert entries[0]["provenance"] == "raw"
