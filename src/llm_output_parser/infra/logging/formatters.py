from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter


class JSONFormatter(JsonFormatter):
    """JSON formatter for extraction diagnostics.

    Structured fields passed via ``extra`` (stage, provenance, snippet, ...)
    end up as top-level keys of each JSONL line.
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['message'] = record.getMessage()


class HumanReadableFormatter(logging.Formatter):
    """Console formatter; appends the stage and provenance when present."""

    def __init__(self) -> None:
        super().__init__(
            fmt='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        provenance = getattr(record, 'provenance', None)
        if provenance:
            line += f" [{provenance}]"
        reason = getattr(record, 'reason', None)
        if reason:
            line += f" ({reason})"
        return line
