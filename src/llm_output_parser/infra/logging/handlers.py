from __future__ import annotations

import logging
import sys
from pathlib import Path
from logging import Handler

from .formatters import JSONFormatter, HumanReadableFormatter


def build_json_file_handler(path: Path, level: int = logging.INFO) -> Handler:
    """Append extraction diagnostics to ``path``, one JSON object per line.

    The parent directory is created on demand, so an unused logs directory
    never appears on disk.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8", mode="a")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def build_human_console_handler(level: int = logging.INFO) -> Handler:
    # stdout carries CLI results
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(HumanReadableFormatter())
    return handler


def build_handlers(
    *,
    logs_dir: Path,
    log_file: str | None,
    console_output: bool,
    level: int,
) -> list[Handler]:
    """Build the diagnostic channels selected by config.

    Args:
        logs_dir: Directory the JSONL file is placed in
        log_file: JSONL file name; no file channel when empty
        console_output: Add a human-readable stderr channel
        level: Level applied to every handler

    Returns:
        Handlers to attach. A NullHandler stands in when no channel is
        selected, so records are dropped instead of reaching logging's
        last-resort stderr output.
    """
    handlers: list[Handler] = []
    if log_file:
        handlers.append(build_json_file_handler(logs_dir / log_file, level=level))
    if console_output:
        handlers.append(build_human_console_handler(level=level))
    if not handlers:
        handlers.append(logging.NullHandler())
    return handlers
