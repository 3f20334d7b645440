from __future__ import annotations

from .logger import ParserLogger, StructuredLogger
from .handlers import build_handlers, build_json_file_handler, build_human_console_handler
from .formatters import JSONFormatter, HumanReadableFormatter

__all__ = [
    "ParserLogger",
    "StructuredLogger",
    "build_handlers",
    "build_json_file_handler",
    "build_human_console_handler",
    "JSONFormatter",
    "HumanReadableFormatter",
]
