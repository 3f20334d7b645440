from __future__ import annotations

import logging
from logging import Handler
from pathlib import Path
from typing import Any

from dependency_injector.resources import Resource

from .handlers import build_handlers


class StructuredLogger:
    """LoggerPort implementation over a stdlib logger.

    Keyword arguments are forwarded as ``extra`` so formatters can emit them
    as structured fields.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, **kwargs: Any) -> None:
        if kwargs:
            self._logger.debug(message, extra=kwargs)
        else:
            self._logger.debug(message)

    def info(self, message: str, **kwargs: Any) -> None:
        if kwargs:
            self._logger.info(message, extra=kwargs)
        else:
            self._logger.info(message)

    def warning(self, message: str, **kwargs: Any) -> None:
        if kwargs:
            self._logger.warning(message, extra=kwargs)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        if kwargs:
            self._logger.error(message, extra=kwargs, exc_info=exc_info)
        else:
            self._logger.error(message, exc_info=exc_info)


class ParserLogger(Resource):
    """Configures the package logger for a CLI run or an application container.

    While the resource is alive the logger writes only to the handlers built
    from config (an optional JSONL file and an optional human-readable
    console). Whatever the logger had before ``init`` is restored by
    ``shutdown``.
    """

    def init(
        self,
        *,
        logs_dir: Path,
        log_file: str | None = None,
        logger_name: str = "llm_output_parser",
        console_output: bool = False,
        level: str = "WARNING",
    ) -> StructuredLogger:
        """Initialize handlers.

        Args:
            logs_dir: Directory holding the JSONL diagnostics file
            log_file: File name inside logs_dir; no file handler when None
            logger_name: Logger name
            console_output: Whether to enable console output
            level: Logging level (DEBUG, INFO, WARNING, ERROR); unknown names mean WARNING

        Returns:
            StructuredLogger bound to the configured logger
        """
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.WARNING

        self._logger = logging.getLogger(logger_name)
        self._saved_handlers: list[Handler] = list(self._logger.handlers)
        self._saved_level = self._logger.level
        self._saved_propagate = self._logger.propagate

        for handler in self._saved_handlers:
            self._logger.removeHandler(handler)
        self._logger.setLevel(numeric_level)
        self._logger.propagate = False

        self._handlers = build_handlers(
            logs_dir=logs_dir,
            log_file=log_file,
            console_output=console_output,
            level=numeric_level,
        )
        for handler in self._handlers:
            self._logger.addHandler(handler)

        return StructuredLogger(self._logger)

    def shutdown(self, resource: StructuredLogger) -> None:
        """Close the handlers this resource attached and restore the logger."""
        for handler in self._handlers:
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
        self._handlers = []

        for handler in self._saved_handlers:
            self._logger.addHandler(handler)
        self._logger.setLevel(self._saved_level)
        self._logger.propagate = self._saved_propagate
