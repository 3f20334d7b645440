from __future__ import annotations

from dependency_injector import containers, providers

from .config import AppConfig
from ..core.services import JsonExtractor
from ..infra.logging import ParserLogger


class Container(containers.DeclarativeContainer):
    """DI container with Pydantic BaseSettings support."""

    config = providers.Configuration(pydantic_settings=[AppConfig()])

    # Logger (Resource: manages handler lifecycle with init/shutdown)
    logger = providers.Resource(
        ParserLogger,
        logs_dir=config.directories.logs_dir,
        log_file=config.logging.log_file,
        logger_name=config.logging.logger_name,
        console_output=config.logging.console_output,
        level=config.logging.level,
    )

    json_extractor = providers.Factory(
        JsonExtractor,
        logger=logger,
        snippet_chars=config.extraction.snippet_chars,
    )
