from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional

from .config import AppConfig
from ..core.domain.models import ActionResponse, AttributeMap, RespondToken
from ..core.services import JsonExtractor
from ..core.services import locator, normalizer, salvage, tokens, truncation
from ..infra.logging import StructuredLogger

if TYPE_CHECKING:
    from .container import Container


_default_extractor = JsonExtractor(
    logger=StructuredLogger(logging.getLogger("llm_output_parser")),
)


def create_container(config: AppConfig | None = None) -> Container:
    """Create and initialize a container.

    Args:
        config: Optional config. If None, loads from environment variables.

    Returns:
        Initialized container instance; call ``shutdown_resources()`` when done
        so log handlers are closed.
    """
    from .container import Container

    container = Container()

    if config is None:
        config = AppConfig()

    container.config.from_pydantic(config)
    container.init_resources()

    return container


def _as_text(text: Any) -> str:
    return text if isinstance(text, str) else ""


def parse_json_object(text: str) -> Optional[Any]:
    """Recover a JSON object (or non-empty array, or salvaged attributes) from text.

    Returns None when nothing usable was found. Never raises.
    """
    return _default_extractor.parse_object(_as_text(text))


def parse_json_array(text: str) -> Optional[list]:
    """Recover a non-empty JSON array from text, or None."""
    return _default_extractor.parse_array(_as_text(text))


def extract_attributes(text: str, names: Optional[Iterable[str]] = None) -> AttributeMap:
    return salvage.extract_attributes(_as_text(text), names)


def clean_json_response(text: str) -> str:
    return locator.clean_json_response(_as_text(text))


def normalize_json_string(text: str) -> str:
    return normalizer.normalize_json_string(_as_text(text))


def parse_should_respond(text: str) -> Optional[RespondToken]:
    return tokens.parse_should_respond(_as_text(text))


def parse_boolean(text: str) -> Optional[bool]:
    return tokens.parse_boolean(_as_text(text))


def parse_action_response(text: str) -> ActionResponse:
    return tokens.parse_action_response(_as_text(text))


def truncate_to_complete_sentence(text: str, max_length: int) -> str:
    return truncation.truncate_to_complete_sentence(_as_text(text), max_length)
