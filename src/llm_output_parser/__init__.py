from .app.main import (
    clean_json_response,
    create_container,
    extract_attributes,
    normalize_json_string,
    parse_action_response,
    parse_boolean,
    parse_json_array,
    parse_json_object,
    parse_should_respond,
    truncate_to_complete_sentence,
)
from .core.domain.models import ActionResponse, Provenance, RespondToken
from .core.domain.prompt import (
    BOOLEAN_FOOTER,
    MESSAGE_COMPLETION_FOOTER,
    POST_ACTION_RESPONSE_FOOTER,
    SHOULD_RESPOND_FOOTER,
    STRING_ARRAY_FOOTER,
    compose_prompt,
)
from .core.services import JsonExtractor

__all__ = [
    "clean_json_response",
    "create_container",
    "extract_attributes",
    "normalize_json_string",
    "parse_action_response",
    "parse_boolean",
    "parse_json_array",
    "parse_json_object",
    "parse_should_respond",
    "truncate_to_complete_sentence",
    "ActionResponse",
    "Provenance",
    "RespondToken",
    "JsonExtractor",
    "compose_prompt",
    "BOOLEAN_FOOTER",
    "MESSAGE_COMPLETION_FOOTER",
    "POST_ACTION_RESPONSE_FOOTER",
    "SHOULD_RESPOND_FOOTER",
    "STRING_ARRAY_FOOTER",
]

# stdlib logging defaults: attach NullHandler to prevent 'No handler' warnings
import logging
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
