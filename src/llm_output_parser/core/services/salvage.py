from __future__ import annotations

import re
from typing import Iterable, Optional

from ..domain.models import AttributeMap


# "key": "value  (closing quote optional so truncated output still yields a value)
_ATTRIBUTE_PATTERN = re.compile(r'"([^"]+)"\s*:\s*"([^"]*)"?')


def extract_attributes(text: str, names: Optional[Iterable[str]] = None) -> AttributeMap:
    """Recover ``"key": "value"`` pairs by pattern matching, bypassing JSON parsing.

    Args:
        text: Raw or partially cleaned model output
        names: Attribute names to look for (case-insensitive). When omitted or
            empty, every key/value pair found is returned.

    Returns:
        Mapping of attribute name to string value. Names that were asked for
        but not found are omitted. Never None.
    """
    if not isinstance(text, str):
        return {}

    text = text.strip()
    attributes: AttributeMap = {}
    wanted = list(names) if names else []

    if not wanted:
        for match in _ATTRIBUTE_PATTERN.finditer(text):
            attributes[match.group(1)] = match.group(2)
        return attributes

    for name in wanted:
        pattern = re.compile(rf'"{re.escape(name)}"\s*:\s*"([^"]*)"?', re.IGNORECASE)
        match = pattern.search(text)
        if match:
            attributes[name] = match.group(1)
    return attributes
