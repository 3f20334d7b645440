from __future__ import annotations

import re


MESSAGE_COMPLETION_FOOTER = (
    "\nResponse format should be formatted in a valid JSON block like this:\n"
    "```json\n"
    '{ "user": "{{agentName}}", "text": "<string>", "action": "<string>" }\n'
    "```\n"
    "\n"
    'The "action" field should be one of the options in [Available Actions] and the "text" field '
    "should be the response you want to send.\n"
)

SHOULD_RESPOND_FOOTER = (
    "The available options are [RESPOND], [IGNORE], or [STOP]. Choose the most appropriate option.\n"
    "If {{agentName}} is talking too much, you can choose [IGNORE]\n"
    "\n"
    "Your response must include one of the options."
)

BOOLEAN_FOOTER = "Respond with only a YES or a NO."

STRING_ARRAY_FOOTER = (
    "Respond with a JSON array containing the values in a valid JSON block formatted for markdown "
    "with this structure:\n"
    "```json\n"
    "[\n"
    "  'value',\n"
    "  'value'\n"
    "]\n"
    "```\n"
    "\n"
    "Your response must include the valid JSON block."
)

POST_ACTION_RESPONSE_FOOTER = (
    "Choose any combination of [LIKE], [RETWEET], [QUOTE], and [REPLY] that are appropriate. "
    "Each action must be on its own line. Your response must only include the chosen actions."
)

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def compose_prompt(template: str, **values: object) -> str:
    """Fill ``{{name}}`` placeholders in a prompt template.

    Placeholders without a matching keyword are left untouched so that a
    later pass (or the caller's own templating) can still fill them.
    """

    def _sub(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_sub, template)
