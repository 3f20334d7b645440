from __future__ import annotations

from typing import Any, Protocol


class LoggerPort(Protocol):
    """Port for structured diagnostic logging.

    Keyword fields are attached to the record as structured data.
    Implementations handle formatting and destinations.
    """

    def debug(self, message: str, **fields: Any) -> None:
        ...

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, exc_info: bool = False, **fields: Any) -> None:
        ...
