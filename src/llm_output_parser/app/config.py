from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs
from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "llm_output_parser"


def _default_home() -> Path:
    """Get default home directory using platformdirs."""
    return Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_cache_dir)


class DirectoryConfig(BaseModel):
    """Directory configuration with computed paths."""

    home: Path = Field(
        default_factory=_default_home,
        description="Base directory for llm_output_parser data",
    )

    @computed_field
    @property
    def logs_dir(self) -> Path:
        """Directory for JSONL diagnostic logs (not created until a log file is written)."""
        return self.home / "logs"


class LoggingConfig(BaseModel):
    """Diagnostic logging configuration."""

    level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    logger_name: str = Field(
        default=APP_NAME,
        description="Name of the logger that receives extraction diagnostics",
    )

    console_output: bool = Field(
        default=False,
        description="Emit human-readable diagnostics on stderr",
    )

    log_file: str | None = Field(
        default=None,
        description="JSONL file name inside logs_dir; disabled when unset",
    )


class ExtractionConfig(BaseModel):
    """JSON extraction settings."""

    snippet_chars: int = Field(
        default=100,
        ge=0,
        description="Maximum characters of failed content included in diagnostics",
    )


class TruncationConfig(BaseModel):
    """Sentence truncation settings."""

    max_length: int = Field(
        default=280,
        description="Default maximum length used by the truncate command",
    )


class AppConfig(BaseSettings):
    """Root application configuration.

    All configuration is loaded from environment variables with LLM_OUTPUT_PARSER_ prefix.
    Use double underscore for nested config: LLM_OUTPUT_PARSER_LOGGING__LEVEL

    Example env vars:
        export LLM_OUTPUT_PARSER_LOGGING__LEVEL=DEBUG
        export LLM_OUTPUT_PARSER_LOGGING__LOG_FILE=extraction.jsonl
        export LLM_OUTPUT_PARSER_EXTRACTION__SNIPPET_CHARS=200
        export LLM_OUTPUT_PARSER_TRUNCATION__MAX_LENGTH=280
        export LLM_OUTPUT_PARSER_DIRECTORIES__HOME=/custom/path
    """

    model_config = SettingsConfigDict(
        env_prefix="LLM_OUTPUT_PARSER_",
        env_nested_delimiter="__",
        frozen=True,
        extra="forbid",
    )

    directories: DirectoryConfig = Field(default_factory=DirectoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    truncation: TruncationConfig = Field(default_factory=TruncationConfig)
