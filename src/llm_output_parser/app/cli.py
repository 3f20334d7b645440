import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
from dotenv import load_dotenv

from .config import AppConfig
from .main import create_container
from ..core.domain.prompt import (
    BOOLEAN_FOOTER,
    MESSAGE_COMPLETION_FOOTER,
    POST_ACTION_RESPONSE_FOOTER,
    SHOULD_RESPOND_FOOTER,
    STRING_ARRAY_FOOTER,
    compose_prompt,
)
from ..core.services import (
    clean_json_response,
    extract_attributes,
    normalize_json_string,
    parse_action_response,
    parse_boolean,
    parse_should_respond,
    truncate_to_complete_sentence,
)

load_dotenv()

app = typer.Typer(add_completion=False, no_args_is_help=True)

TEXT_ARG = typer.Argument(None, help="Text to parse. Omit or pass '-' to read stdin.")
FILE_OPT = typer.Option(None, "--file", "-f", help="Read the text from a file instead")
INDENT_OPT = typer.Option(None, "--indent", help="Indent JSON output")

FOOTERS = {
    "object": MESSAGE_COMPLETION_FOOTER,
    "array": STRING_ARRAY_FOOTER,
    "respond": SHOULD_RESPOND_FOOTER,
    "boolean": BOOLEAN_FOOTER,
    "actions": POST_ACTION_RESPONSE_FOOTER,
}


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Diagnostic log level", case_sensitive=False),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="JSONL diagnostics file name inside the logs directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print extraction diagnostics to stderr"),
):
    """Recover structured data from free-form LLM output."""
    overrides: dict[str, Any] = {}
    if log_level:
        overrides["level"] = log_level.upper()
    if log_file:
        overrides["log_file"] = log_file
    if verbose:
        overrides["console_output"] = True
    ctx.obj = overrides


def _load_config(ctx: typer.Context) -> AppConfig:
    config = AppConfig()
    overrides = ctx.obj or {}
    if overrides:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update=overrides)}
        )
    return config


def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: cannot read {file}: {e}", err=True)
            raise typer.Exit(code=2)
    if text is None or text == "-":
        return sys.stdin.read()
    return text


def _echo_json(value: Any, indent: Optional[int]) -> None:
    typer.echo(json.dumps(value, ensure_ascii=False, indent=indent))


def _run_extraction(ctx: typer.Context, text: str, *, array: bool, indent: Optional[int], show_provenance: bool) -> None:
    container = create_container(_load_config(ctx))
    try:
        extractor = container.json_extractor()
        hit = extractor.extract_array(text) if array else extractor.extract_object(text)
    finally:
        container.shutdown_resources()

    if hit is None:
        typer.echo("null")
        raise typer.Exit(code=1)

    if show_provenance:
        _echo_json({"provenance": hit.provenance.value, "value": hit.value}, indent)
    else:
        _echo_json(hit.value, indent)


@app.command(name="object")
def object_command(
    ctx: typer.Context,
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
    indent: Optional[int] = INDENT_OPT,
    show_provenance: bool = typer.Option(False, "--provenance", help="Wrap output with the stage that produced it"),
):
    """Extract a JSON object (markdown block, raw braces, or salvaged attributes)."""
    _run_extraction(ctx, _read_text(text, file), array=False, indent=indent, show_provenance=show_provenance)


@app.command(name="array")
def array_command(
    ctx: typer.Context,
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
    indent: Optional[int] = INDENT_OPT,
    show_provenance: bool = typer.Option(False, "--provenance", help="Wrap output with the stage that produced it"),
):
    """Extract a non-empty JSON array."""
    _run_extraction(ctx, _read_text(text, file), array=True, indent=indent, show_provenance=show_provenance)


@app.command()
def attributes(
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
    names: Optional[List[str]] = typer.Option(None, "--name", "-n", help="Attribute to extract (repeatable)"),
    indent: Optional[int] = INDENT_OPT,
):
    """Salvage "key": "value" pairs with pattern matching."""
    result = extract_attributes(_read_text(text, file), names)
    _echo_json(result, indent)
    if not result:
        raise typer.Exit(code=1)


@app.command()
def clean(
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
):
    """Print the bracketed JSON found in the text, if it is valid."""
    result = clean_json_response(_read_text(text, file))
    if not result:
        raise typer.Exit(code=1)
    typer.echo(result)


@app.command()
def normalize(
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
):
    """Apply quote and bareword repairs to quasi-JSON."""
    typer.echo(normalize_json_string(_read_text(text, file)))


@app.command()
def respond(
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
):
    """Classify text as RESPOND, IGNORE or STOP."""
    token = parse_should_respond(_read_text(text, file))
    if token is None:
        typer.echo("null")
        raise typer.Exit(code=1)
    typer.echo(token.value)


@app.command()
def boolean(
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
):
    """Classify a yes/no style answer."""
    value = parse_boolean(_read_text(text, file))
    _echo_json(value, None)
    if value is None:
        raise typer.Exit(code=1)


@app.command()
def actions(
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
    indent: Optional[int] = INDENT_OPT,
):
    """Detect [LIKE], [RETWEET], [QUOTE] and [REPLY] flags."""
    _echo_json(parse_action_response(_read_text(text, file)).to_dict(), indent)


@app.command()
def truncate(
    ctx: typer.Context,
    text: Optional[str] = TEXT_ARG,
    file: Optional[Path] = FILE_OPT,
    max_length: Optional[int] = typer.Option(None, "--max-length", "-m", help="Maximum length (defaults to config)"),
):
    """Shorten text, preferring a complete sentence."""
    limit = max_length if max_length is not None else _load_config(ctx).truncation.max_length
    typer.echo(truncate_to_complete_sentence(_read_text(text, file), limit))


@app.command()
def footer(
    kind: str = typer.Argument(..., help="One of: object, array, respond, boolean, actions"),
    agent_name: Optional[str] = typer.Option(None, "--agent-name", help="Fills {{agentName}} in the footer"),
):
    """Print the response-format instructions matching a parser command."""
    template = FOOTERS.get(kind.lower())
    if template is None:
        typer.echo(f"Error: unknown footer '{kind}'. Choose from: {', '.join(FOOTERS)}", err=True)
        raise typer.Exit(code=2)
    values = {"agentName": agent_name} if agent_name else {}
    typer.echo(compose_prompt(template, **values))
