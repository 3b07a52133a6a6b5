"""Typer application for the what3words command line interface."""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

import typer
from pydantic import SecretStr, ValidationError

from w3w.config import LogFormat, OutputFormat, Settings, configure_logging
from w3w.geocoding import Client, W3WError
from w3w.models import GeoCoords
from w3w.models.base import W3WModel

# Get logger
logger = logging.getLogger(__name__)

app = typer.Typer(help="CLI for the what3words public API.", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None, "--api-key", "-k", help="Your what3words API key. [env: W3W_API_KEY]", show_default=False
    ),
    output_format: Optional[OutputFormat] = typer.Option(
        None, "--output-format", "-o", help="Output format written to stdout. [default: plain]"
    ),
    log_format: Optional[LogFormat] = typer.Option(
        None, "--log-format", help="Format of the log lines written to stderr. [default: full]"
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="what3words API endpoint.", show_default=False
    ),
) -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        raise typer.BadParameter(f"invalid W3W_* environment setting: {e}") from e
    overrides = {
        "api_key": SecretStr(api_key) if api_key is not None else None,
        "output_format": output_format,
        "log_format": log_format,
        "base_url": base_url,
    }
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    configure_logging(settings.log_format, settings.log_level)
    logger.info("Starting w3w")
    ctx.obj = settings


def _make_client(settings: Settings) -> Client:
    if settings.api_key is None:
        raise typer.BadParameter("an API key is required", param_hint="'--api-key' / W3W_API_KEY")
    return Client(settings.api_key.get_secret_value(), base_url=settings.base_url, timeout=settings.timeout)


@contextmanager
def _abort_on_error() -> Iterator[None]:
    # Any failure ends the whole run, remaining input is not processed
    try:
        yield
    except W3WError as e:
        logger.error(f"Request failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _read_lines(file: typer.FileText) -> Iterator[Tuple[int, str]]:
    logger.info(f"Reading from {file.name}")
    for number, line in enumerate(file, start=1):
        line = line.strip()
        if line:
            yield number, line


def _print(value: W3WModel, output_format: OutputFormat) -> None:
    if output_format == OutputFormat.json:
        typer.echo(value.to_json())
    else:
        typer.echo(str(value))


@app.command("available-languages")
def available_languages(ctx: typer.Context) -> None:
    """List all available languages for three word addresses."""
    settings: Settings = ctx.obj
    client = _make_client(settings)
    with _abort_on_error():
        languages = client.available_languages()
    _print(languages, settings.output_format)
    logger.info("Success, exiting")


@app.command("to-coords")
def to_coords(
    ctx: typer.Context,
    file: typer.FileText = typer.Argument("-", help="File to read three word addresses from, '-' for stdin."),
) -> None:
    """Convert three word addresses to geographic coordinates."""
    settings: Settings = ctx.obj
    client = _make_client(settings)
    for _, words in _read_lines(file):
        with _abort_on_error():
            coords = client.convert_to_coordinates(words)
        logger.debug(f"{words} -> {coords}")
        _print(coords, settings.output_format)
    logger.info("Success, exiting")


@app.command("to-3wa")
def to_3wa(
    ctx: typer.Context,
    file: typer.FileText = typer.Argument("-", help="File to read 'lat,lng' coordinates from, '-' for stdin."),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language of the returned words."),
) -> None:
    """Convert geographic coordinates to three word addresses."""
    settings: Settings = ctx.obj
    client = _make_client(settings)
    for number, line in _read_lines(file):
        try:
            coordinates = GeoCoords.parse(line)
        except ValueError as e:
            raise typer.BadParameter(f"line {number}: {e}", param_hint="FILE") from e
        with _abort_on_error():
            coords = client.convert_to_3wa(coordinates, language=language)
        logger.debug(f"{coordinates} -> {coords.words}")
        _print(coords, settings.output_format)
    logger.info("Success, exiting")
