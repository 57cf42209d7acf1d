"""litmarkup CLI Main Entry Point

Render markup files containing [[[n]]] substitution markers.

Usage:
    litmarkup render page.xml --values values.yaml   # Render to text
    litmarkup parse page.xml                         # Print IR as JSON
    litmarkup check page.xml                         # Syntax/name check only
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from litmarkup import __version__
from litmarkup.api import parse_markup_text, render_ir_to_text
from litmarkup.cli.utils import handle_error, load_settings, load_values, setup_logging
from litmarkup.config import Settings
from litmarkup.ir.nodes import IRNode, dump_json

log = logging.getLogger(__name__)

typer_app = typer.Typer(help="Render litmarkup templates from the command line.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"litmarkup {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """litmarkup - tagged-template markup engine."""


def _parse_file(file_path: Path, settings: Settings) -> IRNode:
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    log.info("Parsing %s", file_path)
    return parse_markup_text(file_path.read_text(encoding="utf-8"), settings=settings)


@typer_app.command()
def render(
    file_path: Path = typer.Argument(..., help="Markup file to render."),
    values: Optional[Path] = typer.Option(
        None, "--values", help="YAML list of substitution values."
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Settings YAML file."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render a markup file to text."""
    setup_logging(verbose)
    try:
        settings = load_settings(config)
        ir = _parse_file(file_path, settings)
        substitutions = load_values(values)
        log.info("Rendering with %d substitution value(s)", len(substitutions))
        output = render_ir_to_text(ir, substitutions, settings=settings)
    except Exception as exc:
        handle_error(exc)
    typer.echo(output)


@typer_app.command()
def parse(
    file_path: Path = typer.Argument(..., help="Markup file to parse."),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Settings YAML file."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Print the parsed IR of a markup file as JSON."""
    setup_logging(verbose)
    try:
        ir = _parse_file(file_path, load_settings(config))
    except Exception as exc:
        handle_error(exc)
    typer.echo(dump_json(ir).decode("utf-8"))


@typer_app.command()
def check(
    file_path: Path = typer.Argument(..., help="Markup file to check."),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Settings YAML file."
    ),
) -> None:
    """Check that a markup file parses and its components resolve."""
    setup_logging(False)
    try:
        _parse_file(file_path, load_settings(config))
    except Exception as exc:
        handle_error(exc)
    typer.echo(f"{file_path}: ok")


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
