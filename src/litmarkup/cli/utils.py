"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, NoReturn

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler

from litmarkup.config import Settings, get_settings
from litmarkup.exceptions import LitMarkupError

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the litmarkup CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (LITMARKUP_DEBUG=1): DEBUG level - cache misses, parse timings
    """
    debug = bool(os.environ.get("LITMARKUP_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("litmarkup")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Report an error and exit."""
    if isinstance(error, (LitMarkupError, FileNotFoundError, ValueError)):
        exit_with_error(str(error))
    # Unexpected error
    typer.echo(f"Unexpected error: {error}", err=True)
    sys.exit(1)


def load_settings(path: Path | None) -> Settings:
    """Settings from an optional YAML file, else from the environment."""
    if path is None:
        return get_settings()
    return Settings.load(path)


def load_values(path: Path | None) -> list[Any]:
    """Load substitution values from a YAML list."""
    if path is None:
        return []
    if not path.exists():
        raise FileNotFoundError(f"Values file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Values file {path} must contain a YAML list")
    return data
