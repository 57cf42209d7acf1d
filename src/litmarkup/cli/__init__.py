"""Command-line interface"""

from litmarkup.cli.main import app, typer_app

__all__ = ["app", "typer_app"]
