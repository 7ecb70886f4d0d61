"""Command-line interface for Moodflix."""

from moodflix.cli.typer_app import app

__all__ = ["app"]
