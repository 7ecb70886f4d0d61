"""Entry point for ``python -m moodflix``."""

from moodflix.cli.typer_app import app

if __name__ == "__main__":
    app()
