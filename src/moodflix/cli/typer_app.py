"""
Moodflix Typer CLI Application

Terminal front end for the mood recommendation service: one-shot commands
for searching, showing movie details and managing the page cache, plus an
interactive browse session.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from moodflix.cli.browse_handler import handle_browse_command
from moodflix.cli.cache_handler import handle_cache_clear_command, handle_cache_list_command
from moodflix.cli.common.context import CliContext, LogLevel, set_cli_context
from moodflix.cli.common.error_handler import handle_cli_error
from moodflix.cli.common.options import (
    config_option,
    json_output_option,
    log_level_option,
    verbose_option,
    version_option,
)
from moodflix.cli.health_handler import handle_health_command
from moodflix.cli.movie_handler import handle_movie_command
from moodflix.cli.search_handler import handle_search_command
from moodflix.config import load_settings
from moodflix.shared.constants import CLICommands, CLIDefaults, CLIHelp
from moodflix.shared.logging import setup_structured_logger

__version__ = CLIDefaults.VERSION


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def main_callback(
    verbose: int,
    log_level: LogLevel,
    json_output: bool,
    config: Path | None,
    version: bool,
) -> None:
    """
    Process the common options before any command runs.

    Sets the CLI context, loads settings (TOML file and environment) and
    configures logging.
    """
    if version:
        version_callback(value=True)

    context = CliContext(
        verbose=verbose,
        log_level=log_level,
        json_output=json_output,
        config_path=config,
    )
    set_cli_context(context)

    settings = load_settings(config)
    level = context.get_effective_log_level()
    if not verbose and log_level is LogLevel.WARNING:
        level = settings.logging.level
    setup_structured_logger(
        level=level,
        log_file=settings.logging.file or None,
        use_rich_console=settings.logging.console_output,
    )


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
    invoke_without_command=True,
)

cache_app = typer.Typer(help=CLIHelp.CACHE_HELP, no_args_is_help=True)
app.add_typer(cache_app, name=CLICommands.CACHE)


@app.callback()
def main(
    verbose: Annotated[int, verbose_option] = 0,
    log_level: Annotated[LogLevel, log_level_option] = LogLevel.WARNING,
    json_output: Annotated[bool, json_output_option] = False,
    config: Annotated[Path | None, config_option] = None,
    version: Annotated[bool, version_option] = False,
) -> None:
    """Main CLI callback with error handling."""
    try:
        main_callback(verbose, log_level, json_output, config, version)
    except typer.Exit:
        raise
    except Exception as e:
        exit_code = handle_cli_error(e, "main-callback", json_output=json_output)
        raise typer.Exit(exit_code) from e


def _exit(code: int) -> None:
    if code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(code)


@app.command(CLICommands.HEALTH, help=CLIHelp.HEALTH_HELP)
def health_command_typer() -> None:
    """
    Check whether the recommendation service is reachable.

    Examples:
        moodflix health
        moodflix --json health
    """
    _exit(handle_health_command())


@app.command(CLICommands.SEARCH, help=CLIHelp.SEARCH_HELP)
def search_command_typer(
    mood: str = typer.Argument(..., help=CLIHelp.SEARCH_MOOD_HELP),
    pages: int = typer.Option(1, "--pages", "-p", min=1, help=CLIHelp.SEARCH_PAGES_HELP),
) -> None:
    """
    Search movies for a mood.

    Examples:
        moodflix search happy
        moodflix search "rainy sunday" --pages 3
    """
    _exit(handle_search_command(mood, pages))


@app.command(CLICommands.MOVIE, help=CLIHelp.MOVIE_HELP)
def movie_command_typer(
    movie_id: str = typer.Argument(..., metavar="ID", help=CLIHelp.MOVIE_ID_HELP),
    mood: str | None = typer.Option(None, "--mood", "-m", help=CLIHelp.MOVIE_MOOD_HELP),
) -> None:
    """
    Show full details for one movie.

    Examples:
        moodflix movie 550 --mood happy
    """
    _exit(handle_movie_command(movie_id, mood))


@app.command(CLICommands.BROWSE, help=CLIHelp.BROWSE_HELP)
def browse_command_typer(
    mood: str = typer.Argument("", help=CLIHelp.SEARCH_MOOD_HELP),
) -> None:
    """
    Start an interactive browse session.

    Without a mood the last searched mood is used.
    """
    _exit(handle_browse_command(mood))


@cache_app.command(CLICommands.CACHE_LIST, help=CLIHelp.CACHE_LIST_HELP)
def cache_list_command_typer() -> None:
    _exit(handle_cache_list_command())


@cache_app.command(CLICommands.CACHE_CLEAR, help=CLIHelp.CACHE_CLEAR_HELP)
def cache_clear_command_typer() -> None:
    _exit(handle_cache_clear_command())


if __name__ == "__main__":
    app()
