"""
Reusable Typer Options Module

Common options shared by the main callback: verbosity, log level, JSON
output, configuration file and version.
"""

from __future__ import annotations

import typer

from moodflix.cli.common.context import LogLevel
from moodflix.shared.constants import CLIHelp

# Verbose option - count-based for multiple -v flags
verbose_option = typer.Option(
    "--verbose",
    "-v",
    count=True,
    help="Enable verbose output (equivalent to --log-level DEBUG).",
)


log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: WARNING.",
)


json_output_option = typer.Option(
    "--json",
    help="Enable machine-readable JSON output instead of human-readable format.",
)


config_option = typer.Option(
    "--config",
    "-c",
    help=CLIHelp.CONFIG_HELP,
    dir_okay=False,
)


# Version option - for main app only
version_option = typer.Option(
    "--version",
    "-V",
    help="Show version information and exit.",
    is_eager=True,
)
