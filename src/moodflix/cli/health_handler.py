"""Health command handler for Moodflix CLI."""

from __future__ import annotations

import asyncio
import logging

from rich.console import Console

from moodflix.cli.common.context import get_cli_context
from moodflix.cli.common.error_handler import handle_cli_errors
from moodflix.cli.common.runtime import build_runtime
from moodflix.cli.json_formatter import encode_envelope, write_envelope
from moodflix.config import Settings, get_config
from moodflix.shared.constants import CLICommands, CLIDefaults, CLIMessages
from moodflix.storage import InMemoryStorage

logger = logging.getLogger(__name__)


async def check_service(settings: Settings) -> bool:
    async with build_runtime(settings, local_storage=InMemoryStorage()) as runtime:
        return await runtime.health.check()


@handle_cli_errors(CLICommands.HEALTH)
def handle_health_command(*, console: Console | None = None) -> int:
    """Handle the health command.

    Returns:
        0 when the service is up, the service-error exit code otherwise
    """
    console = console or Console()
    settings = get_config()
    healthy = asyncio.run(check_service(settings))
    url = settings.api.base_url

    if get_cli_context().is_json_output_enabled():
        write_envelope(
            encode_envelope(
                CLICommands.HEALTH,
                success=healthy,
                data={"healthy": healthy, "base_url": url},
            )
        )
    elif healthy:
        console.print(CLIMessages.SERVICE_HEALTHY.format(url=url))
    else:
        console.print(CLIMessages.SERVICE_UNHEALTHY.format(url=url))

    return CLIDefaults.EXIT_SUCCESS if healthy else CLIDefaults.EXIT_SERVICE_ERROR
