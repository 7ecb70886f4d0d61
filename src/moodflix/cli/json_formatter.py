"""JSON envelope written by every Moodflix command when ``--json`` is given.

    {"command", "success", "data", "errors", "warnings", "timestamp", "version"}

Pydantic models and paths inside ``data`` are encoded directly, so handlers
can hand over their results without dumping them first.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import orjson
from pydantic import BaseModel

from moodflix.shared.constants import CLIDefaults

ENVELOPE_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2


def _encode_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def encode_envelope(
    command: str,
    *,
    success: bool = True,
    data: Any | None = None,
    errors: Sequence[str] = (),
    warnings: Sequence[str] = (),
) -> bytes:
    """Encode the result of one command run.

    Args:
        command: Command name, e.g. ``search`` or ``cache list``
        success: Outcome of the command; forced to False when errors are given
        data: Command payload
        errors: User-visible error messages
        warnings: Non-fatal notices such as an empty result list

    Returns:
        Indented JSON with sorted keys
    """
    envelope = {
        "command": command,
        "success": success and not errors,
        "data": data,
        "errors": list(errors),
        "warnings": list(warnings),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": CLIDefaults.VERSION,
    }
    return orjson.dumps(envelope, default=_encode_value, option=ENVELOPE_OPTIONS)


def write_envelope(payload: bytes) -> None:
    """Write an encoded envelope to stdout followed by a newline."""
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.write(b"\n")
    sys.stdout.buffer.flush()
