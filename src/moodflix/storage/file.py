"""JSON file storage backend.

All keys of one store live in a single JSON object on disk, serialized with
orjson. Every operation re-reads the file so that separate CLI invocations
see each other's writes; writes go to a temporary file that replaces the
original so a crash never leaves a half-written store behind.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Iterator

import orjson

from moodflix.shared.errors import ErrorCode, ErrorContext, InfrastructureError
from moodflix.shared.logging import log_operation_error

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """File-backed storage for the page cache and preferences.

    Args:
        path: Location of the JSON file. Parent directories are created on
            first write.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

    def keys(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._read()))

    def clear(self) -> None:
        with self._lock:
            self._write({})

    def _read(self) -> dict[str, str]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as e:
            error = InfrastructureError(
                code=ErrorCode.STORAGE_READ_FAILED,
                message=f"Failed to read storage file: {e!s}",
                context=ErrorContext(
                    operation="storage_read",
                    additional_data={"path": self.path},
                ),
                original_error=e,
            )
            log_operation_error(logger=logger, error=error)
            raise error from e

        if not raw.strip():
            return {}

        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError:
            logger.warning("Storage file %s is corrupted; starting from an empty store", self.path)
            return {}

        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object; ignoring it", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(orjson.dumps(data, option=orjson.OPT_SORT_KEYS))
            os.replace(tmp_path, self.path)
        except OSError as e:
            error = InfrastructureError(
                code=ErrorCode.STORAGE_WRITE_FAILED,
                message=f"Failed to write storage file: {e!s}",
                context=ErrorContext(
                    operation="storage_write",
                    additional_data={"path": self.path, "keys": len(data)},
                ),
                original_error=e,
            )
            log_operation_error(logger=logger, error=error)
            raise error from e
