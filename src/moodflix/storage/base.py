"""
Storage port.

Key/value string storage in the shape of web storage. The page cache, the
selected-mood preference and the one-shot navigation snapshot all go through
this port, so the services never touch a concrete backend. Implementations:
in-memory (tests, interactive sessions), JSON file (persistent).
"""

from typing import Iterator, Protocol


class StoragePort(Protocol):
    """Protocol for string key/value storage."""

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete key. Missing keys are ignored."""
        ...

    def keys(self) -> Iterator[str]:
        """Iterate over stored keys."""
        ...
