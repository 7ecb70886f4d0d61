"""Moodflix Settings Configuration Model.

Settings are read from environment variables (prefix ``MOODFLIX_``, nested
with ``__``, e.g. ``MOODFLIX_API__BASE_URL``) and optionally from a TOML file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moodflix.shared.constants import APIConfig, ImageConfig, LogConfig, StorageDefaults
from moodflix.shared.errors import ApplicationError, ErrorCode, ErrorContext, create_config_error

logger = logging.getLogger(__name__)


class APISettings(BaseModel):
    """Recommendation service connection settings."""

    base_url: str = Field(
        default=APIConfig.DEFAULT_BASE_URL,
        description="Base URL of the recommendation service",
    )
    timeout_ms: int = Field(
        default=APIConfig.DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Per-request timeout in milliseconds",
    )
    image_base_url: str = Field(
        default=ImageConfig.DEFAULT_BASE_URL,
        description="Base URL of the image CDN used for posters and backdrops",
    )

    @field_validator("base_url", "image_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


class StorageSettings(BaseModel):
    """Where the persistent page cache and preferences live."""

    directory: Path = Field(
        default=Path(StorageDefaults.DIRECTORY),
        description="Directory holding the storage files",
    )
    local_file: str = Field(
        default=StorageDefaults.LOCAL_FILE,
        description="File name of the long-lived store (page cache, selected mood)",
    )
    session_file: str = Field(
        default=StorageDefaults.SESSION_FILE,
        description="File name of the session store holding the list view snapshot",
    )

    @property
    def local_path(self) -> Path:
        return self.directory.expanduser() / self.local_file

    @property
    def session_path(self) -> Path:
        return self.directory.expanduser() / self.session_file


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default=LogConfig.DEFAULT_LEVEL, description="Logging level")
    file: str = Field(default=LogConfig.DEFAULT_FILE, description="Optional JSON log file")
    console_output: bool = Field(default=True, description="Use the rich console handler")


class Settings(BaseSettings):
    """Top-level settings facade."""

    model_config = SettingsConfigDict(
        env_prefix="MOODFLIX_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    api: APISettings = Field(default_factory=APISettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from a TOML file; environment variables fill in unset keys."""
        file_path = Path(file_path)
        if not file_path.exists():
            raise ApplicationError(
                ErrorCode.CONFIG_MISSING,
                f"Configuration file not found: {file_path}",
                ErrorContext(operation="load_config", additional_data={"path": file_path}),
            )

        try:
            raw_config = toml.load(file_path)
        except toml.TomlDecodeError as e:
            raise create_config_error(
                f"Invalid TOML in {file_path}: {e}",
                config_key=str(file_path),
                original_error=e,
            ) from e
        return cls(**raw_config)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to a TOML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json", exclude_none=True)
        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(config_dict, f)


_config: Settings | None = None


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a file (if given) and install them as the global config."""
    global _config
    _config = Settings.from_toml_file(config_path) if config_path else Settings()
    logger.debug("Settings loaded", extra={"context": {"api": _config.api.base_url}})
    return _config


def get_config() -> Settings:
    """Get the global configuration instance, loading defaults on first use."""
    global _config
    if _config is None:
        _config = Settings()
    return _config


def reset_config() -> None:
    """Forget the global configuration (used by tests)."""
    global _config
    _config = None
