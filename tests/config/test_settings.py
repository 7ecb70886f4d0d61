"""Tests for settings loading from defaults, environment and TOML files."""

from __future__ import annotations

from pathlib import Path

import pytest

from moodflix.config import Settings, get_config, load_settings, reset_config
from moodflix.shared.errors import ApplicationError, ErrorCode


class TestDefaults:
    def test_defaults(self):
        settings = Settings()

        assert settings.api.base_url == "http://127.0.0.1:8000"
        assert settings.api.timeout_ms == 8000
        assert settings.api.timeout_seconds == 8.0
        assert settings.api.image_base_url == "https://image.tmdb.org/t/p"
        assert settings.storage.local_path.name == "local.json"
        assert settings.storage.session_path.name == "session.json"
        assert settings.logging.level == "WARNING"

    def test_storage_directory_expands_user(self):
        settings = Settings()

        assert "~" not in str(settings.storage.local_path)


class TestEnvironment:
    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("MOODFLIX_API__BASE_URL", "http://recs.internal:9000/")
        monkeypatch.setenv("MOODFLIX_API__TIMEOUT_MS", "2500")

        settings = Settings()

        assert settings.api.base_url == "http://recs.internal:9000"
        assert settings.api.timeout_ms == 2500

    def test_rejects_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("MOODFLIX_API__TIMEOUT_MS", "0")

        with pytest.raises(ValueError):
            Settings()


class TestTomlFile:
    def test_round_trip(self, temp_dir: Path):
        path = temp_dir / "moodflix.toml"
        original = Settings()
        original.api.base_url = "http://example:8000"
        original.storage.directory = temp_dir / "store"

        original.to_toml_file(path)
        loaded = Settings.from_toml_file(path)

        assert loaded.api.base_url == "http://example:8000"
        assert loaded.storage.local_path == temp_dir / "store" / "local.json"

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(ApplicationError) as exc_info:
            Settings.from_toml_file(temp_dir / "missing.toml")

        assert exc_info.value.code == ErrorCode.CONFIG_MISSING

    def test_invalid_toml(self, temp_dir: Path):
        path = temp_dir / "broken.toml"
        path.write_text("[api\nbase_url = ", encoding="utf-8")

        with pytest.raises(ApplicationError) as exc_info:
            Settings.from_toml_file(path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID


class TestGlobalConfig:
    def test_load_settings_installs_global(self, temp_dir: Path):
        path = temp_dir / "moodflix.toml"
        path.write_text('[api]\nbase_url = "http://from-file:1"\n', encoding="utf-8")

        load_settings(path)

        assert get_config().api.base_url == "http://from-file:1"

    def test_reset_config(self):
        first = get_config()
        reset_config()

        assert get_config() is not first
