"""
Tests for Configuration Module

Tests for ghostwriter/core/config.py
"""

import json

import pytest

from ghostwriter.core.config import (
    ClientSettings,
    load_config,
    get_settings,
    set_settings,
)
from ghostwriter.core.exceptions import InvalidConfigError


class TestClientSettings:
    """Tests for ClientSettings class."""

    def test_defaults(self, monkeypatch):
        """Test default settings values."""
        monkeypatch.delenv("GHOSTWRITER_BASE_URL", raising=False)
        settings = ClientSettings(_env_file=None)

        assert settings.base_url == "http://localhost:8080"
        assert settings.min_input_chars == 10
        assert settings.allowed_extensions == ["pdf", "txt"]
        assert settings.toast_duration == 3.0
        assert settings.discard_stale_previews is False
        assert settings.verbose_logging is False

    def test_env_override(self, monkeypatch):
        """Test GHOSTWRITER_ prefixed environment variables."""
        monkeypatch.setenv("GHOSTWRITER_BASE_URL", "http://example.org:9000/")
        monkeypatch.setenv("GHOSTWRITER_DISCARD_STALE_PREVIEWS", "true")

        settings = ClientSettings(_env_file=None)

        assert settings.base_url == "http://example.org:9000"
        assert settings.discard_stale_previews is True

    def test_extensions_normalized(self):
        """Test extensions lose dots and case."""
        settings = ClientSettings(allowed_extensions=[".PDF", "Txt", " "])

        assert settings.allowed_extensions == ["pdf", "txt"]


class TestLoadConfig:
    """Tests for config loading."""

    def test_load_config_from_file(self, temp_dir):
        """Test loading config from JSON file."""
        config_path = temp_dir / "ghostwriter.json"
        config_path.write_text(json.dumps({"base_url": "http://svc:8080", "request_timeout": 5}))

        settings = load_config(config_path)

        assert settings.base_url == "http://svc:8080"
        assert settings.request_timeout == 5

    def test_load_config_missing_file(self, temp_dir):
        """Test loading config from non-existent file returns defaults."""
        settings = load_config(temp_dir / "nonexistent.json")

        assert settings.min_input_chars == 10

    def test_load_config_none(self):
        """Test loading without a path."""
        assert isinstance(load_config(None), ClientSettings)

    def test_load_config_invalid_json(self, temp_dir):
        """Test invalid JSON raises InvalidConfigError."""
        config_path = temp_dir / "broken.json"
        config_path.write_text("{not json")

        with pytest.raises(InvalidConfigError):
            load_config(config_path)

    def test_load_config_not_an_object(self, temp_dir):
        config_path = temp_dir / "list.json"
        config_path.write_text("[1, 2]")

        with pytest.raises(InvalidConfigError):
            load_config(config_path)

    def test_load_config_invalid_value(self, temp_dir):
        """Test out-of-range values are reported as configuration errors."""
        config_path = temp_dir / "bad.json"
        config_path.write_text(json.dumps({"request_timeout": -1}))

        with pytest.raises(InvalidConfigError):
            load_config(config_path)


class TestGlobalSettings:
    """Tests for the process-wide settings instance."""

    def test_set_and_get(self):
        custom = ClientSettings(base_url="http://custom")
        set_settings(custom)
        try:
            assert get_settings() is custom
        finally:
            set_settings(None)

    def test_get_creates_default(self):
        set_settings(None)
        first = get_settings()

        assert get_settings() is first
        set_settings(None)
