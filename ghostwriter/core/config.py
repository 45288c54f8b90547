"""
Ghostwriter Configuration Management

Pydantic settings for the client, with an optional JSON file overlay.
Environment variables use the ``GHOSTWRITER_`` prefix and may live in ``.env``.
"""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_MIN_INPUT_CHARS,
    DEFAULT_TOAST_DURATION,
)
from .exceptions import ConfigurationError, InvalidConfigError


class ClientSettings(BaseSettings):
    """Client settings."""

    model_config = SettingsConfigDict(
        env_prefix="GHOSTWRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote service
    base_url: str = Field(default="http://localhost:8080")
    request_timeout: float = Field(default=30.0, gt=0)
    upload_timeout: float = Field(default=60.0, gt=0)

    # Flows
    min_input_chars: int = Field(default=DEFAULT_MIN_INPUT_CHARS, ge=0)
    allowed_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_EXTENSIONS)
    )
    # Off: late preview responses overwrite the modal in arrival order
    discard_stale_previews: bool = Field(default=False)

    # Presentation
    toast_duration: float = Field(default=DEFAULT_TOAST_DURATION, ge=0)

    # Logging
    log_level: str = Field(default="INFO")
    verbose_logging: bool = Field(default=False)

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        return [ext.strip().lstrip(".").lower() for ext in value if ext and ext.strip()]

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_config(config_path: Path = None) -> ClientSettings:
    """
    Load settings, overlaying values from a JSON file.

    Args:
        config_path: Path to a JSON file. If None or missing, env/defaults are used.

    Returns:
        Loaded ClientSettings instance
    """
    if config_path is None:
        return ClientSettings()

    config_path = Path(config_path)
    if not config_path.exists():
        return ClientSettings()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"Invalid JSON in config file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to load config: {e}")

    if not isinstance(data, dict):
        raise InvalidConfigError("Config file must contain a JSON object")

    try:
        return ClientSettings(**data)
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid configuration values: {e}")


# Global settings instance
_settings: Optional[ClientSettings] = None


def get_settings() -> ClientSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = ClientSettings()
    return _settings


def set_settings(settings: Optional[ClientSettings]) -> None:
    """Set (or with None, reset) the global settings instance."""
    global _settings
    _settings = settings
