"""Configuration service for StudyMate CLI.

ConfigService is the single place that reads and writes ``config.json``:

- Loading the config, creating defaults on first run
- Saving with owner-only permissions
- Dotted-key get/set used by the ``config`` command group
- Resetting to defaults
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from studymate_cli.models.config_models import AppConfig
from studymate_cli.models.exceptions import ConfigError


class ConfigService:
    """Loads, saves and edits the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("studymate_cli"))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get_value(self, key: str) -> Any:
        """Get a configuration value by dot-separated key (e.g. ``chat.reply_delay_ms``)."""
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise ConfigError(f"Configuration key '{key}' not found")
            value = getattr(value, part)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def set_value(self, key: str, value: Any) -> AppConfig:
        """Set a configuration value by dot-separated key and save."""
        self.get_value(key)  # validates the key path

        data = self.config.model_dump()
        parts = key.split(".")
        current = data
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e

        self.save_config()
        return self._config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the process-wide ConfigService."""
    return ConfigService()
