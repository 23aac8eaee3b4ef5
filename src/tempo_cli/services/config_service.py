"""Configuration service for tempo.

ConfigService is the single source of truth for configuration. It handles:

- Loading and saving config.json
- Creating the default config on first run
- Dotted-key access (``scoring.energy_weight``) for the ``config`` command
- Energy profile updates
"""

from __future__ import annotations

import json
from functools import lru_cache
from json import JSONDecodeError
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir

from tempo_cli.models import AppConfig, EnergyProfile
from tempo_cli.utils.logger import get_logger

logger = get_logger(__name__)


def _coerce(raw: str) -> Any:
    """Read a CLI value as JSON when it parses (numbers, lists, booleans)."""
    try:
        return json.loads(raw)
    except JSONDecodeError:
        return raw


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self, config_dir: Path | None = None, data_dir: Path | None = None):
        """Initialize the config service.

        Args:
            config_dir: Where config.json lives; the user config dir by default.
            data_dir: Where the database lives; the user data dir by default.
        """
        self.config_dir = Path(config_dir or user_config_dir("tempo_cli"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(data_dir or user_data_dir("tempo_cli"))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def db_path(self) -> str:
        return self.config.database_path or str(self.data_dir / "tempo.db")

    def load_config(self) -> AppConfig:
        """Load configuration from disk, creating the default on first run.

        Raises:
            RuntimeError: If the file exists but cannot be read or validated
        """
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            logger.info("No config at %s, writing defaults", self.config_path)
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Write the current configuration to config.json (mode 0600)."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get_value(self, key: str) -> Any:
        """Read a dotted key such as ``scoring.energy_weight``.

        Raises:
            KeyError: If the key does not exist
        """
        node: Any = self.config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                raise KeyError(key)
            node = node[part]
        return node

    def set_value(self, key: str, value: Any) -> AppConfig:
        """Set a dotted key and persist the config.

        String values are parsed as JSON when possible, so ``"60"`` becomes
        60 and ``"[0, 1, 2]"`` a list. The whole config is re-validated
        before anything is written.

        Raises:
            KeyError: If the key does not exist
            pydantic.ValidationError: If the new value is invalid
        """
        if isinstance(value, str):
            value = _coerce(value)

        data = self.config.model_dump(mode="json")
        parts = key.split(".")
        node = data
        for part in parts[:-1]:
            if not isinstance(node.get(part), dict):
                raise KeyError(key)
            node = node[part]
        if parts[-1] not in node:
            raise KeyError(key)
        node[parts[-1]] = value

        self._config = AppConfig.model_validate(data)
        self.save_config()
        return self._config

    def update_profile(self, profile: EnergyProfile) -> EnergyProfile:
        self.config.profile = profile
        self.save_config()
        return profile


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
