"""Configuration loader for YAML files.

This module provides configuration loading with support for nested access,
defaults, and layering a user file over the bundled settings.

Typical usage example:
    from toctod.core.config import ConfigLoader

    config = ConfigLoader.load("config/settings.yaml")
    speed_unit = config.get("units.speed", default="kt")
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from toctod.core.resource_path import get_config_path

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("config/settings.yaml")
        >>> rate_unit = config.get("units.rate", default="ftmin")
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded or is not a mapping.

        Examples:
            >>> config = ConfigLoader.load("config/settings.yaml")
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    @classmethod
    def load_default(cls, user_path: str | Path | None = None) -> "ConfigLoader":
        """Load the bundled settings, optionally overridden by a user file.

        Args:
            user_path: Optional YAML file whose values override the defaults.

        Returns:
            ConfigLoader with merged settings.

        Raises:
            ConfigError: If either file cannot be loaded.
        """
        config = cls.load(get_config_path("settings.yaml"))

        if user_path is not None:
            config.merge(cls.load(user_path))

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Supports nested access like "units.speed".

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.

        Examples:
            >>> config.get("units.speed", default="kt")
            'kt'
        """
        keys = key.split(".")
        value = self._data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Args:
            other: ConfigLoader to merge from.

        Note:
            Other config values override existing ones.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Recursively merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result
