"""
Configuration management for Rota.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-18
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional

from ..core.exceptions import ConfigurationError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class UISettings:
    """Display settings."""

    list_width: int = 60  # percent of the screen given to the entry list
    date_format: str = "%Y-%m-%d %H:%M:%S"
    relative_time: bool = True
    theme: Optional[str] = None  # Textual theme name


@dataclass
class KeySettings:
    """Keybinding overrides: action name → keys."""

    bindings: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class Settings:
    """Main settings container."""

    ui: UISettings = field(default_factory=UISettings)
    keys: KeySettings = field(default_factory=KeySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/rota/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is malformed or a value is invalid
        """
        settings = cls()

        if config_path is None:
            config_path = get_config_dir() / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"{config_path}: expected a mapping at top level")

            # UI settings
            if "ui" in config_data:
                ui = config_data["ui"] or {}
                if not isinstance(ui, dict):
                    raise ConfigurationError("'ui' must be a mapping of UI options")
                settings.ui = UISettings(
                    list_width=ui.get("list_width", 60),
                    date_format=ui.get("date_format", "%Y-%m-%d %H:%M:%S"),
                    relative_time=ui.get("relative_time", True),
                    theme=ui.get("theme"),
                )

            # Keybinding overrides
            if "keys" in config_data:
                keys = config_data["keys"] or {}
                if not isinstance(keys, dict):
                    raise ConfigurationError("'keys' must map action names to keys")
                settings.keys = KeySettings(
                    bindings={
                        str(action): _as_key_list(action, value)
                        for action, value in keys.items()
                    }
                )

            # Logging settings
            if "logging" in config_data:
                log = config_data["logging"] or {}
                if not isinstance(log, dict):
                    raise ConfigurationError("'logging' must be a mapping with level and file")
                settings.logging = LoggingSettings(
                    level=str(log.get("level", "WARNING")),
                    file=log.get("file"),
                )

        # Override with environment variables
        log_level_env = os.getenv("ROTA_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = log_level_env

        log_file_env = os.getenv("ROTA_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        theme_env = os.getenv("ROTA_THEME")
        if theme_env:
            settings.ui.theme = theme_env

        settings.validate()
        return settings

    def validate(self) -> None:
        """Check value ranges, normalising where harmless."""
        if not isinstance(self.ui.list_width, int) or not 20 <= self.ui.list_width <= 80:
            raise ConfigurationError(
                f"ui.list_width must be an integer between 20 and 80, got {self.ui.list_width!r}"
            )

        if not isinstance(self.ui.date_format, str):
            raise ConfigurationError(
                f"ui.date_format must be a strftime string, got {self.ui.date_format!r}"
            )

        if not isinstance(self.ui.relative_time, bool):
            raise ConfigurationError(
                f"ui.relative_time must be true or false, got {self.ui.relative_time!r}"
            )

        if self.ui.theme is not None and not isinstance(self.ui.theme, str):
            raise ConfigurationError(f"ui.theme must be a theme name, got {self.ui.theme!r}")

        self.logging.level = self.logging.level.upper()
        if self.logging.level not in LOG_LEVELS:
            raise ConfigurationError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {self.logging.level!r}"
            )

        if self.logging.file is not None and not isinstance(self.logging.file, str):
            raise ConfigurationError(f"logging.file must be a path, got {self.logging.file!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "ui": {
                "list_width": self.ui.list_width,
                "date_format": self.ui.date_format,
                "relative_time": self.ui.relative_time,
                "theme": self.ui.theme,
            },
            "keys": {action: list(keys) for action, keys in self.keys.bindings.items()},
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def _as_key_list(action: Any, value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and value and all(isinstance(k, str) for k in value):
        return list(value)
    raise ConfigurationError(f"keys.{action} must be a key or a non-empty list of keys")


def get_config_dir() -> Path:
    """Get configuration directory (not created; Rota never writes to disk)."""
    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "rota"
