"""
Configuration management for Rota.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/rota/config.yaml)
- Environment variables

Modified: 2026-10-18
"""

from rota.config.settings import (
    Settings,
    UISettings,
    KeySettings,
    LoggingSettings,
    get_config_dir,
)

__all__ = [
    "Settings",
    "UISettings",
    "KeySettings",
    "LoggingSettings",
    "get_config_dir",
]
