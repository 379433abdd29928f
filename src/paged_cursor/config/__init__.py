"""Config – 12-factor settings and loaders."""

from paged_cursor.config.settings import CursorSettings, EnvSettingsLoader, Settings, SettingsLoader
from paged_cursor.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "CursorSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
