"""Config settings – 12-factor env-based configuration."""
from paged_cursor.config.settings.base import Settings
from paged_cursor.config.settings.cursor import CursorSettings
from paged_cursor.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CursorSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
