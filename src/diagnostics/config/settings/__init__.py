"""Config settings – 12-factor env-based configuration."""
from diagnostics.config.settings.base import Settings
from diagnostics.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from diagnostics.config.settings.logging import LoggingSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
