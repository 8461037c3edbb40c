"""Config – 12-factor settings and loaders."""

from diagnostics.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
)
from diagnostics.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
]
