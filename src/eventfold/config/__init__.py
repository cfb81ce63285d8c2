"""Config – environment settings and their validation errors."""

from eventfold.config.settings import AppSettings, EnvSettingsLoader, Settings, SettingsLoader
from eventfold.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
