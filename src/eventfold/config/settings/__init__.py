"""Config settings – environment-based configuration."""
from eventfold.config.settings.app import AppSettings
from eventfold.config.settings.base import Settings
from eventfold.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["AppSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
