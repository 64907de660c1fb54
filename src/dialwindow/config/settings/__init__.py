"""Config settings – 12-factor env-based configuration."""
from dialwindow.config.settings.base import Settings
from dialwindow.config.settings.calling_window import CallingWindowSettings
from dialwindow.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "CallingWindowSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
