"""Config – 12-factor settings and loaders."""

from dialwindow.config.settings import (
    CallingWindowSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from dialwindow.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "CallingWindowSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
