"""Errors raised while loading or validating settings."""
from dialwindow.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or do not make sense."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable {setting_name} is required",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting parsed, but is out of range or names an unknown zone."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
