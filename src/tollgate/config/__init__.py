"""Config – 12-factor settings and their validation errors."""

from tollgate.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from tollgate.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
