"""Config settings – 12-factor env-based configuration."""
from tollgate.config.settings.base import Settings
from tollgate.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
