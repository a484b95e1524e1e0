"""Config settings – 12-factor env-based configuration."""
from uowkit.config.settings.base import ISOLATION_LEVELS, Settings, UnitOfWorkSettings
from uowkit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "ISOLATION_LEVELS",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "UnitOfWorkSettings",
]
