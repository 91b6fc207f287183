"""Config – 12-factor settings for the loggers."""

from ologs.config.base import Settings
from ologs.config.loaders import EnvSettingsLoader, SettingsLoader
from ologs.config.settings import LoggerSettings

__all__ = [
    "EnvSettingsLoader",
    "LoggerSettings",
    "Settings",
    "SettingsLoader",
]
