"""Config – env-based settings for the Event Dripper API client."""

from eventdripper.config.settings import (
    DEFAULT_HOST,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    EventDripperSettings,
    Settings,
    SettingsLoader,
)
from eventdripper.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DEFAULT_HOST",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "EventDripperSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
