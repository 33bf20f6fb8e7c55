"""Config settings – 12-factor env-based configuration."""
from eventdripper.config.settings.base import DEFAULT_HOST, EventDripperSettings, Settings
from eventdripper.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_HOST",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "EventDripperSettings",
    "Settings",
    "SettingsLoader",
]
