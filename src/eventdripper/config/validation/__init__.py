"""Config validation – errors raised while loading settings."""
from eventdripper.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    is_secret_setting,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError", "is_secret_setting"]
