"""Config validation – errors raised while loading Event Dripper settings.

Values of secret-bearing settings (API key, webhook secret) are never copied
into the message, ``detail`` or ``value`` of these errors, since they usually
end up in logs.
"""
from __future__ import annotations

from eventdripper.kernel.errors import ApplicationError
from eventdripper.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter


def is_secret_setting(setting_name: str) -> bool:
    """True for ``api_key``, ``EVENTDRIPPER_WEBHOOK_SECRET`` and the like."""
    name = setting_name.lower()
    return any(name == f or name.endswith(f"_{f}") for f in DEFAULT_SENSITIVE_FIELDS)


class ConfigError(ApplicationError):
    """Event Dripper settings could not be loaded or failed validation."""

    default_code = "config_error"
    default_message = "invalid event dripper configuration"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable; ``value`` is redacted for secrets."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        if is_secret_setting(setting_name):
            value = SensitiveFieldsFilter.REDACTED
            shown = value
        else:
            shown = repr(value)
        super().__init__(
            f"{setting_name}={shown} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "is_secret_setting",
]
