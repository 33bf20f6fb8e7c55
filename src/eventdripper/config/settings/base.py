"""Config settings – Settings base class and the client settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from eventdripper.config.validation import InvalidSettingValueError

DEFAULT_HOST = "https://api.production.event-dripper.haps.pw"


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class EventDripperSettings(Settings):
    """Settings read from ``EVENTDRIPPER_*`` environment variables.

    ``webhook_secret`` is only needed by processes that receive webhooks.
    """

    _prefix: ClassVar[str] = "EVENTDRIPPER"

    api_key: str
    host: str = DEFAULT_HOST
    timeout: float = 10.0
    webhook_secret: str | None = None

    def _validate(self) -> None:
        if not self.api_key:
            raise InvalidSettingValueError("api_key", self.api_key, "must not be empty")
        if not self.host.startswith(("http://", "https://")):
            raise InvalidSettingValueError("host", self.host, "must be an http(s) URL")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        self.host = self.host.rstrip("/")


__all__ = ["DEFAULT_HOST", "EventDripperSettings", "Settings"]
