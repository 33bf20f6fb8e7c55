"""Infrastructure errors – transport failures and unexpected API responses."""

from __future__ import annotations

from typing import Any

from eventdripper.kernel.errors.base import EventDripperError


class InfrastructureError(EventDripperError):
    """Infrastructure / I/O failure that is not a verification failure."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to reach the Event Dripper API."""

    default_code = "connection_error"

    def __init__(
        self,
        host: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{host}'", **kwargs)
        self.host = host


class EventSubmissionError(InfrastructureError):
    """The API answered an event submission with an unexpected status."""

    default_code = "event_submission_failed"

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"failed to create event; status code {status_code}",
            **kwargs,
        )
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        return base


__all__ = [
    "ConnectionError",
    "EventSubmissionError",
    "InfrastructureError",
]
