"""Application-layer errors raised by the event-submission client."""

from __future__ import annotations

from eventdripper.kernel.errors.base import EventDripperError


class ApplicationError(EventDripperError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """The API key was rejected by the Event Dripper API."""

    default_code = "unauthorized"
    default_message = "unauthorized"


class TimeoutError(ApplicationError):  # noqa: A001
    """A request to the Event Dripper API timed out."""

    default_code = "timeout"
    default_message = "request timed out"


__all__ = [
    "ApplicationError",
    "TimeoutError",
    "UnauthorizedError",
]
