"""Kernel – framework-agnostic building blocks: errors and clocks."""

from eventdripper.kernel.errors import (
    EventDripperError,
    EventSubmissionError,
    InvalidHeaderError,
    InvalidPayloadError,
    NoSignatureError,
    NoValidSignatureError,
    SignatureTooOldError,
    UnauthorizedError,
    WebhookError,
)

__all__ = [
    "EventDripperError",
    "EventSubmissionError",
    "InvalidHeaderError",
    "InvalidPayloadError",
    "NoSignatureError",
    "NoValidSignatureError",
    "SignatureTooOldError",
    "UnauthorizedError",
    "WebhookError",
]
