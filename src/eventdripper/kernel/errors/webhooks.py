"""Webhook verification errors – one class per rejection reason."""

from __future__ import annotations

from eventdripper.kernel.errors.base import EventDripperError


class WebhookError(EventDripperError):
    """An incoming webhook could not be verified or decoded."""

    default_code = "webhook_error"
    default_message = "webhook could not be verified"


class NoSignatureError(WebhookError):
    """The signature header was absent or empty."""

    default_code = "no_signature"
    default_message = "webhook has no EventDripper-Signature header"


class InvalidHeaderError(WebhookError):
    """The signature header has a malformed field or timestamp."""

    default_code = "invalid_header"
    default_message = "webhook has invalid EventDripper-Signature header"


class NoValidSignatureError(WebhookError):
    """No current-version signature was present, or none matched."""

    default_code = "no_valid_signature"
    default_message = "webhook had no valid signature"


class SignatureTooOldError(WebhookError):
    """The signed timestamp is older than the freshness window."""

    default_code = "signature_too_old"
    default_message = "signature timestamp wasn't within tolerance"


class InvalidPayloadError(WebhookError):
    """The authenticated payload is not a well-formed notification."""

    default_code = "invalid_payload"
    default_message = "webhook has invalid payload"


__all__ = [
    "InvalidHeaderError",
    "InvalidPayloadError",
    "NoSignatureError",
    "NoValidSignatureError",
    "SignatureTooOldError",
    "WebhookError",
]
