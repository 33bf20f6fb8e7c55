"""Webhooks – verify a signed payload and decode it into a Notification."""
from __future__ import annotations

import hmac

from eventdripper.kernel.errors import NoValidSignatureError, SignatureTooOldError, WebhookError
from eventdripper.kernel.time import Clock, SystemClock
from eventdripper.models import Notification
from eventdripper.observability.logging import get_logger
from eventdripper.webhooks.constants import MAX_SIGNATURE_AGE
from eventdripper.webhooks.header import parse_header
from eventdripper.webhooks.signature import compute_signature

__all__ = ["NotificationVerifier", "construct_notification"]

_log = get_logger(__name__)


class NotificationVerifier:
    """Authenticates webhook deliveries signed with a shared secret.

    Holds no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(self, secret: str | bytes, *, clock: Clock | None = None) -> None:
        self._secret = secret.encode("utf-8") if isinstance(secret, str) else secret
        self._clock = clock or SystemClock()

    def verify(self, payload: bytes, header: str) -> Notification:
        """Return the decoded notification, or raise a :class:`WebhookError` subclass.

        The payload is only decoded once a signature has matched, so
        unauthenticated input never reaches the JSON decoder.
        """
        try:
            notification = self._verify(payload, header)
        except WebhookError as exc:
            _log.debug("webhook.rejected", code=exc.code)
            raise
        _log.debug(
            "webhook.verified",
            trigger_name=notification.trigger_name,
            entity_id=notification.entity_id,
            events=len(notification.events),
        )
        return notification

    def _verify(self, payload: bytes, header: str) -> Notification:
        signed = parse_header(header)

        # Only stale timestamps are rejected; future ones pass.
        if self._clock.now() - signed.timestamp > MAX_SIGNATURE_AGE:
            raise SignatureTooOldError(detail={"timestamp": signed.timestamp.isoformat()})

        expected = compute_signature(self._secret, signed.timestamp, payload)
        for candidate in signed.signatures:
            if hmac.compare_digest(expected, candidate):
                return Notification.from_json(payload)

        raise NoValidSignatureError()


def construct_notification(
    payload: bytes,
    header: str,
    secret: str | bytes,
    *,
    clock: Clock | None = None,
) -> Notification:
    """Verify *payload* against the signature *header* and decode it.

    Raises:
        NoSignatureError: the header is empty.
        InvalidHeaderError: the header is malformed.
        SignatureTooOldError: the signed timestamp is older than ``MAX_SIGNATURE_AGE``.
        NoValidSignatureError: no signature matches *secret* and *payload*.
        InvalidPayloadError: the authenticated payload is not a notification.
    """
    return NotificationVerifier(secret, clock=clock).verify(payload, header)
