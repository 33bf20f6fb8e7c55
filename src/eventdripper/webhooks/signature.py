"""Webhooks – HMAC-SHA256 signature computation and the signer helper."""
from __future__ import annotations

import hashlib
import hmac
from datetime import datetime

from eventdripper.kernel.time import Clock, SystemClock, to_unix
from eventdripper.webhooks.constants import HEADER_KEY
from eventdripper.webhooks.header import make_header

__all__ = ["WebhookSigner", "compute_signature"]


def compute_signature(secret: bytes, timestamp: datetime, payload: bytes) -> bytes:
    """Return the raw HMAC-SHA256 of ``b"<unix-seconds>." + payload`` keyed by *secret*.

    Anyone holding the shared secret can recompute this value, which is what
    lets a receiver confirm the sender knows the secret.
    """
    mac = hmac.new(secret, digestmod=hashlib.sha256)
    mac.update(str(to_unix(timestamp)).encode("ascii"))
    mac.update(b".")
    mac.update(payload)
    return mac.digest()


class WebhookSigner:
    """Signs outgoing webhook payloads with a shared secret.

    Usage::

        signer = WebhookSigner("whsec")
        body = notification.to_json()
        httpx.post(url, content=body, headers=signer.headers(body))
    """

    def __init__(self, secret: str | bytes, clock: Clock | None = None) -> None:
        self._secret = secret.encode("utf-8") if isinstance(secret, str) else secret
        self._clock = clock or SystemClock()

    def sign(self, payload: bytes, timestamp: datetime | None = None) -> str:
        """Return the signature header value for *payload* signed at *timestamp* (default: now)."""
        at = timestamp or self._clock.now()
        return make_header(at, compute_signature(self._secret, at, payload))

    def headers(self, payload: bytes) -> dict[str, str]:
        return {HEADER_KEY: self.sign(payload)}
