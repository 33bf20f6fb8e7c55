"""Webhook constants – header key, freshness window and signing scheme."""
from __future__ import annotations

from datetime import timedelta
from typing import Final

#: HTTP header carrying the signature, e.g. ``t=1601036356,v1=5257a8...``.
HEADER_KEY: Final[str] = "EventDripper-Signature"

#: Signatures older than this are rejected by :func:`construct_notification`.
MAX_SIGNATURE_AGE: Final[timedelta] = timedelta(seconds=300)

#: Scheme tag of the signatures produced and accepted by this version.
SIGNING_VERSION: Final[str] = "v1"

#: Header field holding the signing timestamp.
TIMESTAMP_FIELD: Final[str] = "t"

__all__ = ["HEADER_KEY", "MAX_SIGNATURE_AGE", "SIGNING_VERSION", "TIMESTAMP_FIELD"]
