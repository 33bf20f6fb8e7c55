"""Webhooks – signature header codec.

The header looks like ``t=1601036356,v1=5257a8...,v1=9e0d1c...,v0=...``:
one timestamp plus one or more signatures tagged with their scheme version.
Unknown fields and unknown versions are skipped so senders can add fields or
emit several schemes at once during a rotation.
"""
from __future__ import annotations

import binascii
from dataclasses import dataclass
from datetime import datetime

from eventdripper.kernel.errors import InvalidHeaderError, NoSignatureError, NoValidSignatureError
from eventdripper.kernel.time import from_unix, to_unix
from eventdripper.webhooks.constants import SIGNING_VERSION, TIMESTAMP_FIELD

__all__ = ["SignedHeader", "make_header", "parse_header"]


@dataclass(frozen=True)
class SignedHeader:
    """Parsed header: the claimed signing time and every current-version signature."""

    timestamp: datetime
    signatures: tuple[bytes, ...]


def make_header(timestamp: datetime, signature: bytes) -> str:
    """Encode one timestamp and one current-version signature (lowercase hex)."""
    return f"{TIMESTAMP_FIELD}={to_unix(timestamp)},{SIGNING_VERSION}={signature.hex()}"


def parse_header(header: str) -> SignedHeader:
    """Decode a signature header.

    Raises:
        NoSignatureError: *header* is empty.
        InvalidHeaderError: a field is not ``name=value``, or the timestamp is not an
            integer or lies outside the range a ``datetime`` can hold (years 1-9999;
            ``t=300000000000`` is rejected although it is a valid 64-bit second count).
        NoValidSignatureError: no decodable current-version signature was found.
    """
    if not header:
        raise NoSignatureError()

    timestamp: datetime | None = None
    signatures: list[bytes] = []

    for pair in header.split(","):
        parts = pair.split("=")
        if len(parts) != 2 or not parts[0]:
            raise InvalidHeaderError(detail={"field": pair})
        name, value = parts

        if name == TIMESTAMP_FIELD:
            timestamp = from_unix(_parse_unix(value))
        elif name == SIGNING_VERSION:
            try:
                signatures.append(binascii.unhexlify(value))
            except ValueError:
                continue  # undecodable signature, keep looking
        # other fields and versions are ignored

    if not signatures:
        raise NoValidSignatureError()
    if timestamp is None:
        # Mirrors a zero timestamp: always outside the freshness window.
        timestamp = from_unix(0)

    return SignedHeader(timestamp=timestamp, signatures=tuple(signatures))


def _parse_unix(value: str) -> int:
    # int() alone would also accept "1_000", " 12 " and non-ASCII digits.
    body = value[1:] if value[:1] in ("+", "-") else value
    if not body or not body.isascii() or not body.isdigit():
        raise InvalidHeaderError(detail={"timestamp": value})
    try:
        seconds = int(value)
        from_unix(seconds)
    except (ValueError, OverflowError) as exc:
        raise InvalidHeaderError(detail={"timestamp": value}, cause=exc) from exc
    return seconds
