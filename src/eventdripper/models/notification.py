"""Models – Notification and Event value objects plus their JSON codec.

Wire shape::

    {
        "trigger_name": "...",
        "entity_id": "...",
        "events": [{"at": "2026-01-01T12:00:00Z", "name": "...", "data": "<base64>"}]
    }

``data`` is standard base64 (``null`` or absent means empty) and ``at`` is an
RFC 3339 timestamp (``null`` or absent means :data:`ZERO_TIME`). Missing fields
and ``null`` objects decode to zero values rather than failing.
"""
from __future__ import annotations

import base64
import json
import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from eventdripper.kernel.errors import InvalidPayloadError

__all__ = ["ZERO_TIME", "Event", "Notification"]

#: Decoded value of an absent ``at``, the zero instant of the sending side.
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)

_RFC3339 = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})")
# RFC 3339 allows nanosecond fractions; datetime keeps microseconds.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


@dataclass(frozen=True)
class Event:
    """One occurrence within a notification; ``data`` is opaque to this library."""

    at: datetime = ZERO_TIME
    name: str = ""
    data: bytes = b""

    @classmethod
    def from_dict(cls, raw: Any) -> "Event":
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise InvalidPayloadError(detail={"reason": "event is not an object"})
        return cls(
            at=_parse_timestamp(raw.get("at")),
            name=_string_field(raw, "name"),
            data=_decode_data(raw.get("data")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "at": _format_timestamp(self.at),
            "name": self.name,
            "data": base64.b64encode(self.data).decode("ascii"),
        }


@dataclass(frozen=True)
class Notification:
    """A verified trigger firing for one entity, with its events in sent order."""

    trigger_name: str
    entity_id: str
    events: tuple[Event, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, raw: Any) -> "Notification":
        if raw is None:
            return cls(trigger_name="", entity_id="")
        if not isinstance(raw, dict):
            raise InvalidPayloadError(detail={"reason": "payload is not an object"})
        events = raw.get("events")
        if events is None:
            events = []
        if not isinstance(events, list):
            raise InvalidPayloadError(detail={"reason": "events is not a list"})
        return cls(
            trigger_name=_string_field(raw, "trigger_name"),
            entity_id=_string_field(raw, "entity_id"),
            events=tuple(Event.from_dict(e) for e in events),
        )

    @classmethod
    def from_json(cls, payload: bytes | str) -> "Notification":
        """Decode a JSON document; any malformation raises :class:`InvalidPayloadError`."""
        try:
            raw = json.loads(payload)
        except (ValueError, TypeError) as exc:
            raise InvalidPayloadError(detail={"reason": "payload is not valid JSON"}, cause=exc) from exc
        return cls.from_dict(raw)

    def to_dict(self) -> dict[str, Any]:
        return {
            "trigger_name": self.trigger_name,
            "entity_id": self.entity_id,
            "events": [e.to_dict() for e in self.events],
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")


def _string_field(raw: dict[str, Any], name: str) -> str:
    value = raw.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidPayloadError(detail={"reason": f"{name} is not a string"})
    return value


def _decode_data(value: Any) -> bytes:
    if value is None:
        return b""
    if not isinstance(value, str):
        raise InvalidPayloadError(detail={"reason": "data is not a base64 string"})
    try:
        return base64.b64decode(value, validate=True)
    except ValueError as exc:
        raise InvalidPayloadError(detail={"reason": "data is not valid base64"}, cause=exc) from exc


def _parse_timestamp(value: Any) -> datetime:
    if value is None:
        return ZERO_TIME
    if not isinstance(value, str) or not _RFC3339.fullmatch(value):
        raise InvalidPayloadError(detail={"reason": "at is not an RFC 3339 string"})
    try:
        parsed = datetime.fromisoformat(_EXTRA_FRACTION.sub(r"\1", value, count=1))
    except ValueError as exc:
        raise InvalidPayloadError(detail={"reason": "at is not an RFC 3339 string"}, cause=exc) from exc
    return parsed


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text
