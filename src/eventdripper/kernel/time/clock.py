"""Kernel time – Clock protocol + implementations.

Signature timestamps are whole Unix seconds, so everything here works with
timezone-aware UTC datetimes and truncates to seconds at the wire boundary.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Clock(Protocol):
    """Port: source of the current time, swappable in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = ensure_aware(fixed)

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


def ensure_aware(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_unix(value: datetime) -> int:
    """Whole Unix seconds, floored (sub-second precision is dropped)."""
    return (ensure_aware(value) - _EPOCH) // timedelta(seconds=1)


def from_unix(seconds: int) -> datetime:
    """Aware UTC datetime for a Unix-seconds value."""
    return _EPOCH + timedelta(seconds=seconds)


__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "ensure_aware",
    "from_unix",
    "to_unix",
    "utc_now",
]
