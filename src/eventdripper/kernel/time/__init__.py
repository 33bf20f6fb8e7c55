"""Kernel time – Clock port + implementations."""
from eventdripper.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    ensure_aware,
    from_unix,
    to_unix,
    utc_now,
)

__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "ensure_aware",
    "from_unix",
    "to_unix",
    "utc_now",
]
