"""Models – the verified notification payload."""
from eventdripper.models.notification import ZERO_TIME, Event, Notification

__all__ = ["ZERO_TIME", "Event", "Notification"]
