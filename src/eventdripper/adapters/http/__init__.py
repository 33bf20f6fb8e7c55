"""HTTP adapter – async client for submitting events."""
from eventdripper.adapters.http.client import AddEventInput, EventDripperClient

__all__ = ["AddEventInput", "EventDripperClient"]
