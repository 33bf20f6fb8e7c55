"""
eventdripper – webhook verification and event submission for Event Dripper.

Import path convention::

    from eventdripper.webhooks import construct_notification, WebhookSigner
    from eventdripper.models import Notification, Event
    from eventdripper.kernel.errors import NoValidSignatureError
    from eventdripper.adapters.http import EventDripperClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
