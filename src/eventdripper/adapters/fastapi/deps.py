"""FastAPI adapter – dependency yielding a verified Notification.

Usage::

    notification_dep = webhook_notification_dependency(settings.webhook_secret)

    @app.post("/webhooks/event-dripper")
    async def receive(notification: Notification = Depends(notification_dep)) -> None:
        ...
"""
from typing import Any, Callable, Coroutine

from fastapi import Request

from eventdripper.kernel.time import Clock
from eventdripper.models import Notification
from eventdripper.webhooks import HEADER_KEY, NotificationVerifier


def webhook_notification_dependency(
    secret: str | bytes,
    *,
    clock: Clock | None = None,
) -> Callable[[Request], Coroutine[Any, Any, Notification]]:
    """Build a dependency that authenticates the raw request body.

    Verification errors propagate; register :class:`WebhookExceptionMapper`
    to turn them into 400/401 responses.
    """
    verifier = NotificationVerifier(secret, clock=clock)

    async def verified_notification(request: Request) -> Notification:
        payload = await request.body()
        header = request.headers.get(HEADER_KEY, "")
        return verifier.verify(payload, header)

    return verified_notification


__all__ = ["webhook_notification_dependency"]
