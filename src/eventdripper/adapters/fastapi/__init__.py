"""FastAPI adapter – verified-notification dependency and error mapping."""
from eventdripper.adapters.fastapi.deps import webhook_notification_dependency
from eventdripper.adapters.fastapi.exception_mapper import WebhookExceptionMapper

__all__ = ["WebhookExceptionMapper", "webhook_notification_dependency"]
