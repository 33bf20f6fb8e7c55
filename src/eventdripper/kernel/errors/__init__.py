"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    EventDripperError
    ├── WebhookError             (webhooks.py)
    │   ├── NoSignatureError
    │   ├── InvalidHeaderError
    │   ├── NoValidSignatureError
    │   ├── SignatureTooOldError
    │   └── InvalidPayloadError
    ├── ApplicationError         (application.py)
    │   ├── UnauthorizedError
    │   └── TimeoutError
    └── InfrastructureError      (infrastructure.py)
        ├── ConnectionError
        └── EventSubmissionError
"""

from eventdripper.kernel.errors.application import (
    ApplicationError,
    TimeoutError,
    UnauthorizedError,
)
from eventdripper.kernel.errors.base import EventDripperError
from eventdripper.kernel.errors.infrastructure import (
    ConnectionError,
    EventSubmissionError,
    InfrastructureError,
)
from eventdripper.kernel.errors.webhooks import (
    InvalidHeaderError,
    InvalidPayloadError,
    NoSignatureError,
    NoValidSignatureError,
    SignatureTooOldError,
    WebhookError,
)

__all__ = [
    "ApplicationError",
    "ConnectionError",
    "EventDripperError",
    "EventSubmissionError",
    "InfrastructureError",
    "InvalidHeaderError",
    "InvalidPayloadError",
    "NoSignatureError",
    "NoValidSignatureError",
    "SignatureTooOldError",
    "TimeoutError",
    "UnauthorizedError",
    "WebhookError",
]
