"""FastAPI adapter – WebhookExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from eventdripper.kernel.errors import (
    EventDripperError,
    EventSubmissionError,
    InvalidHeaderError,
    InvalidPayloadError,
    NoSignatureError,
    NoValidSignatureError,
    SignatureTooOldError,
    UnauthorizedError,
)


class WebhookExceptionMapper:
    """Register eventdripper error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "no_valid_signature", "message": "...", "detail": {}}

    Mappings
    --------
    ``NoSignatureError``        → 401
    ``NoValidSignatureError``   → 401
    ``SignatureTooOldError``    → 401
    ``InvalidHeaderError``      → 400
    ``InvalidPayloadError``     → 400
    ``UnauthorizedError``       → 401
    ``EventSubmissionError``    → 502
    """

    def __init__(self) -> None:
        self._map: list[tuple[type[Exception], int]] = [
            (NoSignatureError, 401),
            (NoValidSignatureError, 401),
            (SignatureTooOldError, 401),
            (InvalidHeaderError, 400),
            (InvalidPayloadError, 400),
            (UnauthorizedError, 401),
            (EventSubmissionError, 502),
        ]

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._handler(status))

    @staticmethod
    def _handler(status: int) -> Callable[[Any, Any], Any]:
        def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
            if isinstance(exc, EventDripperError):
                body = exc.to_dict()
            else:
                body = {"code": "error", "message": str(exc)}
            return JSONResponse(status_code=status, content=body)

        return handler


__all__ = ["WebhookExceptionMapper"]
