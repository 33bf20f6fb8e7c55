"""HTTP adapter – EventDripperClient."""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

import httpx

from eventdripper.config.settings import DEFAULT_HOST, EventDripperSettings
from eventdripper.kernel.errors import (
    ConnectionError,
    EventSubmissionError,
    TimeoutError as AppTimeoutError,
    UnauthorizedError,
)
from eventdripper.observability.logging import get_logger

_log = get_logger(__name__)


@dataclass(frozen=True)
class AddEventInput:
    """Body of ``POST /api/event``."""

    event_name: str
    entity_id: str
    data: bytes

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_name": self.event_name,
            "entity_id": self.entity_id,
            "data": base64.b64encode(self.data).decode("ascii"),
        }


class EventDripperClient:
    """Thin async client for the Event Dripper ingestion API.

    Pass ``client`` to reuse an existing ``httpx.AsyncClient`` (its lifecycle
    stays with the caller); otherwise one is created and closed by
    :meth:`aclose` / ``async with``. Requests are never retried.
    """

    def __init__(
        self,
        api_key: str,
        host: str = DEFAULT_HOST,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._host = host.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: EventDripperSettings, *, client: httpx.AsyncClient | None = None
    ) -> "EventDripperClient":
        return cls(settings.api_key, settings.host, timeout=settings.timeout, client=client)

    async def __aenter__(self) -> "EventDripperClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def add_event(self, entity_id: str, event_name: str, data: bytes) -> None:
        """Submit one event for *entity_id*.

        Raises:
            UnauthorizedError: the API rejected the API key (HTTP 401).
            EventSubmissionError: any status other than 201.
            TimeoutError: the request timed out.
            ConnectionError: any other transport failure.
        """
        url = f"{self._host}/api/event"
        body = AddEventInput(event_name=event_name, entity_id=entity_id, data=data)
        try:
            response = await self._client.post(
                url,
                json=body.to_dict(),
                headers={"Authorization": self._api_key},
            )
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request timed out: POST {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise ConnectionError(self._host, str(exc) or None, cause=exc) from exc

        if response.status_code == httpx.codes.CREATED:
            _log.debug("event.submitted", entity_id=entity_id, event_name=event_name)
            return
        _log.debug("event.rejected", entity_id=entity_id, event_name=event_name, status_code=response.status_code)
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise UnauthorizedError()
        raise EventSubmissionError(response.status_code)


__all__ = ["AddEventInput", "EventDripperClient"]
