"""Unit tests – EventDripperClient."""
from __future__ import annotations

import asyncio
import base64
import json

import httpx
import pytest
import respx

from eventdripper.adapters.http import AddEventInput, EventDripperClient
from eventdripper.config import DEFAULT_HOST, EventDripperSettings
from eventdripper.kernel.errors import (
    ConnectionError,
    EventSubmissionError,
    TimeoutError as AppTimeoutError,
    UnauthorizedError,
)

HOST = "http://event-dripper.test"
API_KEY = "im api key"


def _add_event(client: EventDripperClient) -> None:
    async def run() -> None:
        async with client:
            await client.add_event("im entity id", "im event name", b"im data")

    asyncio.run(run())


class TestAddEventInput:
    def test_data_is_base64(self) -> None:
        body = AddEventInput(event_name="n", entity_id="e", data=b"im data").to_dict()
        assert body == {"event_name": "n", "entity_id": "e", "data": "aW0gZGF0YQ=="}


class TestAddEvent:
    @respx.mock
    def test_happy_path(self) -> None:
        route = respx.post(f"{HOST}/api/event").mock(return_value=httpx.Response(201))
        _add_event(EventDripperClient(API_KEY, HOST))

        sent = route.calls.last.request
        assert sent.headers["authorization"] == API_KEY
        payload = json.loads(sent.content)
        assert payload["entity_id"] == "im entity id"
        assert payload["event_name"] == "im event name"
        assert base64.b64decode(payload["data"]) == b"im data"

    @respx.mock
    def test_unauthorized(self) -> None:
        respx.post(f"{HOST}/api/event").mock(return_value=httpx.Response(401))
        with pytest.raises(UnauthorizedError):
            _add_event(EventDripperClient(API_KEY, HOST))

    @pytest.mark.parametrize("status", [200, 400, 404, 500, 503])
    @respx.mock
    def test_other_status_raises_submission_error(self, status: int) -> None:
        respx.post(f"{HOST}/api/event").mock(return_value=httpx.Response(status))
        with pytest.raises(EventSubmissionError) as excinfo:
            _add_event(EventDripperClient(API_KEY, HOST))
        assert excinfo.value.status_code == status

    @respx.mock
    def test_not_retried(self) -> None:
        route = respx.post(f"{HOST}/api/event").mock(return_value=httpx.Response(503))
        with pytest.raises(EventSubmissionError):
            _add_event(EventDripperClient(API_KEY, HOST))
        assert route.call_count == 1

    @respx.mock
    def test_timeout(self) -> None:
        respx.post(f"{HOST}/api/event").mock(side_effect=httpx.ConnectTimeout("slow"))
        with pytest.raises(AppTimeoutError):
            _add_event(EventDripperClient(API_KEY, HOST))

    @respx.mock
    def test_transport_error(self) -> None:
        respx.post(f"{HOST}/api/event").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(ConnectionError) as excinfo:
            _add_event(EventDripperClient(API_KEY, HOST))
        assert excinfo.value.host == HOST

    @respx.mock
    def test_trailing_slash_in_host(self) -> None:
        route = respx.post(f"{HOST}/api/event").mock(return_value=httpx.Response(201))
        _add_event(EventDripperClient(API_KEY, HOST + "/"))
        assert route.called


class TestClientLifecycle:
    def test_default_host(self) -> None:
        client = EventDripperClient(API_KEY)
        assert client._host == DEFAULT_HOST
        asyncio.run(client.aclose())

    @respx.mock
    def test_from_settings(self) -> None:
        route = respx.post(f"{HOST}/api/event").mock(return_value=httpx.Response(201))
        settings = EventDripperSettings(api_key="settings key", host=HOST)
        _add_event(EventDripperClient.from_settings(settings))
        assert route.calls.last.request.headers["authorization"] == "settings key"

    @respx.mock
    def test_injected_client_is_not_closed(self) -> None:
        respx.post(f"{HOST}/api/event").mock(return_value=httpx.Response(201))

        async def run() -> httpx.AsyncClient:
            http = httpx.AsyncClient()
            async with EventDripperClient(API_KEY, HOST, client=http) as client:
                await client.add_event("e", "n", b"")
            assert not http.is_closed
            await http.aclose()
            return http

        assert asyncio.run(run()).is_closed

    def test_owned_client_closed_on_exit(self) -> None:
        async def run() -> EventDripperClient:
            async with EventDripperClient(API_KEY, HOST) as client:
                pass
            return client

        assert asyncio.run(run())._client.is_closed
