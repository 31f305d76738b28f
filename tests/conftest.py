from __future__ import annotations

from typing import Any

import httpx
import pytest

from geoservices.auth import ApiKey
from geoservices.settings import GeoservicesSettings


class RecordingTransport:
    """Answers every request with one canned payload and keeps the requests."""

    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def called(self) -> bool:
        return bool(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def body(self) -> str:
        return self.last.content.decode("utf-8")


@pytest.fixture
def mock_service():
    """Return a factory building ``(client, recorder)`` for a canned payload."""
    clients: list[httpx.Client] = []

    def factory(payload: Any, status_code: int = 200) -> tuple[httpx.Client, RecordingTransport]:
        recorder = RecordingTransport(payload, status_code)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def auth() -> ApiKey:
    return ApiKey("token", portal="https://mapsdev.arcgis.com")


@pytest.fixture
def anonymous_settings(monkeypatch) -> GeoservicesSettings:
    """Settings with no API key, whatever the environment holds."""
    monkeypatch.delenv("ARCGIS_API_KEY", raising=False)
    monkeypatch.delenv("GEOSERVICES_API_KEY", raising=False)
    return GeoservicesSettings(_env_file=None)

