"""
Shared test fixtures for InPost Air client tests.

Provides a fake InPost Mobile API on top of httpx.MockTransport,
bearer token generation and sample response bodies.
"""

from __future__ import annotations

import json
import time
from collections.abc import Iterator
from typing import Any, Callable

import httpx
import jwt
import pytest

from inpost_air.client import InPostAirClient
from inpost_air.config import ClientConfig, TelemetryConfig
from inpost_air.models import Session
from inpost_air.store import MemoryConfigStore


TEST_SIGNING_KEY = "inpost-air-test-signing-key-0123456789"


def make_token(exp_offset: int = 3600, **claims: Any) -> str:
    """Build a bearer access token expiring ``exp_offset`` seconds from now."""
    payload = {"sub": "user-123", "exp": int(time.time()) + exp_offset, **claims}
    return "Bearer " + jwt.encode(payload, TEST_SIGNING_KEY, algorithm="HS256")


class FakeInPostAPI:
    """Scripted responses keyed by method and path, recording every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[tuple[int, dict[str, Any]]]] = {}

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
    ) -> None:
        """Queue a response; the last queued one repeats once reached."""
        kwargs: dict[str, Any] = {"content": content} if content is not None else {"json": json}
        self._routes.setdefault((method, path), []).append((status, kwargs))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(
                404,
                json={"status": 404, "error": "notFound", "description": request.url.path},
            )
        status, kwargs = queue.pop(0) if len(queue) > 1 else queue[0]
        return httpx.Response(status, **kwargs)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @staticmethod
    def body(request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content)


@pytest.fixture
def token_factory() -> Callable[..., str]:
    """Provide the bearer token builder."""
    return make_token


@pytest.fixture
def config() -> ClientConfig:
    """Provide a client configuration with telemetry disabled."""
    return ClientConfig(telemetry=TelemetryConfig(enabled=False))


@pytest.fixture
def api() -> FakeInPostAPI:
    """Provide an empty fake API."""
    return FakeInPostAPI()


@pytest.fixture
def store() -> MemoryConfigStore:
    """Provide an empty in-memory config store."""
    return MemoryConfigStore()


@pytest.fixture
def logged_in_store() -> MemoryConfigStore:
    """Provide a store holding a refresh token and a valid access token."""
    session = Session(refresh_token="refresh-abc", auth_token=make_token())
    return MemoryConfigStore(session.to_bytes())


@pytest.fixture
def make_client(
    api: FakeInPostAPI,
    config: ClientConfig,
) -> Iterator[Callable[[MemoryConfigStore], InPostAirClient]]:
    """Provide a factory of clients talking to the fake API."""
    clients: list[InPostAirClient] = []

    def factory(store: MemoryConfigStore) -> InPostAirClient:
        client = InPostAirClient(store, config, transport=api.transport)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def sample_point() -> dict[str, Any]:
    """Provide a point response with air sensor data."""
    return {
        "name": "KRA01M",
        "locationDescription": "Przy sklepie",
        "type": ["parcel_locker"],
        "airSensor": True,
        "airSensorData": {
            "airQuality": "VERY_GOOD",
            "weather": {"temperature": 21.5, "pressure": 1013.4, "humidity": 55.6},
            "pollutants": {
                "pm10": {"value": 12.3, "percent": 24.6},
                "pm25": {"value": 8.1, "percent": 32.4},
            },
            "updatedUntil": "2024-01-15T10:30:00Z",
        },
    }


@pytest.fixture
def token_expired_body() -> dict[str, Any]:
    """Provide the error body the API sends for an expired access token."""
    return {"status": 498, "error": "tokenExpiredException", "description": "x"}
