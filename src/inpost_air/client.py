"""InPost Air client."""

from __future__ import annotations

from typing import Any

import httpx

from .config import ClientConfig
from .core.http_executor import Transport
from .core.point_fetcher import PointFetcher
from .core.session_manager import SessionManager
from .core.token_validator import TokenValidator
from .http import create_http_client
from .models import Point
from .store import ConfigStore
from .telemetry import traced


class InPostAirClient:
    """Synchronous InPost Mobile API client.

    One instance owns one session; calls on the same instance must not
    overlap.
    """

    def __init__(
        self,
        store: ConfigStore,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._http = create_http_client(self.config, transport=transport)
        self._validator = TokenValidator()
        self._sessions = SessionManager(self.config, store)
        self._transport = Transport(self._http, lambda: self._sessions.auth_token)
        self._sessions.bind(self._transport)
        self._points = PointFetcher(self._transport, self._sessions, self._validator)

    def __enter__(self) -> InPostAirClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._http.close()

    @property
    def is_logged_in(self) -> bool:
        """Check if a refresh token is available."""
        return self._sessions.has_refresh_token()

    def is_access_token_valid(self) -> bool:
        """Check if the stored access token is present and not expired."""
        return self._validator.is_valid(self._sessions.auth_token)

    @traced("get_point")
    def get_point(self, point_id: str) -> Point:
        """Fetch a point, refreshing the access token when needed."""
        return self._points.get_point(point_id)

    @traced("authenticate")
    def authenticate(self) -> None:
        """Exchange the refresh token for a new access token."""
        self._sessions.authenticate()

    @traced("send_login_code")
    def send_login_code(self, phone_number: str) -> None:
        """Start the login flow by requesting an SMS code."""
        self._sessions.request_login_code(phone_number)

    @traced("confirm_login_code")
    def confirm_login_code(self, phone_number: str, code: str) -> None:
        """Finish the login flow with the SMS code."""
        self._sessions.confirm_login_code(phone_number, code)
