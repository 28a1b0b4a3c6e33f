"""Session management for the InPost Air client.

Owns the session tokens, drives the SMS login flow and the refresh
token exchange, and persists every token change through the config
store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from ..errors import ConfigStoreError, NotLoggedInError
from ..models import AuthenticateResponse, ConfirmCodeResponse, Session
from ..telemetry import get_logger
from .errors import ErrorFactory

if TYPE_CHECKING:
    from ..config import ClientConfig
    from ..store import ConfigStore
    from .http_executor import Transport

AUTHENTICATE_PATH = "/v1/authenticate"
SEND_SMS_CODE_PATH = "/v1/sendSMSCode"
CONFIRM_SMS_CODE_PATH = "/v1/confirmSMSCode"


class SessionManager:
    """Authentication state machine for one client instance."""

    def __init__(
        self,
        config: ClientConfig,
        store: ConfigStore,
    ) -> None:
        """Initialize session manager and load the persisted session.

        Args:
            config: Client configuration.
            store: Config store the session is read from and saved to.
        """
        self.config = config
        self._store = store
        self._transport: Transport | None = None
        self._logger = get_logger()
        self._session = Session.from_bytes(store.load())

    @property
    def session(self) -> Session:
        """Get current session."""
        return self._session

    @property
    def auth_token(self) -> str:
        """Get current access token, or an empty string."""
        return self._session.auth_token

    def bind(self, transport: Transport) -> None:
        """Attach the transport used for authentication requests."""
        self._transport = transport

    def has_refresh_token(self) -> bool:
        """Check if a refresh token is available."""
        return self._session.has_refresh_token

    def build_authenticate_request(self) -> dict[str, Any]:
        """Build refresh token exchange payload.

        Raises:
            NotLoggedInError: If no refresh token is available.
        """
        if not self._session.has_refresh_token:
            raise NotLoggedInError()

        return {
            "refreshToken": self._session.refresh_token,
            "phoneOS": self.config.phone_os,
        }

    def authenticate(self) -> None:
        """Exchange the refresh token for a new access token.

        Raises:
            NotLoggedInError: If no refresh token is available.
            RemoteRejectedError: If the service rejects the refresh token.
        """
        payload = self.build_authenticate_request()
        status, body = self._send("POST", AUTHENTICATE_PATH, payload)

        if status != httpx.codes.OK:
            error = ErrorFactory.from_response(status, body)
            self._logger.warning("Authentication rejected", status=status, error=error.error_code)
            raise error

        response = ErrorFactory.parse_success(AuthenticateResponse, status, body)
        self._session.auth_token = response.auth_token
        self.persist()
        self._logger.info("Authenticated")

    def request_login_code(self, phone_number: str) -> None:
        """Ask the service to send an SMS code to ``phone_number``.

        Raises:
            RemoteRejectedError: If the service refuses to send the code.
        """
        status, body = self._send("POST", SEND_SMS_CODE_PATH, {"phoneNumber": phone_number})

        if status != httpx.codes.OK:
            raise ErrorFactory.from_response(status, body)

        self._logger.info("SMS code requested")

    def confirm_login_code(self, phone_number: str, code: str) -> None:
        """Confirm the SMS code and store the issued token pair.

        Raises:
            RemoteRejectedError: If the service rejects the code.
        """
        status, body = self._send(
            "POST",
            CONFIRM_SMS_CODE_PATH,
            {
                "phoneNumber": phone_number,
                "smsCode": code,
                "phoneOS": self.config.phone_os,
            },
        )

        if status != httpx.codes.OK:
            raise ErrorFactory.from_response(status, body)

        response = ErrorFactory.parse_success(ConfirmCodeResponse, status, body)
        self._session.refresh_token = response.refresh_token
        self._session.auth_token = response.auth_token
        self.persist()
        self._logger.info("Logged in")

    def persist(self) -> None:
        """Save the session through the config store.

        Raises:
            ConfigStoreError: If the store cannot save.
        """
        try:
            self._store.save(self._session.to_bytes())
        except OSError as e:
            raise ConfigStoreError(f"Couldn't save config: {e}", cause=e) from e

    def _send(self, method: str, path: str, body: dict[str, Any]) -> tuple[int, bytes]:
        if self._transport is None:
            msg = "SessionManager has no transport bound"
            raise RuntimeError(msg)
        return self._transport.send(method, path, body)
