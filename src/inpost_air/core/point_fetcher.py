"""Point lookups for the InPost Air client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from ..models import Point
from ..telemetry import get_logger
from .errors import ErrorFactory

if TYPE_CHECKING:
    from .http_executor import Transport
    from .session_manager import SessionManager
    from .token_validator import TokenValidator

POINT_PATH = "/v2/points/{point_id}"

# Re-authentications allowed after the service reports an expired token
MAX_TOKEN_RETRIES = 1


class PointFetcher:
    """Fetches points, re-authenticating once when the token expired."""

    def __init__(
        self,
        transport: Transport,
        sessions: SessionManager,
        validator: TokenValidator,
    ) -> None:
        self._transport = transport
        self._sessions = sessions
        self._validator = validator
        self._logger = get_logger()

    def get_point(self, point_id: str) -> Point:
        """Fetch a point by its identifier.

        Args:
            point_id: Point identifier, used as given.

        Returns:
            The fetched point.

        Raises:
            NotLoggedInError: If authentication is needed without a refresh token.
            RemoteRejectedError: If the service rejects the request, including
                a second token expiry right after re-authenticating.
            InvalidResponseError: If the point body cannot be parsed.
        """
        path = POINT_PATH.format(point_id=point_id)

        retries_left = MAX_TOKEN_RETRIES
        while True:
            if self._sessions.has_refresh_token() and not self._validator.is_valid(
                self._sessions.auth_token
            ):
                self._sessions.authenticate()

            status, body = self._transport.send("GET", path)

            if status == httpx.codes.OK:
                return ErrorFactory.parse_success(Point, status, body)

            error = ErrorFactory.from_response(status, body)
            if not error.is_token_expired or retries_left == 0:
                raise error

            retries_left -= 1
            self._logger.info("Access token expired, re-authenticating", point_id=point_id)
            self._sessions.authenticate()
