"""HTTP transport for the InPost Air client.

Sends requests with the session's authorization and hands back the
raw status and body; interpreting them is left to the caller.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx

from ..errors import NetworkError, RequestTimeoutError
from ..telemetry import get_logger, trace_operation

BODY_METHODS = frozenset({"POST", "PUT"})


class Transport:
    """Synchronous transport bound to one HTTP client and one session."""

    def __init__(
        self,
        client: httpx.Client,
        authorization: Callable[[], str],
    ) -> None:
        """Initialize transport.

        Args:
            client: HTTP client with base URL and fixed headers.
            authorization: Returns the current access token, or an empty
                string when there is none.
        """
        self._client = client
        self._authorization = authorization
        self._logger = get_logger()

    def send(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> tuple[int, bytes]:
        """Send a request and return its status code and body.

        Args:
            method: HTTP method.
            path: Path resolved against the client base URL.
            body: JSON payload for POST and PUT requests.

        Returns:
            Status code and raw response body.

        Raises:
            RequestTimeoutError: If the request timed out.
            NetworkError: On any other transport failure.
        """
        method = method.upper()
        headers: dict[str, str] = {}
        kwargs: dict[str, Any] = {}

        if method in BODY_METHODS:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body if body is not None else {}

        token = self._authorization()
        if token:
            headers["Authorization"] = token

        with trace_operation(
            "http_request",
            attributes={"http.method": method, "http.route": path},
        ) as span:
            try:
                response = self._client.request(method, path, headers=headers, **kwargs)
            except httpx.TimeoutException as e:
                self._logger.error("Request timed out", method=method, path=path)
                raise RequestTimeoutError(
                    f"Request to {path} timed out",
                    timeout_seconds=self._client.timeout.read,
                    cause=e,
                ) from e
            except httpx.HTTPError as e:
                self._logger.error(
                    "Error sending request to API endpoint",
                    method=method,
                    path=path,
                    error=str(e),
                )
                raise NetworkError(f"Error sending request to {path}: {e}", cause=e) from e

            span.set_attribute("http.status_code", response.status_code)

        self._logger.debug(
            "API response",
            method=method,
            path=path,
            status=response.status_code,
        )
        return response.status_code, response.content
