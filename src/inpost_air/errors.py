"""Error classes for the InPost Air client.

Structured error hierarchy with error codes and a dictionary form
for structured logging.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

TOKEN_EXPIRED_ERROR = "tokenExpiredException"


class ErrorCode(StrEnum):
    """Standardized error codes for the client."""

    # Authentication errors (1xxx)
    NOT_LOGGED_IN = "AUTH_1001"
    TOKEN_MALFORMED = "AUTH_1002"

    # Remote API errors (2xxx)
    REMOTE_REJECTED = "API_2001"
    INVALID_RESPONSE = "API_2002"

    # Network errors (3xxx)
    NETWORK_ERROR = "NET_3001"
    TIMEOUT_ERROR = "NET_3002"

    # Configuration errors (4xxx)
    CONFIG_STORE_ERROR = "CFG_4001"
    INVALID_CONFIG = "CFG_4002"


class InPostError(Exception):
    """Base error for the client with structured error information."""

    def __init__(
        self,
        message: str,
        code: ErrorCode | str,
        *,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class NotLoggedInError(InPostError):
    """No refresh token is available; the login flow has to be run."""

    def __init__(self, message: str = "Please log in again (--login).") -> None:
        super().__init__(message, ErrorCode.NOT_LOGGED_IN)


class TokenMalformedError(InPostError):
    """Access token looks like a bearer JWT but its payload cannot be read."""

    def __init__(
        self,
        message: str = "Couldn't validate auth token",
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.TOKEN_MALFORMED,
            details={"cause": str(cause)} if cause else None,
        )
        self.__cause__ = cause


class RemoteRejectedError(InPostError):
    """The service answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        error_code: str = "",
        description: str = "",
    ) -> None:
        super().__init__(
            f"[{status_code}] {error_code}",
            ErrorCode.REMOTE_REJECTED,
            status_code=status_code,
            details={"error": error_code, "description": description},
        )
        self.error_code = error_code
        self.description = description

    @property
    def is_token_expired(self) -> bool:
        """Whether the service reported an expired access token."""
        return self.error_code == TOKEN_EXPIRED_ERROR


class InvalidResponseError(InPostError):
    """A success response body could not be parsed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_RESPONSE,
            status_code=status_code,
            details={"cause": str(cause)} if cause else None,
        )
        self.__cause__ = cause


class NetworkError(InPostError):
    """Network request failed."""

    def __init__(
        self,
        message: str = "Network request failed",
        *,
        code: ErrorCode = ErrorCode.NETWORK_ERROR,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(details or {})
        if cause:
            merged["cause"] = str(cause)
        super().__init__(message, code, details=merged)
        self.__cause__ = cause


class RequestTimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        timeout_seconds: float | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            code=ErrorCode.TIMEOUT_ERROR,
            cause=cause,
            details={"timeout_seconds": timeout_seconds} if timeout_seconds else None,
        )
        self.status_code = 408


class ConfigStoreError(InPostError):
    """The config store failed to persist the session."""

    def __init__(
        self,
        message: str = "Couldn't save config",
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.CONFIG_STORE_ERROR,
            details={"cause": str(cause)} if cause else None,
        )
        self.__cause__ = cause


class InvalidConfigError(InPostError):
    """Invalid client configuration."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_CONFIG,
            details={"field": field} if field else None,
        )
