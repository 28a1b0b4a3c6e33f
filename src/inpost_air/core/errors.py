"""Centralized error factory for the InPost Air client.

Turns raw API responses into typed client errors.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import InvalidResponseError, RemoteRejectedError
from ..models import APIError

M = TypeVar("M", bound=BaseModel)


class ErrorFactory:
    """Consistent creation of errors from API responses."""

    @staticmethod
    def from_response(status_code: int, body: bytes) -> RemoteRejectedError:
        """Create error from a non-success response.

        Args:
            status_code: HTTP status code.
            body: Raw response body.

        Returns:
            RemoteRejectedError carrying the API error code.
        """
        api_error = APIError.from_body(body)
        return RemoteRejectedError(
            status_code,
            api_error.error,
            api_error.description,
        )

    @staticmethod
    def parse_success(model: type[M], status_code: int, body: bytes) -> M:
        """Parse a success response body into ``model``.

        Raises:
            InvalidResponseError: If the body does not match the model.
        """
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Unexpected {model.__name__} body",
                status_code=status_code,
                cause=e,
            ) from e
