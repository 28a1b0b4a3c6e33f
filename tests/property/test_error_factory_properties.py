"""Property tests for ErrorFactory.

Property 6: Error Handling Consistency
- Any non-success response becomes a RemoteRejectedError
- The status code always comes from the response, not the body
"""

from __future__ import annotations

import json

from hypothesis import given, settings, strategies as st

from inpost_air.core.errors import ErrorFactory
from inpost_air.errors import InvalidResponseError, RemoteRejectedError
from inpost_air.models import AuthenticateResponse

# Strategies for generating test data
http_status_codes = st.integers(min_value=300, max_value=599)
error_codes = st.text(
    min_size=1,
    max_size=50,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)
descriptions = st.text(max_size=100)


class TestErrorFactoryProperties:
    """Property tests for ErrorFactory."""

    @given(status_code=http_status_codes, body_status=st.integers(0, 999), error=error_codes, description=descriptions)
    @settings(max_examples=100)
    def test_json_body_fields_are_kept(
        self,
        status_code: int,
        body_status: int,
        error: str,
        description: str,
    ) -> None:
        """Property 6: Error code and description come from the body."""
        body = json.dumps({"status": body_status, "error": error, "description": description}).encode()

        result = ErrorFactory.from_response(status_code, body)

        assert isinstance(result, RemoteRejectedError)
        assert result.status_code == status_code
        assert result.error_code == error
        assert result.description == description
        assert str(result) == f"[{status_code}] {error}"

    @given(status_code=http_status_codes, body=st.binary(max_size=200))
    @settings(max_examples=100)
    def test_any_body_produces_error(self, status_code: int, body: bytes) -> None:
        """Property 6: Arbitrary bodies never break error creation."""
        result = ErrorFactory.from_response(status_code, body)

        assert isinstance(result, RemoteRejectedError)
        assert result.status_code == status_code

    @given(body=st.binary(max_size=100).filter(lambda b: b"authToken" not in b))
    @settings(max_examples=100)
    def test_parse_success_without_token_raises(self, body: bytes) -> None:
        """Property 6: Bodies lacking the token never parse as success."""
        try:
            ErrorFactory.parse_success(AuthenticateResponse, 200, body)
        except InvalidResponseError as e:
            assert e.status_code == 200
        else:
            raise AssertionError("parsed a body without authToken")
