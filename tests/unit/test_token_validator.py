"""Unit tests for TokenValidator."""

from __future__ import annotations

import base64
import json
import time
from datetime import UTC, datetime
from unittest.mock import patch

import pytest

from inpost_air.core.token_validator import TokenValidator
from inpost_air.errors import TokenMalformedError


def b64(data: dict | bytes) -> str:
    raw = data if isinstance(data, bytes) else json.dumps(data).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def bearer(payload: dict | bytes, header: dict | None = None) -> str:
    return f"Bearer {b64(header or {'alg': 'HS256', 'typ': 'JWT'})}.{b64(payload)}.c2ln"


class TestIsValid:
    @pytest.fixture
    def validator(self) -> TokenValidator:
        return TokenValidator()

    def test_future_expiry(self, validator, token_factory) -> None:
        assert validator.is_valid(token_factory(exp_offset=600))

    def test_past_expiry(self, validator, token_factory) -> None:
        assert not validator.is_valid(token_factory(exp_offset=-1))

    def test_expiry_is_exclusive(self, validator) -> None:
        token = bearer({"exp": 1_700_000_000})

        with patch.object(time, "time", return_value=1_700_000_000.0):
            assert not validator.is_valid(token)
        with patch.object(time, "time", return_value=1_699_999_999.5):
            assert validator.is_valid(token)

    @pytest.mark.parametrize(
        "token",
        [
            None,
            "",
            "Bearer",
            "Bearer ",
            "eyJhbGciOiJIUzI1NiJ9.eyJleHAiOjF9.c2ln",
            "bearer eyJhbGciOiJIUzI1NiJ9.eyJleHAiOjF9.c2ln",
            "Bearer eyJhbGciOiJIUzI1NiJ9.eyJleHAiOjF9",
            "Bearer a.b.c.d",
            "Bearer  a.b.c",
            "Bearer a+b.c.d",
        ],
    )
    def test_wrong_shape_is_invalid(self, validator, token) -> None:
        assert validator.is_valid(token) is False

    def test_unpadded_payload(self, validator) -> None:
        """Payload segments of every length decode without padding."""
        for pad in ("", "x", "xx", "xxx"):
            token = bearer({"exp": int(time.time()) + 600, "p": pad})
            assert validator.is_valid(token)

    def test_header_is_not_read(self, validator) -> None:
        """Only the payload segment decides validity."""
        token = "Bearer Zm9v." + b64({"exp": 9_999_999_999}) + ".sig"

        assert validator.is_valid(token) is True

    def test_expired_token_with_unreadable_header(self, validator) -> None:
        token = "Bearer " + b64(b"not json") + "." + b64({"exp": 1}) + "."

        assert validator.is_valid(token) is False

    def test_payload_with_bad_padding_raises(self, validator) -> None:
        with pytest.raises(TokenMalformedError, match="decode"):
            validator.is_valid("Bearer " + b64({"alg": "HS256"}) + ".a.sig")

    def test_garbage_payload_raises(self, validator) -> None:
        token = "Bearer " + b64({"alg": "HS256"}) + "." + b64(b"not json") + ".c2ln"

        with pytest.raises(TokenMalformedError):
            validator.is_valid(token)

    def test_missing_exp_raises(self, validator) -> None:
        with pytest.raises(TokenMalformedError, match="exp"):
            validator.is_valid(bearer({"sub": "user"}))

    def test_non_integer_exp_raises(self, validator) -> None:
        with pytest.raises(TokenMalformedError):
            validator.is_valid(bearer({"exp": "tomorrow"}))


def test_expires_at(token_factory) -> None:
    validator = TokenValidator()
    token = bearer({"exp": 1_700_000_000})

    assert validator.expires_at(token) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)
