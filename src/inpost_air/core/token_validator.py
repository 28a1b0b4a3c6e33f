"""Offline access token validation for the InPost Air client.

Decides whether the stored access token is still usable without
contacting the service. Signatures are not checked; the service does
that on every request.
"""

from __future__ import annotations

import binascii
import re
import time
from datetime import UTC, datetime

from jwt.utils import base64url_decode
from pydantic import ValidationError

from ..errors import TokenMalformedError
from ..models import TokenPayload

BEARER_PREFIX = "Bearer "

# "Bearer " followed by three base64url segments
_BEARER_TOKEN_RE = re.compile(r"Bearer [A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*")


class TokenValidator:
    """Expiry check for bearer access tokens."""

    def is_well_formed(self, token: str | None) -> bool:
        """Check if token has the ``Bearer <jwt>`` shape."""
        return bool(token) and _BEARER_TOKEN_RE.fullmatch(token) is not None

    def decode_payload(self, token: str) -> TokenPayload:
        """Decode the payload of a bearer token without verification.

        Args:
            token: Access token including its ``Bearer `` prefix.

        Returns:
            Token payload.

        Raises:
            TokenMalformedError: If the payload cannot be decoded or has
                no integer ``exp`` claim.
        """
        segments = token.removeprefix(BEARER_PREFIX).split(".")
        if len(segments) != 3:
            msg = "Auth token is not a three-part token"
            raise TokenMalformedError(msg)

        # Only the payload is read; header and signature are left to the service
        try:
            payload = base64url_decode(segments[1])
        except binascii.Error as e:
            raise TokenMalformedError(f"Couldn't decode auth token: {e}", cause=e) from e

        try:
            return TokenPayload.model_validate_json(payload)
        except ValidationError as e:
            raise TokenMalformedError("Auth token has no usable exp claim", cause=e) from e

    def expires_at(self, token: str) -> datetime:
        """Get token expiration as an aware datetime."""
        exp = self.decode_payload(token).exp
        try:
            return datetime.fromtimestamp(exp, tz=UTC)
        except (OverflowError, OSError, ValueError) as e:
            raise TokenMalformedError(f"Auth token exp out of range: {exp}", cause=e) from e

    def is_valid(self, token: str | None) -> bool:
        """Check if token is present, well formed and not yet expired.

        Raises:
            TokenMalformedError: If a well-formed token cannot be decoded.
        """
        if not self.is_well_formed(token):
            return False

        now = datetime.fromtimestamp(time.time(), tz=UTC)
        return now < self.expires_at(token)
