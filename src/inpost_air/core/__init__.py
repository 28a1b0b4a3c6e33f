"""Core components for the InPost Air client.

Transport, token validation, session handling and point lookups
wired together by the client facade.
"""

from __future__ import annotations

from .errors import ErrorFactory
from .http_executor import Transport
from .point_fetcher import PointFetcher
from .session_manager import SessionManager
from .token_validator import TokenValidator

__all__ = [
    "ErrorFactory",
    "PointFetcher",
    "SessionManager",
    "TokenValidator",
    "Transport",
]
