"""HTTP client construction for the InPost Air client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .config import ClientConfig


def create_http_client(
    config: ClientConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create configured sync HTTP client.

    Every request carries the fixed user agent and language headers
    of the mobile application.

    Args:
        config: Client configuration.
        transport: Optional transport override, used by tests.

    Returns:
        Configured httpx.Client.
    """
    return httpx.Client(
        base_url=config.base_url_str,
        timeout=httpx.Timeout(config.timeout),
        headers={
            "User-Agent": config.user_agent,
            "Accept-Language": config.accept_language,
        },
        follow_redirects=False,
        transport=transport,
    )
