"""Shared HTTP client configuration."""

import httpx

from oklink_sdk._version import __version__

DEFAULT_BASE_URL = "https://www.oklink.com"
DEFAULT_TIMEOUT_MS = 30_000

# https://www.oklink.com/docs/en/#quickstart-guide-api-authentication
ACCESS_KEY_HEADER = "Ok-Access-Key"


def create_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    base_url: str = DEFAULT_BASE_URL,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout_ms: Request timeout in milliseconds.
        base_url: Base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        base_url=base_url,
        headers={"User-Agent": f"oklink-sdk/{__version__}"},
    )
