"""Shared HTTP client configuration."""

import httpx

from abuseipdb_sdk._version import __version__

API_ROOT = "https://api.abuseipdb.com/api/v2"
USER_AGENT = f"abuseipdb-sdk/{__version__}"
DEFAULT_TIMEOUT = 30.0


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests. The dispatcher sends
            absolute URLs, so this only affects direct use of the client.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": USER_AGENT},
    )
