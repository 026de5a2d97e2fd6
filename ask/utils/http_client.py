"""Shared persistent httpx client for GitHub calls.

A single invocation makes at most three requests; reusing one client keeps
them on one connection pool and one set of default headers.
"""

import httpx

from ask import __version__
from ask.config import get_settings

_general_client: httpx.Client | None = None


def build_client(timeout: float | None = None) -> httpx.Client:
    """Create an httpx client with ask's defaults.

    Args:
        timeout: Request timeout in seconds (default: ASK_HTTP_TIMEOUT)
    """
    if timeout is None:
        timeout = get_settings().http_timeout
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": f"ask/{__version__}"},
    )


def get_general_client() -> httpx.Client:
    """Get persistent httpx client for GitHub calls."""
    global _general_client
    if _general_client is None:
        _general_client = build_client()
    return _general_client


def close_all_clients() -> None:
    """Close the persistent httpx client. Call before the process exits."""
    global _general_client
    if _general_client is not None:
        _general_client.close()
        _general_client = None
