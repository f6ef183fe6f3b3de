"""HTTP client utilities and helpers."""

from typing import Any

import httpx

from netrum_monitor.helpers.constants import DEFAULT_TIMEOUT
from netrum_monitor.helpers.http_models import JsonResponse
from netrum_monitor.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, **kwargs: Any
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Per-call timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs (base_url, transport...)

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from netrum_monitor.helpers.http import create_http_client

        async with create_http_client(timeout=10.0) as client:
            response = await client.get("https://example.com")
        ```
    """
    headers = {"Accept": "application/json", **kwargs.pop("headers", {})}
    return httpx.AsyncClient(timeout=timeout, headers=headers, **kwargs)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    data: dict[str, Any],
) -> JsonResponse:
    """Post JSON data to a URL and return the decoded JSON response.

    Unlike a fire-and-forget helper this does not swallow errors. Network
    failures and undecodable bodies propagate to the caller. The HTTP status
    is not checked: error replies still carry a JSON body worth reading.

    Args:
        client: HTTP client instance (its timeout applies to the call)
        url: URL to post to
        data: JSON data to post

    Returns:
        Parsed JSON response

    Raises:
        httpx.HTTPError: On transport failures and timeouts
        ValueError: If the body is not valid JSON

    Example:
        ```python
        async with create_http_client() as client:
            response = await post_json(client, "https://api.example.com/submit", {"key": "value"})
        ```
    """
    response = await client.post(url, json=data)
    logger.debug("POST %s -> %s", response.request.url, response.status_code)
    return response.json()


__all__ = [
    "create_http_client",
    "post_json",
]
