"""HTTP client utilities and helpers."""

from typing import Any

import httpx

from ethrpc.errors import TransportError
from ethrpc.helpers.constants import DEFAULT_TIMEOUT
from ethrpc.helpers.http_models import JsonValue
from ethrpc.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> httpx.Client:
    """Create a configured httpx Client.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.Client kwargs

    Returns:
        Configured Client instance

    Example:
        ```python
        from ethrpc.helpers.http import create_http_client

        with create_http_client(timeout=60.0) as client:
            response = client.post("http://localhost:8545", json=payload)
        ```
    """
    return httpx.Client(timeout=timeout, **kwargs)


def post_json(
    url: str,
    data: dict[str, Any],
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> JsonValue:
    """Post JSON data to a URL and return the decoded JSON response.

    Every failure is raised; a JSON ``null`` body is returned as None.

    Args:
        url: URL to post to
        data: JSON data to post
        timeout: Timeout in seconds for this request
        client: Optional pooled client; a one-shot request is made without one

    Returns:
        Parsed JSON response

    Raises:
        TransportError: On connection failure, timeout, non-2xx status or
            a body that is not valid JSON
    """
    try:
        if client is None:
            response = httpx.post(url, json=data, timeout=timeout)
        else:
            response = client.post(url, json=data, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.warning(
            "HTTP error posting to %s: %s %s",
            url,
            status_code,
            e.response.text[:100] if e.response.text else "",
        )
        msg = f"HTTP status {status_code}"
        raise TransportError(msg, url=url, status_code=status_code) from e
    except httpx.TimeoutException as e:
        logger.warning("Timeout posting to %s after %ss", url, timeout)
        msg = f"Request timed out after {timeout}s"
        raise TransportError(msg, url=url) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("HTTP error posting to %s: %s", url, e)
        msg = f"HTTP request failed: {e}"
        raise TransportError(msg, url=url) from e

    try:
        return response.json()
    except ValueError as e:
        logger.warning("Invalid JSON body from %s", url)
        msg = "Response body is not valid JSON"
        raise TransportError(msg, url=url, status_code=response.status_code) from e


__all__ = [
    "create_http_client",
    "post_json",
]
