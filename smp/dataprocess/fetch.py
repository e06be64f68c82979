# smp/dataprocess/fetch.py
"""
Asynchronous retrieval of a JSON object from an HTTP endpoint.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import httpx

from smp.executor.errors import SmpError
from smp.utils.logging import get_logger

DEFAULT_URL = "https://jsonplaceholder.typicode.com/todos/1"


class FetchError(SmpError):
    """Raised when the endpoint cannot be reached or does not return a JSON object."""
    pass


async def fetch_json(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 10.0,
) -> Dict[str, Any]:
    """
    GET `url` and return the decoded JSON object.

    Args:
        url: Absolute http(s) URL.
        client: Optional client to reuse (tests pass one with a mock transport).
        timeout: Request timeout in seconds when a client is created here.

    Raises:
        FetchError: Invalid URL, transport error, non-200 status, or a body
            that is not a JSON object.
    """
    log = get_logger(__name__)
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise FetchError(f"Invalid URL: {url}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise FetchError(f"Invalid URL: {url}")

    log.debug("Starting request: %s", url)
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url)
    except httpx.HTTPError as e:
        raise FetchError(f"Request failed: {e}") from e

    log.debug("Status code: %d", response.status_code)
    if response.status_code != 200:
        raise FetchError(f"API request failed (status code: {response.status_code})")

    try:
        data = response.json()
    except ValueError as e:
        raise FetchError("Failed to process JSON data") from e
    if not isinstance(data, dict):
        raise FetchError("Failed to process JSON data")
    return data


def pretty_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
