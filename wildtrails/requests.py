"""
Low-level HTTP request library for wildtrails API communication.
This module performs single GET requests and maps every transport-level
failure onto TransportError. Requests are never retried.
"""
from __future__ import annotations

import asyncio
import json
import logging

import aiohttp

from wildtrails.const import REQUEST_TIMEOUT
from wildtrails.errors import TransportError

_LOGGER = logging.getLogger(__name__)


async def make_request(
    url: str,
    headers: dict,
    params: dict | None = None,
    session: aiohttp.ClientSession | None = None,
    timeout: int = REQUEST_TIMEOUT,
):
    """
    Make a GET request and return the decoded JSON body.

    Args:
        url: Target URL for the request
        headers: HTTP headers dictionary
        params: URL query parameters (optional)
        session: Session to reuse; a short-lived one is created when omitted
        timeout: Total timeout in seconds

    Returns:
        Parsed JSON response

    Raises:
        TransportError: On network errors, timeouts, non-200 responses or
            bodies that are not valid JSON
    """
    timeout_config = aiohttp.ClientTimeout(total=timeout)
    owns_session = session is None
    if owns_session:
        session = aiohttp.ClientSession(timeout=timeout_config)

    try:
        async with session.get(url, headers=headers, params=params, timeout=timeout_config) as response:
            return await _process_response(response, url)
    except (asyncio.TimeoutError, TimeoutError) as e:
        _LOGGER.debug("Timeout on GET %s (params %s) after %ss", url, params, timeout)
        raise TransportError(f"Timeout after {timeout}s requesting {url}") from e
    except aiohttp.ClientError as e:
        _LOGGER.debug("HTTP error on GET %s (params %s): %s", url, params, e)
        raise TransportError(f"Request to {url} failed: {e}") from e
    finally:
        if owns_session:
            await session.close()


async def _process_response(response, url: str):
    """
    Process HTTP response and extract JSON data.

    Args:
        response: aiohttp response object
        url: Request URL (for logging)

    Returns:
        Parsed JSON response

    Raises:
        TransportError: For non-200 responses or undecodable bodies
    """
    content_type = response.headers.get('Content-Type', '')
    try:
        text = await response.text()
    except UnicodeDecodeError as e:
        _LOGGER.debug(
            "Undecodable body from %s: status %s, content-type: %s: %s",
            url, response.status, content_type, e
        )
        raise TransportError(f"Undecodable {content_type} body from {url}") from e

    if response.status != 200:
        _LOGGER.debug(
            "Received error response from %s: status %s, content-type: %s, body preview: %s",
            url, response.status, content_type, text[:200]
        )
        raise TransportError(f"HTTP {response.status} from {url}")

    # The endpoint does not always label its JSON as application/json.
    try:
        return json.loads(text)
    except ValueError as e:
        _LOGGER.debug(
            "Failed to decode JSON from %s (content-type: %s): %s, body preview: %s",
            url, content_type, e, text[:200]
        )
        raise TransportError(f"Expected JSON but got {content_type} from {url}") from e
