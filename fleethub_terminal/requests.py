"""
Low-level HTTP request library for Terminal API communication.
This module issues single GET requests and decodes the JSON body.
There is no retry: every call is exactly one network round trip.
"""
import asyncio
import json
import logging

import aiohttp


_LOGGER = logging.getLogger(__name__)

DEFAULT_HEADERS = {"accept": "application/json"}


class TerminalApiError(Exception):
    """Base class for every failure raised by the Terminal API client."""


class ApiTransportError(TerminalApiError):
    """Exception raised when the request never completed (connection, DNS, timeout)."""

    def __init__(self, url: str, error: BaseException):
        self.url = url
        self.error = error
        super().__init__(f"Transport error for {url}: {type(error).__name__}: {error}")


class ApiDecodeError(TerminalApiError):
    """Exception raised when a body is not JSON or does not have the expected shape."""


class ApiResponseError(TerminalApiError):
    """Exception raised for a non-2xx status when strict status checking is enabled."""

    def __init__(self, url: str, status: int, body):
        self.url = url
        self.status = status
        self.body = body
        super().__init__(f"HTTP {status} from {url}: {body}")


def build_url(base_url: str, *parts: str) -> str:
    """Join the base URL and path segments with single slashes."""
    segments = [base_url.rstrip("/")]
    segments.extend(str(part).strip("/") for part in parts)
    return "/".join(segments)


async def make_request(
    session: aiohttp.ClientSession,
    url: str,
    headers: dict = None,
    timeout: float | None = None,
    strict_status: bool = False,
):
    """
    Make a single GET request and return the decoded JSON body.

    Args:
        session: aiohttp session used for the request
        url: Target URL for the request
        headers: HTTP headers dictionary (defaults to accept: application/json)
        timeout: Total timeout in seconds, or None for no timeout
        strict_status: Raise ApiResponseError for a non-2xx status instead of
            decoding the body as if the call succeeded

    Returns:
        Parsed JSON response

    Raises:
        ApiTransportError: If the request did not complete
        ApiDecodeError: If the body is not valid JSON
        ApiResponseError: If strict_status is set and the status is not 2xx
    """
    if headers is None:
        headers = DEFAULT_HEADERS
    timeout_config = aiohttp.ClientTimeout(total=timeout)

    _LOGGER.debug("GET %s", url)
    try:
        async with session.get(url, headers=headers, timeout=timeout_config) as response:
            return await _process_response(response, url, strict_status)
    except TerminalApiError:
        raise
    except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
        _LOGGER.debug("GET %s failed: %s", url, e)
        raise ApiTransportError(url, e) from e


async def _process_response(response, url: str, strict_status: bool = False):
    """
    Read the response body and decode it as JSON.

    The status code is not consulted unless strict_status is set, so an error
    status with a well-formed JSON body decodes exactly like a success.

    Raises:
        ApiDecodeError: If the body is not valid text or not valid JSON
        ApiResponseError: If strict_status is set and the status is not 2xx
    """
    try:
        text = await response.text()
    except UnicodeDecodeError as e:
        _LOGGER.warning("Undecodable body from %s: status %s", url, response.status)
        raise ApiDecodeError(f"Body from {url} is not valid text: {e}") from e

    if strict_status and not 200 <= response.status < 300:
        try:
            body = json.loads(text)
        except ValueError:
            body = text[:200]
        _LOGGER.warning("Received HTTP %s from %s", response.status, url)
        raise ApiResponseError(url, response.status, body)

    try:
        return json.loads(text)
    except ValueError as e:
        content_type = response.headers.get("Content-Type", "")
        _LOGGER.warning(
            "Failed to decode JSON from %s: status %s, content-type: %s, body preview: %s",
            url, response.status, content_type, text[:200]
        )
        raise ApiDecodeError(
            f"Expected JSON from {url} but got {content_type or 'unknown content type'}: {e}"
        ) from e
