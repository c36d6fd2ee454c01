"""API connectivity check.

Sends the smallest possible Messages API request (one token, one short user
message) to confirm that a base URL and token work together. The call is
made once per invocation; retrying is up to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ccsetup.integrations.errors import (
    APIConnectionError,
    APIError,
    APIPermissionError,
    AuthError,
    EndpointError,
)

logger = logging.getLogger(__name__)

MESSAGES_PATH = "/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
PROBE_MODEL = "claude-haiku-4-5-20251001"
PROBE_TIMEOUT = 30.0  # seconds


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a successful connectivity check.

    Attributes:
        status_code: HTTP status code of the response (200 or 429)
        rate_limited: True when the API answered 429, which still proves
            that the token was accepted
    """

    status_code: int
    rate_limited: bool = False


def build_probe_request(token: str) -> tuple[dict[str, str], dict[str, object]]:
    """Build the headers and JSON body of the probe request.

    Args:
        token: API token sent in the x-api-key header

    Returns:
        Tuple of (headers, body)
    """
    headers = {
        "Content-Type": "application/json",
        "x-api-key": token,
        "anthropic-version": ANTHROPIC_VERSION,
    }
    body: dict[str, object] = {
        "model": PROBE_MODEL,
        "max_tokens": 1,
        "messages": [{"role": "user", "content": "Hi"}],
    }
    return headers, body


def probe_url(base_url: str) -> str:
    """Return the messages endpoint for a base URL."""
    return base_url.rstrip("/") + MESSAGES_PATH


def probe(base_url: str, token: str, *, timeout: float = PROBE_TIMEOUT) -> ProbeResult:
    """Check that ``token`` is accepted by the API at ``base_url``.

    Args:
        base_url: API base URL (a trailing slash is ignored)
        token: API token
        timeout: Request timeout in seconds

    Returns:
        ProbeResult for HTTP 200 and HTTP 429

    Raises:
        APIConnectionError: If no HTTP response was received
        AuthError: On HTTP 401, or when the token cannot be sent as a header
        APIPermissionError: On HTTP 403
        EndpointError: On HTTP 404
        APIError: On any other status code
    """
    url = probe_url(base_url)

    # HTTP header values are ASCII only
    if not token.isascii():
        raise AuthError(
            "The API token contains non-ASCII characters: check for stray pasted characters"
        )

    headers, body = build_probe_request(token)

    try:
        resp = httpx.post(url, headers=headers, json=body, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        logger.debug(f"Probe request to {url} failed", exc_info=True)
        raise APIConnectionError(f"Connection failed: {e}") from e

    logger.debug(f"Probe response from {url}: HTTP {resp.status_code}")
    return classify_response(resp)


def classify_response(resp: httpx.Response) -> ProbeResult:
    """Map a probe response to a result or an APIError.

    Args:
        resp: Response to the probe request

    Returns:
        ProbeResult for HTTP 200 and HTTP 429
    """
    status = resp.status_code

    if status == 200:
        return ProbeResult(status_code=status)
    if status == 429:
        # Rate limiting happens after authentication succeeded
        return ProbeResult(status_code=status, rate_limited=True)
    if status == 401:
        raise AuthError("Authentication failed: the API token is invalid", status_code=status)
    if status == 403:
        raise APIPermissionError(
            "Permission denied: check the permissions of the API token",
            status_code=status,
        )
    if status == 404:
        raise EndpointError(
            "API endpoint not found: check that the base URL is correct",
            status_code=status,
        )

    message = _error_message(resp)
    if message:
        raise APIError(f"API error ({status}): {message}", status_code=status)
    raise APIError(f"API returned error status code: {status}", status_code=status)


def _error_message(resp: httpx.Response) -> str:
    """Extract ``error.message`` from a JSON error body, or ``""``."""
    try:
        data = resp.json()
    except ValueError:
        return ""

    if not isinstance(data, dict):
        return ""
    error = data.get("error")
    if not isinstance(error, dict):
        return ""
    message = error.get("message")
    return message if isinstance(message, str) else ""


__all__ = [
    "ANTHROPIC_VERSION",
    "MESSAGES_PATH",
    "PROBE_MODEL",
    "PROBE_TIMEOUT",
    "ProbeResult",
    "build_probe_request",
    "classify_response",
    "probe",
    "probe_url",
]
