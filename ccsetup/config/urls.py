"""Base URL normalization and validation.

Users usually paste a bare host such as ``dmxapi.cn``; these helpers turn
that into a usable ``https://`` URL and reject anything the connectivity
check could never reach.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from ccsetup.utils.errors import InvalidURLError

ALLOWED_SCHEMES: tuple[str, ...] = ("http", "https")
DEFAULT_SCHEME = "https"

_SCHEME_PREFIXES: tuple[str, ...] = tuple(f"{scheme}://" for scheme in ALLOWED_SCHEMES)

# Any "scheme://" prefix, allowed or not
_ANY_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def ensure_scheme(raw_url: str) -> str:
    """Prepend the default scheme when the URL has none.

    Args:
        raw_url: URL as typed by the user

    Returns:
        The stripped URL, prefixed with ``https://`` unless it already
        carries a ``scheme://`` prefix. Foreign schemes such as ``ftp://``
        are left in place so that validate_url() rejects them. Empty input
        stays empty.
    """
    raw_url = raw_url.strip()
    if not raw_url:
        return ""

    if _ANY_SCHEME_RE.match(raw_url):
        return raw_url

    return f"{DEFAULT_SCHEME}://{raw_url}"


def validate_url(url: str) -> None:
    """Check that a URL can be used as the API base URL.

    Args:
        url: Fully schemed URL

    Raises:
        InvalidURLError: If the URL is empty, unparsable, not http(s),
            or has no host
    """
    if not url:
        raise InvalidURLError("URL cannot be empty")

    try:
        parsed = urlsplit(url)
        # Accessing .port validates the port component
        parsed.port
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL format: {e}") from e

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise InvalidURLError("URL must use the http or https scheme")

    if not parsed.hostname:
        raise InvalidURLError("URL must include a host name")

    if any(ch.isspace() for ch in parsed.netloc):
        raise InvalidURLError(f"Invalid URL format: host '{parsed.netloc}' contains whitespace")


def normalize_url(raw_url: str) -> str:
    """Add a missing scheme and validate the result.

    Args:
        raw_url: URL as typed by the user

    Returns:
        The normalized URL

    Raises:
        InvalidURLError: If the normalized URL is not valid
    """
    url = ensure_scheme(raw_url)
    validate_url(url)
    return url


def extract_host(url: str) -> str:
    """Return the ``host[:port]`` part of a URL.

    Falls back to plain string handling when the URL cannot be parsed or
    carries no scheme: the scheme prefix is stripped and everything from
    the first ``/`` on is dropped.

    Args:
        url: URL to inspect

    Returns:
        Host (with port if present), or an empty string for empty input
    """
    if not url:
        return ""

    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        netloc = ""

    if netloc:
        # Drop any user:password@ prefix
        return netloc.rpartition("@")[2]

    remainder = url
    for prefix in _SCHEME_PREFIXES:
        remainder = remainder.removeprefix(prefix)
    return remainder.split("/", 1)[0]


def token_page_url(url: str) -> str:
    """Build the page where a token for this endpoint can be obtained."""
    host = extract_host(url)
    if not host:
        return ""
    return f"https://{host}/token"


__all__ = [
    "ALLOWED_SCHEMES",
    "DEFAULT_SCHEME",
    "ensure_scheme",
    "validate_url",
    "normalize_url",
    "extract_host",
    "token_page_url",
]
