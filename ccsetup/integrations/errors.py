"""Errors raised by the API connectivity check.

All errors inherit from APIError, which itself inherits from SetupError to
share the exit code semantics. They are never fatal: the setup wizard
reports them and lets the user fix the URL or the token.
"""

from __future__ import annotations

from ccsetup.utils.errors import SetupError


class APIError(SetupError):
    """The API rejected the probe request.

    Used directly for status codes without a dedicated subclass.

    Attributes:
        status_code: HTTP status code, or None when no response was received
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize the error.

        Args:
            message: Error message describing what went wrong
            status_code: HTTP status code of the response, if any
        """
        super().__init__(message)
        self.status_code = status_code


class APIConnectionError(APIError):
    """The request never produced an HTTP response.

    Covers DNS failures, refused connections, TLS errors and timeouts.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=None)


class AuthError(APIError):
    """HTTP 401: the token is not valid."""


class APIPermissionError(APIError):
    """HTTP 403: the token is valid but lacks permission."""


class EndpointError(APIError):
    """HTTP 404: the messages endpoint does not exist under the base URL."""


__all__ = [
    "APIError",
    "APIConnectionError",
    "AuthError",
    "APIPermissionError",
    "EndpointError",
]
