"""Custom exceptions and exit codes for CCSETUP.

This module defines the exit codes and the local part of the exception
hierarchy. Errors raised by the connectivity probe live in
``ccsetup.integrations.errors`` and share the same base class.
"""

from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    Only persistence failures are fatal; everything else is recovered
    interactively.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USER_CANCELLED = 130  # Same as a shell reports for SIGINT


class SetupError(Exception):
    """Base exception for CCSETUP errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
        message: The error message
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception.

        Returns:
            The instance exit code if set, otherwise the class default exit code.
        """
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class InvalidURLError(SetupError):
    """A user-supplied base URL is not usable.

    Raised when:
    - The URL is empty
    - The URL cannot be parsed
    - The scheme is not http or https
    - The URL has no host

    Always recovered by re-prompting.
    """


class PersistenceError(SetupError):
    """Writing an environment variable to its durable store failed.

    Raised when:
    - The home directory cannot be resolved
    - An existing shell startup file cannot be read or written
    - The Windows user environment command fails

    This is the only fatal error class of the setup flow.

    Attributes:
        key: Environment variable that was being persisted (optional)
        path: File that was being read or written (optional)
    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        path: Path | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            key: Optional environment variable name for context
            path: Optional file path for context
            exit_code: Optional override for the default exit code
        """
        self.key = key
        self.path = path
        super().__init__(message, exit_code)


class UserCancelledError(SetupError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - A prompt is aborted and returns no answer
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
    "ExitCode",
    "SetupError",
    "InvalidURLError",
    "PersistenceError",
    "UserCancelledError",
]
