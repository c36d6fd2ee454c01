"""Utility modules for CCSETUP.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from ccsetup.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_banner,
)
from ccsetup.utils.errors import (
    ExitCode,
    InvalidURLError,
    PersistenceError,
    SetupError,
    UserCancelledError,
)
from ccsetup.utils.logging import (
    is_sensitive_key,
    log_command,
    log_message,
    setup_logging,
)

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "show_banner",
    # Errors
    "ExitCode",
    "SetupError",
    "InvalidURLError",
    "PersistenceError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
    "is_sensitive_key",
]
