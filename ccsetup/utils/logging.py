"""Logging configuration for CCSETUP.

Logging is off unless explicitly enabled, so that an interactive run
leaves nothing behind on disk by default. When enabled, the log records
the wizard's prompts and answers, every variable persisted (with the
store it went to), the PowerShell commands run on Windows and the HTTP
status of each connectivity check. Values of sensitive variables and
everything typed into password prompts are replaced by ``<REDACTED>``.

The log file is created readable by its owner only, since it still
contains endpoint URLs and model names.

Environment Variables:
    CCSETUP_LOG: Set to "true" to enable logging (default: "false")
    CCSETUP_LOG_FILE: Path to log file (default: ~/.ccsetup.log)
"""

import logging
import os
import platform
from pathlib import Path

from ccsetup import __version__

# Environment variable configuration
LOG_ENABLED = os.environ.get("CCSETUP_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("CCSETUP_LOG_FILE", str(Path.home() / ".ccsetup.log")))

# Owner read/write only
LOG_FILE_MODE = 0o600

# Keys containing these substrings are never logged with their values
SENSITIVE_KEY_PATTERNS = ("TOKEN", "KEY", "SECRET", "PASSWORD")

# Module-level logger instance
_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Configure logging based on environment variables.

    Creates a logger that appends to the configured log file when
    CCSETUP_LOG is set to "true", tightens the file's permissions and
    writes a session header with the version and host platform, so runs
    on different machines can be told apart. Otherwise, uses a
    NullHandler to suppress all log output.

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger("ccsetup")

    # Clear any existing handlers
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        os.chmod(LOG_FILE, LOG_FILE_MODE)
        logger.info(
            f"=== ccsetup {__version__} session on "
            f"{platform.system().lower()}/{platform.machine().lower()} ==="
        )
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured logger instance.

    Returns:
        The configured logger, creating it if necessary
    """
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Log a message if logging is enabled.

    Args:
        message: Message to log
    """
    logger = get_logger()
    logger.info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Log external command execution with its exit code.

    Args:
        command: The command that was executed
        exit_code: The exit code returned by the command
    """
    logger = get_logger()
    logger.info(f"COMMAND: {command} | EXIT_CODE: {exit_code}")


def is_sensitive_key(key: str) -> bool:
    """Check if an environment variable name holds sensitive data.

    Args:
        key: The variable name

    Returns:
        True if the key is considered sensitive
    """
    key_upper = key.upper()
    return any(pattern in key_upper for pattern in SENSITIVE_KEY_PATTERNS)


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "LOG_FILE_MODE",
    "SENSITIVE_KEY_PATTERNS",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_command",
    "is_sensitive_key",
]
