"""CCSETUP - Interactive environment setup for the Claude Code CLI.

This package collects the API endpoint, auth token and model identifiers
used by the Claude Code CLI, verifies them against the remote API and
persists them as user environment variables on Windows, Linux and macOS.
"""

__version__ = "1.0.0"
APP_NAME = "Anthropic Claude Code CLI"

__all__ = [
    "__version__",
    "APP_NAME",
]
