"""Interactive prompts for CCSETUP.

This module provides Questionary-based user input prompts with
consistent styling and error handling.
"""

from collections.abc import Callable
from typing import Optional

import questionary
from questionary import Style

from ccsetup.utils.errors import UserCancelledError
from ccsetup.utils.logging import log_message

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def prompt_confirm(message: str, default: bool = False) -> bool:
    """Prompt for yes/no confirmation.

    Args:
        message: Question to ask
        default: Default value if user presses Enter

    Returns:
        True for yes, False for no

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt confirm: {message}")

    try:
        result = questionary.confirm(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled confirmation prompt")

        log_message(f"User response: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_input(
    message: str,
    default: str = "",
    *,
    validate: Optional[Callable[[str], bool | str]] = None,
) -> str:
    """Prompt for a single line of text.

    Leading and trailing whitespace is stripped from the answer.

    Args:
        message: Prompt message
        default: Default value pre-filled in the prompt
        validate: Optional validation function

    Returns:
        User input string

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            validate=validate,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled input prompt")

        result = result.strip()
        log_message(f"User input: {result[:50]}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_password(message: str) -> str:
    """Prompt for a secret without echoing it.

    The entered value is never written to the log.

    Args:
        message: Prompt message

    Returns:
        The entered secret with surrounding whitespace removed

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt password: {message}")

    try:
        result = questionary.password(
            message,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled password prompt")

        log_message("User input: <REDACTED>")
        return result.strip()

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    "prompt_password",
]
