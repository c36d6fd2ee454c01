"""Interactive menus for CCSETUP.

This module provides the two menus of the setup wizard: the initial
configuration mode choice and the "what went wrong" choice shown after a
failed connectivity check.
"""

from enum import Enum

import questionary

from ccsetup.ui.prompts import custom_style
from ccsetup.utils.errors import UserCancelledError
from ccsetup.utils.logging import log_message


class ConfigMode(Enum):
    """Configuration modes offered at startup."""

    FULL = "full"
    MODELS_ONLY = "models_only"


class FixChoice(Enum):
    """What the user wants to change after a failed connectivity check."""

    URL = "url"
    TOKEN = "token"
    BOTH = "both"

    @property
    def changes_url(self) -> bool:
        return self in (FixChoice.URL, FixChoice.BOTH)

    @property
    def changes_token(self) -> bool:
        return self in (FixChoice.TOKEN, FixChoice.BOTH)


def show_config_mode_menu() -> ConfigMode:
    """Ask whether to run the full setup or only configure models.

    Returns:
        Selected ConfigMode

    Raises:
        UserCancelledError: If user cancels
    """
    choices = [
        questionary.Choice(
            "Full setup (configure URL, token and models)",
            value=ConfigMode.FULL,
        ),
        questionary.Choice(
            "Models only (skip URL and token)",
            value=ConfigMode.MODELS_ONLY,
        ),
    ]

    try:
        result = questionary.select(
            "Choose a configuration mode:",
            choices=choices,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled mode selection")

        log_message(f"Config mode selection: {result.value}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def show_fix_menu() -> FixChoice:
    """Ask which part of the configuration caused the failed check.

    Returns:
        Selected FixChoice

    Raises:
        UserCancelledError: If user cancels
    """
    choices = [
        questionary.Choice("The URL is wrong", value=FixChoice.URL),
        questionary.Choice("The token is wrong", value=FixChoice.TOKEN),
        questionary.Choice("Both are wrong", value=FixChoice.BOTH),
    ]

    try:
        result = questionary.select(
            "What would you like to change?",
            choices=choices,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled fix selection")

        log_message(f"Fix selection: {result.value}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "ConfigMode",
    "FixChoice",
    "show_config_mode_menu",
    "show_fix_menu",
]
