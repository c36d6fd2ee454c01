"""UI components for CCSETUP.

This package contains:
- prompts: Questionary-based user input prompts
- menus: Interactive menu functions
"""

from ccsetup.ui.menus import (
    ConfigMode,
    FixChoice,
    show_config_mode_menu,
    show_fix_menu,
)
from ccsetup.ui.prompts import (
    custom_style,
    prompt_confirm,
    prompt_input,
    prompt_password,
)

__all__ = [
    # Prompts
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    "prompt_password",
    # Menus
    "ConfigMode",
    "FixChoice",
    "show_config_mode_menu",
    "show_fix_menu",
]
