"""Interactive setup wizard for CCSETUP.

Provides the flow that collects the base URL, token and models, verifies
the connection and persists everything as environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass

from ccsetup.config.manager import ConfigManager
from ccsetup.config.settings import Settings
from ccsetup.utils.errors import ExitCode


@dataclass
class SetupResult:
    """Result of the setup flow.

    Attributes:
        success: Whether the configuration was saved
        settings: Final settings (None if the flow stopped before loading them)
        error_message: Human-readable error if success is False
        exit_code: Process exit code matching the outcome
    """

    success: bool
    settings: Settings | None = None
    error_message: str = ""
    exit_code: ExitCode = ExitCode.SUCCESS


def run_setup(config: ConfigManager) -> SetupResult:
    """Run the interactive setup wizard.

    Delegates to SetupFlow for the actual UI interaction.

    Args:
        config: Configuration manager

    Returns:
        SetupResult with success status and final settings
    """
    from ccsetup.wizard.flow import SetupFlow

    flow = SetupFlow(config)
    return flow.run()


__all__ = [
    "SetupResult",
    "run_setup",
]
