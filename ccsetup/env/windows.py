"""Windows persistence through per-user environment variables.

Values are written with PowerShell's ``[Environment]::SetEnvironmentVariable``
using the ``User`` target, which stores them in the current user's registry
hive and broadcasts the change to newly started processes.
"""

from __future__ import annotations

import subprocess

from ccsetup.env.base import DurableStore
from ccsetup.utils.errors import PersistenceError
from ccsetup.utils.logging import is_sensitive_key, log_command

POWERSHELL = "powershell"


def quote_powershell(value: str) -> str:
    """Escape a value for a single-quoted PowerShell string literal.

    Inside single quotes PowerShell treats a doubled quote as a literal one.
    """
    return value.replace("'", "''")


def build_set_command(key: str, value: str) -> str:
    """Build the PowerShell expression that stores a user variable."""
    return (
        f"[Environment]::SetEnvironmentVariable("
        f"'{quote_powershell(key)}', '{quote_powershell(value)}', 'User')"
    )


class WindowsUserEnvStore(DurableStore):
    """Persist variables in the current user's Windows environment."""

    name = "Windows user environment"

    def __init__(self, executable: str = POWERSHELL) -> None:
        self.executable = executable

    def persist(self, key: str, value: str) -> None:
        """Store a user-scoped environment variable.

        Raises:
            PersistenceError: If PowerShell is missing or the command fails
        """
        command = build_set_command(key, value)
        args = [self.executable, "-NoProfile", "-NonInteractive", "-Command", command]
        # The command line embeds the value; keep secrets out of the log
        logged = f"{self.executable} SetEnvironmentVariable {key}"
        if not is_sensitive_key(key):
            logged = f"{self.executable} -Command {command}"

        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            log_command(logged, exit_code=-1)
            raise PersistenceError(
                f"Failed to run {self.executable}: {e}", key=key
            ) from e

        log_command(logged, exit_code=result.returncode)

        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            message = f"{self.executable} exited with code {result.returncode}"
            if detail:
                message = f"{message}: {detail}"
            raise PersistenceError(message, key=key)

    def activation_hint(self) -> list[str]:
        return [
            "Configuration saved to your user environment variables",
            "Open a new terminal window to apply it",
        ]


__all__ = [
    "POWERSHELL",
    "WindowsUserEnvStore",
    "build_set_command",
    "quote_powershell",
]
