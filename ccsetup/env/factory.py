"""Selection of the durable store for the host platform."""

from __future__ import annotations

import platform
from collections.abc import MutableMapping

from ccsetup.env.base import DurableStore, EnvironmentStore
from ccsetup.env.shell_rc import LINUX_RC_FILES, MACOS_RC_FILES, ShellRcStore
from ccsetup.env.windows import WindowsUserEnvStore
from ccsetup.utils.logging import log_message


def create_durable_store(system: str | None = None) -> DurableStore:
    """Create the durable store for an operating system.

    Args:
        system: Value in the format of ``platform.system()``
            ("Windows", "Darwin", "Linux", ...). Defaults to the host.

    Returns:
        WindowsUserEnvStore on Windows, ShellRcStore otherwise
    """
    system = system or platform.system()

    if system == "Windows":
        store: DurableStore = WindowsUserEnvStore()
    elif system == "Darwin":
        store = ShellRcStore(rc_files=MACOS_RC_FILES)
    else:
        store = ShellRcStore(rc_files=LINUX_RC_FILES)

    log_message(f"Using {store.name} for {system}")
    return store


def create_environment_store(
    system: str | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> EnvironmentStore:
    """Create an EnvironmentStore backed by the platform's durable store.

    Args:
        system: Operating system override, see create_durable_store()
        environ: Process environment override (defaults to os.environ)
    """
    return EnvironmentStore(create_durable_store(system), environ=environ)


__all__ = [
    "create_durable_store",
    "create_environment_store",
]
