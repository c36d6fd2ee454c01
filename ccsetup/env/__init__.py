"""Environment variable persistence for CCSETUP.

This package contains:
- base: EnvironmentStore (get/set seam) and the DurableStore interface
- shell_rc: Unix backend writing export lines to shell startup files
- windows: Windows backend writing per-user environment variables
- factory: Backend selection for the host platform
"""

from ccsetup.env.base import DurableStore, EnvironmentStore
from ccsetup.env.factory import create_durable_store, create_environment_store
from ccsetup.env.shell_rc import (
    LINUX_RC_FILES,
    MACOS_RC_FILES,
    ShellRcStore,
    upsert_export_line,
)
from ccsetup.env.windows import WindowsUserEnvStore

__all__ = [
    "DurableStore",
    "EnvironmentStore",
    "ShellRcStore",
    "WindowsUserEnvStore",
    "LINUX_RC_FILES",
    "MACOS_RC_FILES",
    "create_durable_store",
    "create_environment_store",
    "upsert_export_line",
]
