"""Environment store abstractions.

``EnvironmentStore`` is the single seam through which the rest of the
application reads and writes environment variables. It updates the current
process immediately and delegates durable persistence to a ``DurableStore``
backend chosen once at startup (Windows user variables or Unix shell
startup files).
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import MutableMapping

from ccsetup.utils.logging import is_sensitive_key, log_message


class DurableStore(ABC):
    """Persists environment variables beyond the current process.

    Implementations must make a value visible to processes started after
    ``persist`` returns, without requiring this process to restart.
    """

    name: str = "durable store"

    @abstractmethod
    def persist(self, key: str, value: str) -> None:
        """Durably store a key/value pair.

        Args:
            key: Environment variable name
            value: Value to store

        Raises:
            PersistenceError: If the value could not be stored
        """

    @abstractmethod
    def activation_hint(self) -> list[str]:
        """Explain how to make saved values visible in an open terminal.

        Returns:
            Lines to show to the user after a successful save
        """


class EnvironmentStore:
    """Read and write environment variables through a durable backend.

    Attributes:
        durable: Backend used for persistence
    """

    def __init__(
        self,
        durable: DurableStore,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            durable: Backend used to persist values
            environ: Mapping holding the process environment.
                Defaults to ``os.environ``.
        """
        self.durable = durable
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: str = "") -> str:
        """Get a variable from the process environment.

        Args:
            key: Environment variable name
            default: Value returned when the variable is unset

        Returns:
            Current value or default
        """
        return self._environ.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set a variable in this process and persist it.

        The process environment is updated first, so it keeps the new value
        even when persistence fails.

        Args:
            key: Environment variable name
            value: Value to store

        Raises:
            PersistenceError: If the durable backend fails
        """
        self._environ[key] = value

        if is_sensitive_key(key):
            log_message(f"Persisting {key}=<REDACTED> to {self.durable.name}")
        else:
            log_message(f"Persisting {key}={value} to {self.durable.name}")

        self.durable.persist(key, value)


__all__ = [
    "DurableStore",
    "EnvironmentStore",
]
