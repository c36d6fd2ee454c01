"""Configuration manager for CCSETUP.

This module provides the ConfigManager class, which loads the managed
variables from an EnvironmentStore into a Settings instance and writes
them back once the wizard is done.
"""

from __future__ import annotations

import logging

from ccsetup.config.settings import Settings
from ccsetup.env.base import EnvironmentStore
from ccsetup.utils.logging import is_sensitive_key, log_message

# Module-level logger
logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves the managed environment variables.

    Attributes:
        store: EnvironmentStore used for reads and writes
        settings: Settings from the most recent load()
    """

    def __init__(self, store: EnvironmentStore) -> None:
        """Initialize the configuration manager.

        Args:
            store: Environment store to read from and persist to
        """
        self.store = store
        self.settings = Settings()

    def load(self) -> Settings:
        """Load the managed variables from the environment store.

        Each call starts from a clean Settings instance, so values from a
        previous load never leak into the result.

        Returns:
            Settings populated with the current environment values
        """
        self.settings = Settings()

        loaded = 0
        for key in Settings.get_config_keys():
            value = self.store.get(key)
            if value:
                self.settings.set_value(key, value)
                loaded += 1

        log_message(f"Configuration loaded from environment ({loaded} keys set)")
        return self.settings

    def get(self, key: str, default: str = "") -> str:
        """Get a managed value from the last loaded settings.

        Args:
            key: Environment variable name
            default: Default value if the key is unknown or empty

        Returns:
            Configuration value or default
        """
        if self.settings.get_attribute_for_key(key) is None:
            return default
        return self.settings.get_value(key) or default

    def save(self, settings: Settings) -> list[str]:
        """Persist every non-empty value of ``settings``.

        Empty values are skipped rather than cleared. Values are written in
        the fixed order of Settings.get_config_keys(); the first failure
        stops the save.

        Args:
            settings: Values to persist

        Returns:
            Environment variable names that were written

        Raises:
            PersistenceError: If the environment store fails to persist a value
        """
        written: list[str] = []
        for key, value in settings.items():
            if not value:
                logger.debug(f"Skipping empty value for {key}")
                continue
            self.store.set(key, value)
            self._log_config_save(key)
            written.append(key)

        self.settings = settings
        return written

    def _log_config_save(self, key: str) -> None:
        """Log a configuration save without exposing sensitive values.

        Args:
            key: The environment variable that was saved
        """
        if is_sensitive_key(key):
            log_message(f"Configuration saved: {key}=<REDACTED>")
        else:
            log_message(f"Configuration saved: {key}")


__all__ = ["ConfigManager"]
