"""Interactive setup wizard.

Guides the user through:
1. Choosing between a full setup and a models-only setup
2. Entering the base URL and auth token (full setup)
3. Verifying the connection until it succeeds (full setup)
4. Reviewing and optionally editing the model identifiers
5. Saving everything and printing a summary
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ccsetup.config.manager import ConfigManager
from ccsetup.config.settings import ENV_AUTH_TOKEN, MODEL_LABELS, Settings, mask_token
from ccsetup.config.urls import normalize_url, token_page_url
from ccsetup.integrations.errors import APIError
from ccsetup.integrations.probe import ProbeResult, probe
from ccsetup.ui.menus import ConfigMode, show_config_mode_menu, show_fix_menu
from ccsetup.ui.prompts import prompt_confirm, prompt_input, prompt_password
from ccsetup.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_rule,
    print_step,
    print_success,
    print_warning,
)
from ccsetup.utils.errors import ExitCode, InvalidURLError, PersistenceError, UserCancelledError
from ccsetup.wizard import SetupResult

logger = logging.getLogger(__name__)

EXAMPLE_BASE_URL = "https://www.dmxapi.cn"

# Column width for "KEY = value" listings
KEY_WIDTH = 35

ProbeFn = Callable[[str, str], ProbeResult]


class SetupFlow:
    """Interactive wizard that configures the Claude Code CLI environment.

    Args:
        config: ConfigManager bound to the environment store
        probe_fn: Connectivity check, called as ``probe_fn(base_url, token)``
    """

    def __init__(self, config: ConfigManager, *, probe_fn: ProbeFn = probe) -> None:
        self._config = config
        self._probe = probe_fn

    def run(self) -> SetupResult:
        """Execute the full setup flow.

        Returns:
            SetupResult describing the outcome and the exit code to use.
        """
        try:
            mode = show_config_mode_menu()
            settings = self._config.load()

            if mode == ConfigMode.FULL:
                settings.base_url = self._collect_base_url(settings.base_url)
                settings.auth_token = self._collect_auth_token(
                    settings.auth_token, settings.base_url
                )
                self._verify_connection(settings)
            else:
                self._show_existing_credentials(settings)

            self._configure_models(settings)
            self._save_configuration(settings)
            self._print_summary(settings)
            return SetupResult(success=True, settings=settings)

        except UserCancelledError as e:
            return SetupResult(
                success=False,
                error_message=str(e),
                exit_code=e.exit_code,
            )
        except PersistenceError as e:
            print_error(f"Failed to save configuration: {e}")
            return SetupResult(
                success=False,
                error_message=str(e),
                exit_code=ExitCode.GENERAL_ERROR,
            )

    def _collect_base_url(self, existing: str) -> str:
        """Ask for the base URL, offering to keep an existing one.

        Args:
            existing: Base URL currently in the environment, or ""

        Returns:
            A validated base URL
        """
        console.print()
        print_info("Configure the API base URL")
        print_step(f"Example: {EXAMPLE_BASE_URL}")

        if existing:
            print_step(f"Current value: {existing}")
            if not prompt_confirm("Change the base URL?"):
                return existing

        while True:
            raw = prompt_input("Base URL:")
            if not raw and existing:
                return existing
            try:
                return normalize_url(raw)
            except InvalidURLError as e:
                print_error(str(e))

    def _collect_auth_token(self, existing: str, base_url: str) -> str:
        """Ask for the auth token, offering to keep an existing one.

        Args:
            existing: Token currently in the environment, or ""
            base_url: Base URL used to point at the token page

        Returns:
            A non-empty token
        """
        console.print()
        print_info("Configure the API auth token")
        self._show_token_hint(base_url)

        if existing:
            print_step("A token is already configured")
            if not prompt_confirm("Update the token?"):
                return existing

        while True:
            token = prompt_password("Auth token:")
            if token:
                return token
            if existing:
                return existing
            print_error("Token cannot be empty")

    def _reenter_base_url(self) -> str:
        """Ask for a replacement base URL after a failed check."""
        while True:
            raw = prompt_input("New base URL:")
            try:
                return normalize_url(raw)
            except InvalidURLError as e:
                print_error(str(e))

    def _reenter_auth_token(self, base_url: str) -> str:
        """Ask for a replacement token after a failed check."""
        self._show_token_hint(base_url)
        while True:
            token = prompt_password("New auth token:")
            if token:
                return token
            print_error("Token cannot be empty")

    @staticmethod
    def _show_token_hint(base_url: str) -> None:
        url = token_page_url(base_url)
        if url:
            print_step(f"Get a token at: {url}")

    def _verify_connection(self, settings: Settings) -> None:
        """Run the connectivity check until it succeeds.

        There is no attempt limit: after each failure the user picks what to
        change and the check runs again. Only cancelling the prompt (or the
        process) ends the loop early.

        Args:
            settings: Settings whose base_url/auth_token are checked and
                updated in place
        """
        console.print()
        while True:
            print_info("Verifying API connection...")
            try:
                result = self._probe(settings.base_url, settings.auth_token)
            except APIError as e:
                logger.debug(f"Connectivity check failed (status={e.status_code})")
                print_error(f"API connection check failed: {e}")
                self._show_failed_credentials(settings)

                choice = show_fix_menu()
                if choice.changes_url:
                    settings.base_url = self._reenter_base_url()
                if choice.changes_token:
                    settings.auth_token = self._reenter_auth_token(settings.base_url)
                console.print()
                continue

            if result.rate_limited:
                print_warning("The API is rate limiting requests, but the token was accepted")
            print_success("API connection verified!")
            return

    @staticmethod
    def _show_failed_credentials(settings: Settings) -> None:
        # Shown unmasked so typos in the token can be spotted
        console.print()
        print_info("Current configuration:")
        print_step(f"Base URL: {settings.base_url}")
        print_step(f"API key:  {settings.auth_token}")
        console.print()

    @staticmethod
    def _show_existing_credentials(settings: Settings) -> None:
        """Report which credentials the models-only mode will keep."""
        if not settings.has_credentials:
            print_warning("No existing base URL or token found")
            print_info("Skipping API verification, configuring models only")
        else:
            print_info("Using the existing base URL and token")
            print_step(f"Base URL: {settings.base_url}")
            print_step(f"Token: {mask_token(settings.auth_token)}")
        console.print()

    def _configure_models(self, settings: Settings) -> None:
        """Fill model defaults, show them and optionally edit them.

        Args:
            settings: Settings updated in place
        """
        print_header("Model configuration")

        filled = settings.apply_model_defaults()
        if filled:
            logger.debug(f"Applied model defaults for {', '.join(filled)}")

        console.print("Current model configuration:")
        for key in MODEL_LABELS:
            print_step(f"{key:<{KEY_WIDTH}} = {settings.get_value(key)}")
        console.print()

        if not prompt_confirm("Change the model configuration?", default=False):
            return

        console.print()
        for key, label in MODEL_LABELS.items():
            value = prompt_input(f"{label}:", default=settings.get_value(key))
            if value:
                settings.set_value(key, value)

    def _save_configuration(self, settings: Settings) -> None:
        """Persist all non-empty values.

        Raises:
            PersistenceError: If a value cannot be persisted
        """
        console.print()
        print_info("Saving configuration...")
        written = self._config.save(settings)
        logger.debug(f"Saved {len(written)} variables")

    def _print_summary(self, settings: Settings) -> None:
        """Print the saved values (token masked) and activation instructions."""
        console.print()
        print_rule()
        print_success("Configuration complete!")
        print_rule()
        console.print()

        for key, value in settings.items():
            shown = mask_token(value) if key == ENV_AUTH_TOKEN else value
            print_step(f"{key:<{KEY_WIDTH}} = {shown}")
        console.print()

        for line in self._config.store.durable.activation_hint():
            print_info(line)


__all__ = ["SetupFlow", "EXAMPLE_BASE_URL"]
