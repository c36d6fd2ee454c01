"""Tests for ccsetup.ui.prompts module."""

from unittest.mock import patch

import pytest

from ccsetup.ui.prompts import (
    custom_style,
    prompt_confirm,
    prompt_input,
    prompt_password,
)
from ccsetup.utils.errors import ExitCode, UserCancelledError


class TestCustomStyle:
    """Tests for custom_style."""

    def test_style_has_qmark(self):
        """Style defines qmark."""
        assert any("qmark" in str(s) for s in custom_style.style_rules)


class TestPromptConfirm:
    """Tests for prompt_confirm function."""

    @patch("questionary.confirm")
    def test_returns_true_for_yes(self, mock_confirm):
        """Returns True when user confirms."""
        mock_confirm.return_value.ask.return_value = True

        assert prompt_confirm("Continue?") is True

    @patch("questionary.confirm")
    def test_returns_false_for_no(self, mock_confirm):
        """Returns False when user declines."""
        mock_confirm.return_value.ask.return_value = False

        assert prompt_confirm("Continue?") is False

    @patch("questionary.confirm")
    def test_passes_default(self, mock_confirm):
        mock_confirm.return_value.ask.return_value = True

        prompt_confirm("Continue?", default=True)

        assert mock_confirm.call_args.kwargs["default"] is True

    @patch("questionary.confirm")
    def test_raises_on_cancel(self, mock_confirm):
        """Raises UserCancelledError when cancelled."""
        mock_confirm.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError) as exc_info:
            prompt_confirm("Continue?")

        assert exc_info.value.exit_code == ExitCode.USER_CANCELLED

    @patch("questionary.confirm")
    def test_raises_on_keyboard_interrupt(self, mock_confirm):
        """Raises UserCancelledError on Ctrl+C."""
        mock_confirm.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_confirm("Continue?")


class TestPromptInput:
    """Tests for prompt_input function."""

    @patch("questionary.text")
    def test_returns_user_input(self, mock_text):
        """Returns user input."""
        mock_text.return_value.ask.return_value = "user input"

        assert prompt_input("Enter value") == "user input"

    @patch("questionary.text")
    def test_strips_whitespace(self, mock_text):
        mock_text.return_value.ask.return_value = "  dmxapi.cn \n"

        assert prompt_input("Base URL:") == "dmxapi.cn"

    @patch("questionary.text")
    def test_passes_default(self, mock_text):
        """Default value is pre-filled."""
        mock_text.return_value.ask.return_value = "m1"

        prompt_input("Model:", default="m1")

        assert mock_text.call_args.kwargs["default"] == "m1"

    @patch("questionary.text")
    def test_empty_answer(self, mock_text):
        mock_text.return_value.ask.return_value = ""

        assert prompt_input("Base URL:") == ""

    @patch("questionary.text")
    def test_raises_on_cancel(self, mock_text):
        mock_text.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_input("Enter value")


class TestPromptPassword:
    """Tests for prompt_password function."""

    @patch("questionary.password")
    def test_returns_secret(self, mock_password):
        mock_password.return_value.ask.return_value = " tok_abcdefgh1234 "

        assert prompt_password("Auth token:") == "tok_abcdefgh1234"

    @patch("ccsetup.ui.prompts.log_message")
    @patch("questionary.password")
    def test_secret_not_logged(self, mock_password, mock_log):
        """The entered secret never reaches the log."""
        mock_password.return_value.ask.return_value = "super-secret"

        prompt_password("Auth token:")

        logged = " ".join(call.args[0] for call in mock_log.call_args_list)
        assert "super-secret" not in logged

    @patch("questionary.password")
    def test_raises_on_cancel(self, mock_password):
        mock_password.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_password("Auth token:")

    @patch("questionary.password")
    def test_raises_on_keyboard_interrupt(self, mock_password):
        mock_password.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_password("Auth token:")
