"""Tests for ccsetup.env.shell_rc module."""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from ccsetup.env.shell_rc import (
    LINUX_RC_FILES,
    MACOS_RC_FILES,
    ShellRcStore,
    export_line,
    quote_single,
    upsert_export_line,
)
from ccsetup.utils.errors import PersistenceError


def _export_lines(path: Path, key: str) -> list[str]:
    return [line for line in path.read_text().splitlines() if line.startswith(f"export {key}=")]


class TestQuoting:
    """Tests for quote_single and export_line."""

    def test_plain_value(self):
        assert export_line("KEY", "value") == "export KEY='value'"

    def test_single_quote_escaped(self):
        assert quote_single("it's") == "it'\\''s"
        assert export_line("KEY", "it's") == "export KEY='it'\\''s'"

    def test_double_quotes_and_dollar_untouched(self):
        """Single-quoted shell strings need no other escaping."""
        assert export_line("KEY", 'a"$b') == "export KEY='a\"$b'"


class TestUpsertExportLine:
    """Tests for upsert_export_line function."""

    def test_appends_when_missing(self):
        content = "alias ll='ls -la'\n"

        result = upsert_export_line(content, "ANTHROPIC_MODEL", "m1")

        assert result == "alias ll='ls -la'\nexport ANTHROPIC_MODEL='m1'\n"

    def test_replaces_in_place(self):
        content = "# top\nexport ANTHROPIC_MODEL='old'\n# bottom\n"

        result = upsert_export_line(content, "ANTHROPIC_MODEL", "new")

        assert result == "# top\nexport ANTHROPIC_MODEL='new'\n# bottom\n"

    def test_replaces_indented_line(self):
        content = "if true; then\n    export ANTHROPIC_MODEL='old'\nfi\n"

        result = upsert_export_line(content, "ANTHROPIC_MODEL", "new")

        assert "export ANTHROPIC_MODEL='new'" in result
        assert "'old'" not in result
        assert result.count("export ANTHROPIC_MODEL=") == 1

    def test_similar_key_not_matched(self):
        """A key that is a prefix of another key does not replace it."""
        content = "export ANTHROPIC_MODEL_EXTRA='keep'\n"

        result = upsert_export_line(content, "ANTHROPIC_MODEL", "m1")

        assert "export ANTHROPIC_MODEL_EXTRA='keep'" in result
        assert "export ANTHROPIC_MODEL='m1'" in result

    def test_longer_key_not_matched_by_shorter(self):
        content = "export ANTHROPIC_MODEL='keep'\n"

        result = upsert_export_line(content, "ANTHROPIC_MODEL_EXTRA", "x")

        assert "export ANTHROPIC_MODEL='keep'" in result
        assert "export ANTHROPIC_MODEL_EXTRA='x'" in result

    def test_commented_line_not_matched(self):
        content = "# export ANTHROPIC_MODEL='old'\n"

        result = upsert_export_line(content, "ANTHROPIC_MODEL", "new")

        assert result == "# export ANTHROPIC_MODEL='old'\nexport ANTHROPIC_MODEL='new'\n"

    def test_empty_content(self):
        assert upsert_export_line("", "K", "v") == "export K='v'\n"

    def test_no_trailing_newline(self):
        assert upsert_export_line("alias a=b", "K", "v") == "alias a=b\nexport K='v'\n"

    def test_preserves_blank_lines(self):
        content = "a\n\n\nb\n"

        result = upsert_export_line(content, "K", "v")

        assert result == "a\n\n\nb\nexport K='v'\n"

    def test_idempotent(self):
        once = upsert_export_line("a\n", "K", "v")
        assert upsert_export_line(once, "K", "v") == once


class TestShellRcStore:
    """Tests for ShellRcStore persistence."""

    def test_default_rc_files(self):
        assert ShellRcStore().rc_files == LINUX_RC_FILES
        assert LINUX_RC_FILES == (".bashrc", ".profile")
        assert MACOS_RC_FILES == (".zshrc", ".bash_profile")

    def test_appends_new_key(self, tmp_path, bashrc):
        store = ShellRcStore(home=tmp_path)
        before = bashrc.read_text()

        store.persist("ANTHROPIC_MODEL", "m1")

        content = bashrc.read_text()
        assert content.startswith(before)
        assert content[len(before):] == "export ANTHROPIC_MODEL='m1'\n"

    def test_write_twice_keeps_one_line(self, tmp_path, bashrc):
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "first")
        store.persist("ANTHROPIC_MODEL", "second")

        assert _export_lines(bashrc, "ANTHROPIC_MODEL") == ["export ANTHROPIC_MODEL='second'"]

    def test_preserves_unrelated_lines(self, tmp_path, bashrc):
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        lines = bashrc.read_text().splitlines()
        assert lines[:3] == ["# ~/.bashrc", "alias ll='ls -la'", 'export PATH="$HOME/bin:$PATH"']

    def test_preserves_non_utf8_bytes(self, tmp_path):
        """A Latin-1 comment is kept byte for byte instead of failing the save."""
        rc = tmp_path / ".bashrc"
        rc.write_bytes(b"# caf\xe9\nexport A='1'\n")
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        assert rc.read_bytes() == b"# caf\xe9\nexport A='1'\nexport ANTHROPIC_MODEL='m1'\n"

    def test_preserves_utf8_and_crlf(self, tmp_path):
        rc = tmp_path / ".bashrc"
        rc.write_bytes("# café ☕\r\nalias a=b\r\n".encode())
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        assert rc.read_bytes() == "# café ☕\r\nalias a=b\r\nexport ANTHROPIC_MODEL='m1'\n".encode()

    def test_missing_file_not_created(self, tmp_path, bashrc):
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        assert not (tmp_path / ".profile").exists()

    def test_no_files_is_not_an_error(self, tmp_path):
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        assert list(tmp_path.iterdir()) == []

    def test_updates_every_existing_file(self, tmp_path):
        zshrc = tmp_path / ".zshrc"
        profile = tmp_path / ".bash_profile"
        zshrc.write_text("# zsh\n")
        profile.write_text("# bash\n")
        store = ShellRcStore(rc_files=MACOS_RC_FILES, home=tmp_path)

        store.persist("ANTHROPIC_AUTH_TOKEN", "tok")

        assert _export_lines(zshrc, "ANTHROPIC_AUTH_TOKEN") == ["export ANTHROPIC_AUTH_TOKEN='tok'"]
        assert _export_lines(profile, "ANTHROPIC_AUTH_TOKEN") == [
            "export ANTHROPIC_AUTH_TOKEN='tok'"
        ]

    def test_value_with_quote_round_trips_in_file(self, tmp_path, bashrc):
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "it's")

        assert _export_lines(bashrc, "ANTHROPIC_MODEL") == ["export ANTHROPIC_MODEL='it'\\''s'"]

    def test_preserves_permissions(self, tmp_path, bashrc):
        os.chmod(bashrc, 0o600)
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        assert stat.S_IMODE(bashrc.stat().st_mode) == 0o600

    def test_writes_through_symlink(self, tmp_path):
        dotfiles = tmp_path / "dotfiles"
        dotfiles.mkdir()
        real = dotfiles / "bashrc"
        real.write_text("# real\n")
        (tmp_path / ".bashrc").symlink_to(real)
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        assert (tmp_path / ".bashrc").is_symlink()
        assert "export ANTHROPIC_MODEL='m1'" in real.read_text()

    def test_no_temp_files_left_behind(self, tmp_path, bashrc):
        store = ShellRcStore(home=tmp_path)

        store.persist("ANTHROPIC_MODEL", "m1")

        assert sorted(p.name for p in tmp_path.iterdir()) == [".bashrc"]

    def test_unreadable_file_raises(self, tmp_path):
        # A directory exists but cannot be read as text
        (tmp_path / ".bashrc").mkdir()
        store = ShellRcStore(home=tmp_path)

        with pytest.raises(PersistenceError, match="Failed to read") as exc_info:
            store.persist("ANTHROPIC_MODEL", "m1")

        assert exc_info.value.key == "ANTHROPIC_MODEL"
        assert exc_info.value.path == tmp_path / ".bashrc"

    def test_write_failure_raises_and_stops(self, tmp_path, bashrc):
        profile = tmp_path / ".profile"
        profile.write_text("# profile\n")
        store = ShellRcStore(home=tmp_path)

        with patch(
            "ccsetup.env.shell_rc._atomic_write_text",
            side_effect=OSError("disk full"),
        ) as mock_write:
            with pytest.raises(PersistenceError, match="Failed to write .*disk full"):
                store.persist("ANTHROPIC_MODEL", "m1")

        # First failure aborts the remaining files
        assert mock_write.call_count == 1
        assert profile.read_text() == "# profile\n"

    def test_home_resolution_failure(self):
        store = ShellRcStore()

        with patch(
            "ccsetup.env.shell_rc.Path.home",
            side_effect=RuntimeError("Could not determine home directory."),
        ):
            with pytest.raises(PersistenceError, match="home directory"):
                store.persist("ANTHROPIC_MODEL", "m1")

    def test_target_paths(self, tmp_path):
        store = ShellRcStore(rc_files=MACOS_RC_FILES, home=tmp_path)

        assert store.target_paths() == [tmp_path / ".zshrc", tmp_path / ".bash_profile"]

    def test_activation_hint_mentions_first_file(self):
        hint = ShellRcStore(rc_files=MACOS_RC_FILES).activation_hint()

        assert any("source ~/.zshrc" in line for line in hint)
