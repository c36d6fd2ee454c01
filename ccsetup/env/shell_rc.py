"""Unix persistence through shell startup files.

Each managed variable is stored as one ``export KEY='VALUE'`` line in the
user's shell startup files. Only files that already exist are touched; an
existing export line for the same key is replaced in place, otherwise a new
line is appended. Everything else in the file is preserved verbatim.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ccsetup.env.base import DurableStore
from ccsetup.utils.errors import PersistenceError
from ccsetup.utils.logging import log_message

logger = logging.getLogger(__name__)

# Startup files per OS flavor, most specific first
MACOS_RC_FILES: tuple[str, ...] = (".zshrc", ".bash_profile")
LINUX_RC_FILES: tuple[str, ...] = (".bashrc", ".profile")

# Bytes that are not valid UTF-8 survive a read and write-back unchanged
RC_ENCODING = "utf-8"
RC_ERRORS = "surrogateescape"


def quote_single(value: str) -> str:
    """Escape a value for use inside a single-quoted shell string.

    Single quotes cannot be escaped inside single quotes, so each one closes
    the string, emits an escaped quote and reopens it: ``'`` becomes ``'\\''``.

    Args:
        value: Raw value

    Returns:
        Escaped value (without the surrounding quotes)
    """
    return value.replace("'", "'\\''")


def export_line(key: str, value: str) -> str:
    """Build the export statement for a key/value pair."""
    return f"export {key}='{quote_single(value)}'"


def upsert_export_line(content: str, key: str, value: str) -> str:
    """Replace or append the export statement for ``key`` in file content.

    A line matches when, ignoring surrounding whitespace, it starts with the
    literal prefix ``export KEY=``. The ``=`` is part of the prefix, so
    ``export KEY_SUFFIX=`` never matches ``KEY``. Every matching line is
    replaced; if none matched, the statement is appended as the last line.

    Args:
        content: Current file content
        key: Environment variable name
        value: New value

    Returns:
        Updated file content, always ending with a newline
    """
    marker = f"export {key}="
    statement = export_line(key, value)

    lines = content.split("\n")
    if lines and lines[-1] == "":
        # Trailing newline (or empty file) produces an empty last element
        lines.pop()

    found = False
    new_lines: list[str] = []
    for line in lines:
        if line.strip().startswith(marker):
            new_lines.append(statement)
            found = True
        else:
            new_lines.append(line)

    if not found:
        new_lines.append(statement)

    return "\n".join(new_lines) + "\n"


class ShellRcStore(DurableStore):
    """Persist variables as export lines in existing shell startup files.

    Attributes:
        rc_files: File names, relative to the home directory, to update
    """

    name = "shell startup files"

    def __init__(
        self,
        rc_files: Sequence[str] = LINUX_RC_FILES,
        home: Path | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            rc_files: Startup file names relative to the home directory
            home: Home directory override. Resolved with ``Path.home()``
                on each save when not given.
        """
        self.rc_files = tuple(rc_files)
        self._home = home

    def _resolve_home(self) -> Path:
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except RuntimeError as e:
            raise PersistenceError(f"Cannot determine home directory: {e}") from e

    def target_paths(self) -> list[Path]:
        """Return the full paths of all candidate startup files.

        Raises:
            PersistenceError: If the home directory cannot be resolved
        """
        home = self._resolve_home()
        return [home / name for name in self.rc_files]

    def persist(self, key: str, value: str) -> None:
        """Write the export line for ``key`` into every existing startup file.

        Files that do not exist are skipped and never created. The first
        read or write failure aborts the remaining files for this key.

        Raises:
            PersistenceError: If the home directory cannot be resolved or a
                file cannot be read or written
        """
        written = 0
        for path in self.target_paths():
            if not path.exists():
                logger.debug(f"Skipping missing startup file {path}")
                continue

            try:
                with path.open(encoding=RC_ENCODING, errors=RC_ERRORS, newline="") as f:
                    content = f.read()
            except OSError as e:
                raise PersistenceError(
                    f"Failed to read {path}: {e}", key=key, path=path
                ) from e

            updated = upsert_export_line(content, key, value)

            try:
                _atomic_write_text(path, updated)
            except OSError as e:
                raise PersistenceError(
                    f"Failed to write {path}: {e}", key=key, path=path
                ) from e

            log_message(f"Updated {key} in {path}")
            written += 1

        if written == 0:
            logger.warning(
                f"No startup file found for {key} (looked for {', '.join(self.rc_files)})"
            )

    def activation_hint(self) -> list[str]:
        first = self.rc_files[0] if self.rc_files else ".profile"
        return [
            "Configuration saved to your shell startup files",
            f"Run 'source ~/{first}' or open a new terminal to apply it",
        ]


def _atomic_write_text(target_path: Path, content: str) -> None:
    """Atomically replace a file's content, keeping its permission bits.

    Args:
        target_path: Existing file to overwrite
        content: New content
    """
    # Write through symlinks so managed dotfiles stay links
    target_path = target_path.resolve()
    mode = stat.S_IMODE(target_path.stat().st_mode)

    # Create temp file in same directory for atomic move
    fd, temp_path = tempfile.mkstemp(
        dir=target_path.parent,
        prefix=f".{target_path.name}-",
    )
    try:
        with os.fdopen(fd, "w", encoding=RC_ENCODING, errors=RC_ERRORS, newline="") as f:
            f.write(content)

        os.chmod(temp_path, mode)

        Path(temp_path).replace(target_path)
    except Exception:
        # Clean up temp file on error
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


__all__ = [
    "MACOS_RC_FILES",
    "LINUX_RC_FILES",
    "ShellRcStore",
    "export_line",
    "quote_single",
    "upsert_export_line",
]
