"""Shared pytest fixtures for CCSETUP tests."""

from pathlib import Path

import pytest

from ccsetup.config.manager import ConfigManager
from ccsetup.env.base import EnvironmentStore
from tests.fakes import FakeDurableStore


@pytest.fixture
def fake_durable() -> FakeDurableStore:
    """Durable store that records writes in memory."""
    return FakeDurableStore()


@pytest.fixture
def environ() -> dict[str, str]:
    """Empty process environment, isolated from os.environ."""
    return {}


@pytest.fixture
def env_store(fake_durable: FakeDurableStore, environ: dict[str, str]) -> EnvironmentStore:
    """EnvironmentStore wired to the fake durable store and isolated environ."""
    return EnvironmentStore(fake_durable, environ=environ)


@pytest.fixture
def config_manager(env_store: EnvironmentStore) -> ConfigManager:
    """ConfigManager bound to the isolated environment store."""
    return ConfigManager(env_store)


@pytest.fixture
def bashrc(tmp_path: Path) -> Path:
    """A ~/.bashrc with some unrelated content in a temporary home."""
    rc = tmp_path / ".bashrc"
    rc.write_text(
        """# ~/.bashrc
alias ll='ls -la'
export PATH="$HOME/bin:$PATH"
"""
    )
    return rc
