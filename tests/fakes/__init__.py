"""Test fakes for environment persistence."""

from tests.fakes.fake_store import FakeDurableStore

__all__ = [
    "FakeDurableStore",
]
