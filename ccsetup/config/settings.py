"""Settings dataclass for the Claude Code CLI environment.

This module defines the Settings dataclass that holds the six values the
setup wizard manages, together with the environment variable each one is
stored under and the built-in model defaults.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

# Environment variable names read by the Claude Code CLI
ENV_BASE_URL = "ANTHROPIC_BASE_URL"
ENV_AUTH_TOKEN = "ANTHROPIC_AUTH_TOKEN"
ENV_MODEL = "ANTHROPIC_MODEL"
ENV_HAIKU_MODEL = "ANTHROPIC_DEFAULT_HAIKU_MODEL"
ENV_SONNET_MODEL = "ANTHROPIC_DEFAULT_SONNET_MODEL"
ENV_OPUS_MODEL = "ANTHROPIC_DEFAULT_OPUS_MODEL"

# Built-in defaults applied to empty model fields
DEFAULT_MODELS: dict[str, str] = {
    ENV_MODEL: "claude-opus-4-5-20251101-cc",
    ENV_HAIKU_MODEL: "claude-haiku-4-5-20251001-cc",
    ENV_SONNET_MODEL: "claude-sonnet-4-5-20250929-cc",
    ENV_OPUS_MODEL: "claude-opus-4-5-20251101-cc",
}

# Human-readable labels used when prompting for each model
MODEL_LABELS: dict[str, str] = {
    ENV_MODEL: "Default model",
    ENV_HAIKU_MODEL: "Haiku model",
    ENV_SONNET_MODEL: "Sonnet model",
    ENV_OPUS_MODEL: "Opus model",
}


@dataclass
class Settings:
    """Values managed by the setup wizard.

    Every field may be empty. Empty fields are skipped when saving, so an
    unset value never clears an existing variable.

    Attributes:
        base_url: API endpoint (ANTHROPIC_BASE_URL)
        auth_token: API token (ANTHROPIC_AUTH_TOKEN)
        model: Default model (ANTHROPIC_MODEL)
        haiku_model: Haiku tier model (ANTHROPIC_DEFAULT_HAIKU_MODEL)
        sonnet_model: Sonnet tier model (ANTHROPIC_DEFAULT_SONNET_MODEL)
        opus_model: Opus tier model (ANTHROPIC_DEFAULT_OPUS_MODEL)
    """

    base_url: str = ""
    auth_token: str = ""
    model: str = ""
    haiku_model: str = ""
    sonnet_model: str = ""
    opus_model: str = ""

    # Environment variable to attribute mapping, in display and save order
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            ENV_BASE_URL: "base_url",
            ENV_AUTH_TOKEN: "auth_token",
            ENV_MODEL: "model",
            ENV_HAIKU_MODEL: "haiku_model",
            ENV_SONNET_MODEL: "sonnet_model",
            ENV_OPUS_MODEL: "opus_model",
        },
        repr=False,
    )

    def __repr__(self) -> str:
        # Keep the token out of tracebacks and debug logs
        token = "<REDACTED>" if self.auth_token else "''"
        return (
            f"Settings(base_url={self.base_url!r}, auth_token={token}, "
            f"model={self.model!r}, haiku_model={self.haiku_model!r}, "
            f"sonnet_model={self.sonnet_model!r}, opus_model={self.opus_model!r})"
        )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for an environment variable.

        Args:
            key: Environment variable name (e.g., "ANTHROPIC_MODEL")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    def get_key_for_attribute(self, attr: str) -> str | None:
        """Get the environment variable for an attribute name.

        Args:
            attr: Attribute name (e.g., "haiku_model")

        Returns:
            Environment variable name or None if attribute is unknown
        """
        for key, value in self._key_mapping.items():
            if value == attr:
                return key
        return None

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get the list of managed environment variables in save order."""
        temp = cls()
        return list(temp._key_mapping.keys())

    def get_value(self, key: str) -> str:
        attr = self._key_mapping[key]
        return getattr(self, attr)

    def set_value(self, key: str, value: str) -> None:
        attr = self._key_mapping[key]
        setattr(self, attr, value)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(environment variable, value)`` pairs in save order."""
        for key, attr in self._key_mapping.items():
            yield key, getattr(self, attr)

    def apply_model_defaults(self) -> list[str]:
        """Fill empty model fields with their built-in defaults.

        Returns:
            Environment variable names of the fields that were filled
        """
        filled: list[str] = []
        for key, default in DEFAULT_MODELS.items():
            if not self.get_value(key):
                self.set_value(key, default)
                filled.append(key)
        return filled

    @property
    def has_credentials(self) -> bool:
        """True when both the base URL and the token are set."""
        return bool(self.base_url and self.auth_token)


def mask_token(token: str) -> str:
    """Mask a token for display.

    Tokens longer than 8 characters keep their first and last 4 characters;
    shorter tokens are replaced entirely so that nothing leaks.

    Args:
        token: Token to mask

    Returns:
        Masked token
    """
    if len(token) <= 8:
        return "********"
    return f"{token[:4]}...{token[-4:]}"


__all__ = [
    "Settings",
    "DEFAULT_MODELS",
    "MODEL_LABELS",
    "ENV_BASE_URL",
    "ENV_AUTH_TOKEN",
    "ENV_MODEL",
    "ENV_HAIKU_MODEL",
    "ENV_SONNET_MODEL",
    "ENV_OPUS_MODEL",
    "mask_token",
]
