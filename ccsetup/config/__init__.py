"""Configuration management for CCSETUP.

This package contains:
- settings: Settings dataclass with the managed environment variables
- manager: ConfigManager class for loading/saving them
- urls: Base URL normalization and validation
"""

from ccsetup.config.manager import ConfigManager
from ccsetup.config.settings import (
    DEFAULT_MODELS,
    ENV_AUTH_TOKEN,
    ENV_BASE_URL,
    ENV_HAIKU_MODEL,
    ENV_MODEL,
    ENV_OPUS_MODEL,
    ENV_SONNET_MODEL,
    Settings,
    mask_token,
)
from ccsetup.config.urls import (
    ensure_scheme,
    extract_host,
    normalize_url,
    token_page_url,
    validate_url,
)

__all__ = [
    # Core classes
    "Settings",
    "ConfigManager",
    # Environment variable names
    "ENV_BASE_URL",
    "ENV_AUTH_TOKEN",
    "ENV_MODEL",
    "ENV_HAIKU_MODEL",
    "ENV_SONNET_MODEL",
    "ENV_OPUS_MODEL",
    "DEFAULT_MODELS",
    # Helpers
    "mask_token",
    "ensure_scheme",
    "validate_url",
    "normalize_url",
    "extract_host",
    "token_page_url",
]
