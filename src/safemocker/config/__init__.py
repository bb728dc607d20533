"""Configuration management for safemocker clients.

Key components:
- ClientSettings: Pydantic settings schema (environment + programmatic)
- FrozenConfig: Immutable configuration held by clients and middleware
- config_scope: Context manager for entry-time overrides
"""

from .api import ConfigInput, ensure_frozen_config, resolve_config
from .schema import (
    DEFAULT_SERVER_ERROR,
    DEFAULT_TEST_AUTH_TOKEN,
    DEFAULT_TEST_USER_EMAIL,
    DEFAULT_TEST_USER_ID,
    AuthSettings,
    ClientSettings,
)
from .scope import config_scope, get_ambient_overrides
from .types import AuthConfig, AuthConfigInput, FrozenConfig, MockSafeActionClientConfig

__all__ = [  # noqa: RUF022
    # Main API
    "resolve_config",
    "ensure_frozen_config",
    "config_scope",
    "get_ambient_overrides",
    # Core types
    "FrozenConfig",
    "AuthConfig",
    "ConfigInput",
    "MockSafeActionClientConfig",
    "AuthConfigInput",
    # Schema
    "ClientSettings",
    "AuthSettings",
    # Defaults
    "DEFAULT_SERVER_ERROR",
    "DEFAULT_TEST_USER_ID",
    "DEFAULT_TEST_USER_EMAIL",
    "DEFAULT_TEST_AUTH_TOKEN",
]
