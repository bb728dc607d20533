"""Core configuration data types for safemocker clients.

Configuration follows the resolve-once, freeze-then-flow pattern: mappings
and environment values are resolved into a ``FrozenConfig`` when a client is
created and never change afterwards.
"""

from dataclasses import dataclass, field
from typing import TypedDict

# --- Accepted input shapes ---


class AuthConfigInput(TypedDict, total=False):
    """Optional auth section of the programmatic configuration."""

    enabled: bool
    test_user_id: str
    test_user_email: str
    test_auth_token: str


class MockSafeActionClientConfig(TypedDict, total=False):
    """Programmatic configuration accepted by clients and helpers.

    Every key is optional and defaulted independently.
    """

    default_server_error: str
    is_production: bool
    auth: AuthConfigInput


# --- Resolved configuration ---


@dataclass(frozen=True, slots=True)
class AuthConfig:
    """Immutable test identity consumed by the auth middleware."""

    enabled: bool = True
    test_user_id: str = "test-user-id"
    test_user_email: str = "test@example.com"
    test_auth_token: str = "test-token"

    def __repr__(self) -> str:
        """Representation with the auth token redacted."""
        return (
            f"AuthConfig(enabled={self.enabled!r}, test_user_id={self.test_user_id!r}, "
            f"test_user_email={self.test_user_email!r}, test_auth_token='[REDACTED]')"
        )


@dataclass(frozen=True, slots=True)
class FrozenConfig:
    """Immutable configuration held by a client for its whole lifetime.

    Any attempt to modify this object will raise an exception.
    """

    default_server_error: str = "Something went wrong"
    is_production: bool = False
    auth: AuthConfig = field(default_factory=AuthConfig)
