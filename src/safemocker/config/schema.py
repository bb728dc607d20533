"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces client
configuration from environment variables and programmatic overrides into
the correct types with proper defaults.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import AuthConfig, FrozenConfig

DEFAULT_SERVER_ERROR = "Something went wrong"
DEFAULT_TEST_USER_ID = "test-user-id"
DEFAULT_TEST_USER_EMAIL = "test@example.com"
DEFAULT_TEST_AUTH_TOKEN = "test-token"


class AuthSettings(BaseModel):
    """Test identity injected by the authentication middleware."""

    model_config = ConfigDict(extra="ignore")

    enabled: bool = Field(
        default=True,
        description="Inject the test identity into action context",
    )
    test_user_id: str = Field(
        default=DEFAULT_TEST_USER_ID,
        description="Value injected as ctx['user_id']",
    )
    test_user_email: str = Field(
        default=DEFAULT_TEST_USER_EMAIL,
        description="Value injected as ctx['user_email']",
    )
    test_auth_token: str = Field(
        default=DEFAULT_TEST_AUTH_TOKEN,
        description="Value injected as ctx['auth_token']",
    )

    @field_validator("test_user_id", "test_user_email", "test_auth_token", mode="before")
    @classmethod
    def blank_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat missing or empty identity values as unset."""
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("enabled", mode="before")
    @classmethod
    def none_enables(cls, v: Any) -> Any:
        """An explicit None or empty value keeps the default (enabled)."""
        return True if v is None or v == "" else v


class ClientSettings(BaseSettings):
    """Pydantic settings schema for mock client configuration.

    Integrates with environment variables using the SAFEMOCKER_ prefix.
    Nested auth fields use a double underscore, e.g.
    ``SAFEMOCKER_AUTH__TEST_USER_ID``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEMOCKER_",
        env_nested_delimiter="__",
        env_file=None,
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",  # Ignore unknown keys for forward compatibility
    )

    default_server_error: str = Field(
        default=DEFAULT_SERVER_ERROR,
        description="Message used when an error message must not or cannot be shown",
    )

    is_production: bool = Field(
        default=False,
        description="Hide exception messages behind default_server_error",
    )

    auth: AuthSettings = Field(default_factory=AuthSettings)

    @field_validator("default_server_error", mode="before")
    @classmethod
    def blank_message_to_default(cls, v: Any) -> Any:
        """Treat missing or empty messages as unset."""
        if v is None or v == "":
            return DEFAULT_SERVER_ERROR
        return v

    @field_validator("is_production", mode="before")
    @classmethod
    def none_is_development(cls, v: Any) -> Any:
        """An explicit None or empty value keeps development mode."""
        return False if v is None or v == "" else v

    @field_validator("auth", mode="before")
    @classmethod
    def none_auth_to_defaults(cls, v: Any) -> Any:
        """An explicit None auth section resolves to default auth settings."""
        return {} if v is None else v

    def to_frozen(self) -> FrozenConfig:
        """Convert to the immutable configuration handed to clients."""
        return FrozenConfig(
            default_server_error=self.default_server_error,
            is_production=self.is_production,
            auth=AuthConfig(
                enabled=self.auth.enabled,
                test_user_id=self.auth.test_user_id,
                test_user_email=self.auth.test_user_email,
                test_auth_token=self.auth.test_auth_token,
            ),
        )
