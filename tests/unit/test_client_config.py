"""Unit tests for client configuration resolution.

These tests verify:
- Defaults apply to every unset field independently.
- Precedence: programmatic > config_scope > environment > defaults.
- Resolved configuration is immutable and hides the auth token in repr.
"""

import asyncio
import os
from unittest.mock import patch

import pytest

from safemocker.client import create_mock_safe_action_client
from safemocker.config import (
    AuthConfig,
    FrozenConfig,
    config_scope,
    ensure_frozen_config,
    get_ambient_overrides,
    resolve_config,
)
from safemocker.exceptions import ConfigurationError


@pytest.mark.unit
class TestDefaults:
    def test_empty_config_uses_all_defaults(self):
        resolved = resolve_config()

        assert resolved == FrozenConfig(
            default_server_error="Something went wrong",
            is_production=False,
            auth=AuthConfig(
                enabled=True,
                test_user_id="test-user-id",
                test_user_email="test@example.com",
                test_auth_token="test-token",
            ),
        )

    def test_partial_auth_keeps_other_defaults(self):
        resolved = resolve_config({"auth": {"test_user_id": "user-123"}})

        assert resolved.auth.test_user_id == "user-123"
        assert resolved.auth.test_user_email == "test@example.com"
        assert resolved.auth.test_auth_token == "test-token"
        assert resolved.auth.enabled is True

    @pytest.mark.parametrize("unset", [None, ""])
    def test_none_and_empty_values_count_as_unset(self, unset):
        resolved = resolve_config(
            {
                "default_server_error": unset,
                "is_production": None,
                "auth": {"test_user_id": unset, "enabled": None},
            }
        )

        assert resolved.default_server_error == "Something went wrong"
        assert resolved.is_production is False
        assert resolved.auth.test_user_id == "test-user-id"
        assert resolved.auth.enabled is True

    def test_explicit_false_is_respected(self):
        resolved = resolve_config({"is_production": False, "auth": {"enabled": False}})

        assert resolved.auth.enabled is False

    def test_unknown_keys_are_ignored(self):
        resolved = resolve_config({"not_a_setting": 1, "auth": {"extra": True}})

        assert resolved == FrozenConfig()

    def test_empty_environment_values_count_as_unset(self, monkeypatch):
        monkeypatch.setenv("SAFEMOCKER_IS_PRODUCTION", "")
        monkeypatch.setenv("SAFEMOCKER_AUTH__ENABLED", "")
        monkeypatch.setenv("SAFEMOCKER_DEFAULT_SERVER_ERROR", "")

        resolved = resolve_config()

        assert resolved == FrozenConfig()

    def test_invalid_values_raise_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            resolve_config({"is_production": "definitely"})


@pytest.mark.unit
class TestPrecedence:
    def test_environment_is_read(self):
        with patch.dict(
            os.environ,
            {
                "SAFEMOCKER_IS_PRODUCTION": "true",
                "SAFEMOCKER_DEFAULT_SERVER_ERROR": "From env",
                "SAFEMOCKER_AUTH__TEST_USER_ID": "env-user",
            },
        ):
            resolved = resolve_config()

        assert resolved.is_production is True
        assert resolved.default_server_error == "From env"
        assert resolved.auth.test_user_id == "env-user"
        assert resolved.auth.test_user_email == "test@example.com"

    def test_programmatic_beats_environment(self):
        with patch.dict(os.environ, {"SAFEMOCKER_AUTH__TEST_USER_ID": "env-user"}):
            resolved = resolve_config({"auth": {"test_user_id": "explicit"}})

        assert resolved.auth.test_user_id == "explicit"

    def test_nested_environment_merges_with_programmatic_auth(self):
        with patch.dict(os.environ, {"SAFEMOCKER_AUTH__TEST_AUTH_TOKEN": "env-token"}):
            resolved = resolve_config({"auth": {"test_user_id": "explicit"}})

        assert resolved.auth.test_user_id == "explicit"
        assert resolved.auth.test_auth_token == "env-token"

    def test_scope_beats_environment_and_loses_to_programmatic(self):
        with patch.dict(os.environ, {"SAFEMOCKER_DEFAULT_SERVER_ERROR": "env"}):
            with config_scope(default_server_error="scoped", is_production=True):
                scoped = resolve_config()
                explicit = resolve_config({"default_server_error": "explicit"})

        assert scoped.default_server_error == "scoped"
        assert explicit.default_server_error == "explicit"
        assert explicit.is_production is True

    def test_scopes_nest_and_deep_merge(self):
        with config_scope(auth={"test_user_id": "outer", "test_user_email": "o@x.io"}):
            with config_scope(auth={"test_user_id": "inner"}):
                inner = resolve_config()
            outer = resolve_config()

        assert inner.auth.test_user_id == "inner"
        assert inner.auth.test_user_email == "o@x.io"
        assert outer.auth.test_user_id == "outer"
        assert get_ambient_overrides() == {}

    @pytest.mark.asyncio
    async def test_scopes_are_task_local(self):
        async def resolve_in_scope(user_id: str) -> str:
            with config_scope(auth={"test_user_id": user_id}):
                await asyncio.sleep(0)
                return resolve_config().auth.test_user_id

        results = await asyncio.gather(*(resolve_in_scope(f"u{i}") for i in range(5)))

        assert results == [f"u{i}" for i in range(5)]

    def test_clients_keep_config_frozen_at_creation(self):
        with config_scope(is_production=True):
            client = create_mock_safe_action_client()

        assert client.config.is_production is True
        assert create_mock_safe_action_client().config.is_production is False


@pytest.mark.unit
class TestFrozenConfig:
    def test_is_immutable(self):
        config = resolve_config()

        with pytest.raises(AttributeError):
            config.default_server_error = "changed"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            config.auth.enabled = False  # type: ignore[misc]

    def test_repr_redacts_auth_token(self):
        config = resolve_config({"auth": {"test_auth_token": "super-secret"}})

        assert "super-secret" not in repr(config)
        assert "[REDACTED]" in repr(config)
        assert config.auth.test_auth_token == "super-secret"

    def test_ensure_frozen_config_passes_frozen_through(self):
        config = FrozenConfig(is_production=True)

        assert ensure_frozen_config(config) is config
        assert ensure_frozen_config({"is_production": True}) == config
