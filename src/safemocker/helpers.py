"""Helpers that create clients with common middleware already registered.

Layered clients always register middleware in the same order as a
production setup: error handling first (outermost), then the rate limit
stand-in, then the identity middleware.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from safemocker.client import MockSafeActionClient
from safemocker.config import ConfigInput, ensure_frozen_config
from safemocker.middleware import (
    create_authed_middleware,
    create_error_handling_middleware,
    create_metadata_validation_middleware,
    create_optional_auth_middleware,
    create_rate_limit_middleware,
)


class CompleteActionClients(NamedTuple):
    """The set of clients a typical production ``safe_action`` module exports."""

    action_client: MockSafeActionClient
    logged_action: MockSafeActionClient
    rate_limited_action: MockSafeActionClient
    authed_action: MockSafeActionClient
    optional_auth_action: MockSafeActionClient


def create_authed_action_client(config: ConfigInput = None) -> MockSafeActionClient:
    """Create a client whose actions receive ``user_id``, ``user_email`` and ``auth_token``.

    Example:
        authed = create_authed_action_client({"auth": {"test_user_id": "user-123"}})
        action = authed.input_schema(Payload).action(
            lambda parsed_input, ctx: {"user_id": ctx["user_id"]}
        )
    """
    client = MockSafeActionClient(config)
    return client.use(create_authed_middleware(client.config))


def create_optional_auth_action_client(config: ConfigInput = None) -> MockSafeActionClient:
    """Create a client whose actions receive ``user`` and the flat identity fields."""
    client = MockSafeActionClient(config)
    return client.use(create_optional_auth_middleware(client.config))


def create_rate_limited_action_client(
    metadata_schema: Any | None = None,
    config: ConfigInput = None,
) -> MockSafeActionClient:
    """Create a client with the rate limit stand-in.

    Args:
        metadata_schema: When given, present metadata must match it or the
            action fails with "Invalid action configuration".
        config: Client configuration.
    """
    client = MockSafeActionClient(config)
    return client.use(create_rate_limit_middleware(metadata_schema))


def create_metadata_validated_action_client(
    metadata_schema: Any,
    config: ConfigInput = None,
) -> MockSafeActionClient:
    """Create a client that fails actions with "Invalid action metadata" on bad metadata."""
    client = MockSafeActionClient(config)
    return client.use(create_metadata_validation_middleware(metadata_schema))


def create_complete_action_client(
    metadata_schema: Any,
    config: ConfigInput = None,
) -> CompleteActionClients:
    """Create every client variant a production ``safe_action`` module exposes.

    Each variant is a fresh client; registering middleware on one never
    affects the others. Configuration is resolved once and shared.

    Returns:
        CompleteActionClients with, in order of increasing layering:
        ``action_client`` (no middleware), ``logged_action`` (error handling),
        ``rate_limited_action`` (+ rate limit), ``authed_action`` (+ auth) and
        ``optional_auth_action`` (+ optional auth).
    """
    frozen = ensure_frozen_config(config)
    error_handling = create_error_handling_middleware(frozen)
    rate_limit = create_rate_limit_middleware(metadata_schema)

    action_client = MockSafeActionClient(frozen)
    logged_action = MockSafeActionClient(frozen).use(error_handling)
    rate_limited_action = MockSafeActionClient(frozen).use(error_handling).use(rate_limit)
    authed_action = (
        MockSafeActionClient(frozen)
        .use(error_handling)
        .use(rate_limit)
        .use(create_authed_middleware(frozen))
    )
    optional_auth_action = (
        MockSafeActionClient(frozen)
        .use(error_handling)
        .use(rate_limit)
        .use(create_optional_auth_middleware(frozen))
    )

    return CompleteActionClients(
        action_client=action_client,
        logged_action=logged_action,
        rate_limited_action=rate_limited_action,
        authed_action=authed_action,
        optional_auth_action=optional_auth_action,
    )
