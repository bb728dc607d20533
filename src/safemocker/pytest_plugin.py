"""pytest fixtures providing ready-made mock action clients.

Enable in a ``conftest.py``::

    pytest_plugins = ["safemocker.pytest_plugin"]

Every fixture is function-scoped, so middleware registered in one test never
leaks into another. Override ``safe_action_config`` or
``action_metadata_schema`` in a conftest to change what the client fixtures
are built with.
"""

from typing import Any

import pytest

from safemocker.client import MockSafeActionClient
from safemocker.config import FrozenConfig, resolve_config
from safemocker.helpers import CompleteActionClients, create_complete_action_client
from safemocker.mock import ActionMetadata


@pytest.fixture
def safe_action_config() -> FrozenConfig:
    """Configuration resolved from the environment and defaults."""
    return resolve_config()


@pytest.fixture
def action_metadata_schema() -> Any:
    """Metadata schema checked by the rate limit stand-in."""
    return ActionMetadata


@pytest.fixture
def action_clients(
    action_metadata_schema: Any, safe_action_config: FrozenConfig
) -> CompleteActionClients:
    """Fresh set of layered clients for one test."""
    return create_complete_action_client(action_metadata_schema, safe_action_config)


@pytest.fixture
def authed_action(action_clients: CompleteActionClients) -> MockSafeActionClient:
    return action_clients.authed_action


@pytest.fixture
def optional_auth_action(action_clients: CompleteActionClients) -> MockSafeActionClient:
    return action_clients.optional_auth_action


@pytest.fixture
def rate_limited_action(action_clients: CompleteActionClients) -> MockSafeActionClient:
    return action_clients.rate_limited_action
