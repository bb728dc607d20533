"""Drop-in replacement for an application's ``safe_action`` module.

Mirrors the clients such a module usually exports, built with default
configuration and the default metadata schema::

    # conftest.py
    from safemocker import mock

    @pytest.fixture(autouse=True)
    def _mock_safe_action(monkeypatch):
        monkeypatch.setattr("myapp.safe_action.authed_action", mock.authed_action)

The module-level clients use ``FrozenConfig()`` defaults and do not read
the environment.
"""

from __future__ import annotations

from collections.abc import Callable
from time import perf_counter
from typing import Any, Literal

from pydantic import BaseModel, Field

from safemocker.client import MockSafeActionClient
from safemocker.config import DEFAULT_SERVER_ERROR, FrozenConfig
from safemocker.core.types import Context
from safemocker.helpers import create_complete_action_client
from safemocker.middleware import create_metadata_validation_middleware
from safemocker.pipeline.base import CallNext

DEFAULT_SERVER_ERROR_MESSAGE = DEFAULT_SERVER_ERROR

DEFAULT_CONFIG = FrozenConfig()

ActionCategory = Literal[
    "analytics", "form", "content", "user", "admin", "reputation", "mfa"
]


class ActionMetadata(BaseModel):
    """Default metadata schema: a non-empty action name and optional category."""

    action_name: str = Field(min_length=1)
    category: ActionCategory | None = None


async def request_context_middleware(
    ctx: Context, metadata: Any, call_next: CallNext
) -> Any:
    """Inject the request details a production base client usually adds."""
    return await call_next(
        {"user_agent": "test-user-agent", "start_time": perf_counter()}
    )


def create_safe_action_client(
    define_metadata_schema: Callable[[], Any] | None = None,
) -> MockSafeActionClient:
    """Create a base client like a framework's ``create_safe_action_client``.

    Args:
        define_metadata_schema: Optional zero-argument callable returning a
            metadata schema. When given, every action built from the client
            must carry metadata matching it.

    Returns:
        A fresh client with the request context middleware registered.
    """
    client = MockSafeActionClient(DEFAULT_CONFIG).use(request_context_middleware)
    if define_metadata_schema is not None:
        client.use(create_metadata_validation_middleware(define_metadata_schema()))
    return client


_clients = create_complete_action_client(ActionMetadata, DEFAULT_CONFIG)

authed_action = _clients.authed_action
optional_auth_action = _clients.optional_auth_action
rate_limited_action = _clients.rate_limited_action

__all__ = [
    "DEFAULT_SERVER_ERROR_MESSAGE",
    "ActionCategory",
    "ActionMetadata",
    "authed_action",
    "create_safe_action_client",
    "optional_auth_action",
    "rate_limited_action",
    "request_context_middleware",
]
