"""Mock safe action client.

The client owns an append-only middleware list and a frozen configuration,
and starts pipelines via ``input_schema()``.
"""

from __future__ import annotations

import logging
from typing import Any, Self

from safemocker.builder import ActionBuilder
from safemocker.config import ConfigInput, FrozenConfig, ensure_frozen_config
from safemocker.core.types import _require
from safemocker.pipeline.base import Middleware
from safemocker.pipeline.validation import SchemaValidator

logger = logging.getLogger(__name__)


class MockSafeActionClient:
    """Stand-in for a framework's safe action client.

    Middleware runs in registration order. ``input_schema()`` snapshots the
    middleware registered so far: middleware added afterwards only affects
    pipelines started afterwards.

    Example:
        client = MockSafeActionClient({"auth": {"test_user_id": "user-123"}})
        client.use(create_authed_middleware(client.config))

        get_user = client.input_schema(GetUser).action(get_user_handler)
        result = await get_user({"id": "123"})
    """

    __slots__ = ("_config", "_middlewares")

    def __init__(self, config: ConfigInput = None) -> None:
        self._config: FrozenConfig = ensure_frozen_config(config)
        self._middlewares: list[Middleware] = []

    def use(self, middleware: Middleware) -> Self:
        """Append ``middleware`` to the chain and return this client."""
        _require(
            condition=callable(middleware),
            message="must be callable",
            exc=TypeError,
            field_name="middleware",
        )
        self._middlewares.append(middleware)
        logger.debug(
            "Registered middleware #%d: %s",
            len(self._middlewares),
            getattr(middleware, "__name__", type(middleware).__name__),
        )
        return self

    def input_schema(self, schema: Any) -> ActionBuilder:
        """Start a pipeline whose raw input is validated against ``schema``."""
        return ActionBuilder(
            _input_schema=SchemaValidator(schema),
            _middlewares=tuple(self._middlewares),
            _config=self._config,
        )

    @property
    def config(self) -> FrozenConfig:
        return self._config

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        """Registered middleware, in execution order."""
        return tuple(self._middlewares)

    def __repr__(self) -> str:
        return (
            f"MockSafeActionClient(middlewares={len(self._middlewares)}, "
            f"config={self._config!r})"
        )


def create_mock_safe_action_client(config: ConfigInput = None) -> MockSafeActionClient:
    """Create a client with no middleware.

    Args:
        config: Programmatic configuration; unset fields fall back to the
            environment and then to defaults.
    """
    return MockSafeActionClient(config)
