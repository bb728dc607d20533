"""Pre-built middleware for common server-action patterns.

Each middleware is a small callable class holding its build-time inputs; it
keeps no per-invocation state, so one instance can be shared by any number
of clients and concurrent invocations. The matching ``create_*`` factories
accept anything ``ensure_frozen_config`` accepts.
"""

from __future__ import annotations

import logging
from typing import Any

from safemocker.config import ConfigInput, FrozenConfig, ensure_frozen_config
from safemocker.core.types import Context, Failure
from safemocker.exceptions import ActionConfigurationError, ActionMetadataError
from safemocker.pipeline.base import CallNext
from safemocker.pipeline.validation import SchemaValidator

logger = logging.getLogger(__name__)


class AuthedMiddleware:
    """Inject a fixed test identity as ``user_id``, ``user_email`` and ``auth_token``.

    Never consults session state. When auth is disabled in the config the
    context is forwarded unchanged.
    """

    __slots__ = ("_config",)

    def __init__(self, config: FrozenConfig) -> None:
        self._config = config

    async def __call__(self, ctx: Context, metadata: Any, call_next: CallNext) -> Any:
        auth = self._config.auth
        if not auth.enabled:
            return await call_next()

        return await call_next(
            {
                "user_id": auth.test_user_id,
                "user_email": auth.test_user_email,
                "auth_token": auth.test_auth_token,
            }
        )


class OptionalAuthMiddleware:
    """Inject the test identity both as a ``user`` object and as flat fields.

    Handlers written for optional authentication can check either
    ``ctx["user"]`` or ``ctx["user_id"]``.
    """

    __slots__ = ("_config",)

    def __init__(self, config: FrozenConfig) -> None:
        self._config = config

    async def __call__(self, ctx: Context, metadata: Any, call_next: CallNext) -> Any:
        auth = self._config.auth
        if not auth.enabled:
            return await call_next()

        return await call_next(
            {
                "user": {"id": auth.test_user_id, "email": auth.test_user_email},
                "user_id": auth.test_user_id,
                "user_email": auth.test_user_email,
                "auth_token": auth.test_auth_token,
            }
        )


class MetadataValidationMiddleware:
    """Reject actions whose metadata does not match ``schema``.

    A structured validation failure raises ``ActionMetadataError`` ("Invalid
    action metadata"), which the executor turns into a server error. Other
    errors raised while validating propagate unchanged. Missing metadata is
    validated too, as ``None``.
    """

    __slots__ = ("_validator",)

    def __init__(self, schema: Any) -> None:
        self._validator = SchemaValidator(schema)

    async def __call__(self, ctx: Context, metadata: Any, call_next: CallNext) -> Any:
        if isinstance(self._validator.validate(metadata), Failure):
            raise ActionMetadataError()
        return await call_next()


class RateLimitMiddleware:
    """Rate limiting stand-in: checks metadata shape, never counts requests.

    Metadata is validated only when a schema was given *and* metadata is
    present. A structured failure raises ``ActionConfigurationError``
    ("Invalid action configuration").
    """

    __slots__ = ("_validator",)

    def __init__(self, schema: Any | None = None) -> None:
        self._validator = None if schema is None else SchemaValidator(schema)

    async def __call__(self, ctx: Context, metadata: Any, call_next: CallNext) -> Any:
        if self._validator is not None and metadata is not None:
            if isinstance(self._validator.validate(metadata), Failure):
                raise ActionConfigurationError()
        return await call_next()


class ErrorHandlingMiddleware:
    """Logging placeholder that mirrors a production error-handling layer.

    Errors from downstream are logged and re-raised unchanged; conversion to
    a server error stays with the executor.
    """

    __slots__ = ("_config",)

    def __init__(self, config: FrozenConfig) -> None:
        self._config = config

    async def __call__(self, ctx: Context, metadata: Any, call_next: CallNext) -> Any:
        try:
            return await call_next()
        except Exception as e:
            logger.debug(
                "Action failed with %s (production=%s)",
                type(e).__name__,
                self._config.is_production,
            )
            raise


# --- Factories ---


def create_authed_middleware(config: ConfigInput = None) -> AuthedMiddleware:
    """Create middleware injecting ``user_id``, ``user_email`` and ``auth_token``."""
    return AuthedMiddleware(ensure_frozen_config(config))


def create_optional_auth_middleware(config: ConfigInput = None) -> OptionalAuthMiddleware:
    """Create middleware injecting ``user`` plus the flat identity fields."""
    return OptionalAuthMiddleware(ensure_frozen_config(config))


def create_metadata_validation_middleware(schema: Any) -> MetadataValidationMiddleware:
    """Create middleware that requires metadata to match ``schema``."""
    return MetadataValidationMiddleware(schema)


def create_rate_limit_middleware(schema: Any | None = None) -> RateLimitMiddleware:
    """Create the rate limit stand-in, optionally checking metadata against ``schema``."""
    return RateLimitMiddleware(schema)


def create_error_handling_middleware(config: ConfigInput = None) -> ErrorHandlingMiddleware:
    """Create the pass-through error handling layer."""
    return ErrorHandlingMiddleware(ensure_frozen_config(config))
