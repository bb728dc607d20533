"""Server error classification for raised exceptions"""  # noqa: D415

from __future__ import annotations

from safemocker.config import FrozenConfig
from safemocker.core.types import ActionResult

from .result_builder import wrap_error, wrap_server_error


def classify_error(error: object, *, default_message: str, is_production: bool) -> str:
    """Choose the user-visible message for ``error``.

    Production mode always returns ``default_message`` so exception text never
    leaks to callers. In development an exception's own message is used when
    it is non-empty. Values that are not exceptions never leak in either mode.
    """
    if is_production:
        return default_message
    return wrap_error(error, default_message).server_error


def handle_error(error: object, config: FrozenConfig) -> ActionResult[None]:
    """Convert a raised value into a server error result."""
    message = classify_error(
        error,
        default_message=config.default_server_error,
        is_production=config.is_production,
    )
    return wrap_server_error(message)
