"""Configuration scoping for entry-time overrides.

Overrides set by ``config_scope()`` only affect ``resolve_config()`` calls,
which happen when a client or middleware is created. Clients created before
or outside the scope keep the configuration they were frozen with.
"""

from collections.abc import Generator, Mapping
from contextlib import contextmanager
import contextvars
from typing import Any

_ambient_overrides: contextvars.ContextVar[Mapping[str, Any]] = contextvars.ContextVar(
    "safemocker_config_overrides"
)


def deep_merge(base: Mapping[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``updates`` into a copy of ``base``, recursing into nested mappings."""
    merged = dict(base)
    for key, value in updates.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def get_ambient_overrides() -> Mapping[str, Any]:
    """Return overrides set by the innermost active scope, or an empty mapping."""
    try:
        return _ambient_overrides.get()
    except LookupError:
        return {}


@contextmanager
def config_scope(**overrides: Any) -> Generator[None]:
    """Temporarily apply programmatic configuration overrides.

    Scopes nest: inner overrides are deep-merged on top of outer ones. The
    scope is async-safe because it is backed by a context variable.

    Example:
        with config_scope(is_production=True, auth={"test_user_id": "u1"}):
            client = create_authed_action_client()  # frozen with both overrides
    """
    token = _ambient_overrides.set(deep_merge(get_ambient_overrides(), overrides))
    try:
        yield
    finally:
        _ambient_overrides.reset(token)
