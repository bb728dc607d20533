"""Public API for the configuration system.

Precedence, highest first: programmatic > ``config_scope`` > environment >
defaults.
"""

from collections.abc import Mapping
import logging
from typing import Any

from pydantic import ValidationError

from safemocker.exceptions import ConfigurationError

from .schema import ClientSettings
from .scope import deep_merge, get_ambient_overrides
from .types import FrozenConfig, MockSafeActionClientConfig

logger = logging.getLogger(__name__)

type ConfigInput = MockSafeActionClientConfig | Mapping[str, Any] | FrozenConfig | None


def _drop_unset(values: Mapping[str, Any]) -> dict[str, Any]:
    """Remove None and empty-string values so lower-precedence sources apply."""
    cleaned: dict[str, Any] = {}
    for key, value in values.items():
        if value is None or value == "":
            continue
        if isinstance(value, Mapping):
            cleaned[key] = _drop_unset(value)
        else:
            cleaned[key] = value
    return cleaned


def resolve_config(
    programmatic: MockSafeActionClientConfig | Mapping[str, Any] | None = None,
) -> FrozenConfig:
    """Resolve client configuration from all sources with proper precedence.

    Args:
        programmatic: Overrides with the highest precedence. Only known
            fields are used; None and empty strings count as unset.

    Returns:
        FrozenConfig with every field defaulted.

    Raises:
        ConfigurationError: If the merged values fail validation.

    Example:
        config = resolve_config({"is_production": True})
        config = resolve_config({"auth": {"test_user_id": "user-123"}})
    """
    overrides = deep_merge(
        _drop_unset(get_ambient_overrides()), _drop_unset(programmatic or {})
    )
    try:
        settings = ClientSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e

    frozen = settings.to_frozen()
    logger.debug("Resolved client configuration: %r", frozen)
    return frozen


def ensure_frozen_config(config: ConfigInput = None) -> FrozenConfig:
    """Return ``config`` unchanged if already frozen, otherwise resolve it."""
    if isinstance(config, FrozenConfig):
        return config
    return resolve_config(config)
