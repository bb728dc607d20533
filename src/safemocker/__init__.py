"""Mock server-action clients for testing validated, middleware-driven actions."""

import importlib.metadata
import logging

from safemocker.builder import ActionBuilder
from safemocker.client import MockSafeActionClient, create_mock_safe_action_client
from safemocker.config import (
    AuthConfig,
    FrozenConfig,
    MockSafeActionClientConfig,
    config_scope,
    resolve_config,
)
from safemocker.core.types import ActionResult, Context, FieldErrors
from safemocker.exceptions import (
    ActionConfigurationError,
    ActionMetadataError,
    ConfigurationError,
    MiddlewareContractError,
    SafeMockerError,
)
from safemocker.executor import SafeAction
from safemocker.helpers import (
    CompleteActionClients,
    create_authed_action_client,
    create_complete_action_client,
    create_metadata_validated_action_client,
    create_optional_auth_action_client,
    create_rate_limited_action_client,
)
from safemocker.middleware import (
    AuthedMiddleware,
    ErrorHandlingMiddleware,
    MetadataValidationMiddleware,
    OptionalAuthMiddleware,
    RateLimitMiddleware,
    create_authed_middleware,
    create_error_handling_middleware,
    create_metadata_validation_middleware,
    create_optional_auth_middleware,
    create_rate_limit_middleware,
)
from safemocker.pipeline import CallNext, Middleware

# Version handling
try:
    __version__ = importlib.metadata.version("safemocker")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Client and builder
    "MockSafeActionClient",
    "create_mock_safe_action_client",
    "ActionBuilder",
    "SafeAction",
    # Results
    "ActionResult",
    "Context",
    "FieldErrors",
    # Middleware
    "Middleware",
    "CallNext",
    "AuthedMiddleware",
    "OptionalAuthMiddleware",
    "MetadataValidationMiddleware",
    "RateLimitMiddleware",
    "ErrorHandlingMiddleware",
    "create_authed_middleware",
    "create_optional_auth_middleware",
    "create_metadata_validation_middleware",
    "create_rate_limit_middleware",
    "create_error_handling_middleware",
    # Helpers
    "CompleteActionClients",
    "create_authed_action_client",
    "create_optional_auth_action_client",
    "create_rate_limited_action_client",
    "create_metadata_validated_action_client",
    "create_complete_action_client",
    # Configuration
    "FrozenConfig",
    "AuthConfig",
    "MockSafeActionClientConfig",
    "resolve_config",
    "config_scope",
    # Exceptions
    "SafeMockerError",
    "ConfigurationError",
    "ActionMetadataError",
    "ActionConfigurationError",
    "MiddlewareContractError",
]
