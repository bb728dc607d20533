"""Exceptions raised by the safemocker pipeline and its middleware"""  # noqa: D415

INVALID_ACTION_METADATA = "Invalid action metadata"
INVALID_ACTION_CONFIGURATION = "Invalid action configuration"


class SafeMockerError(Exception):
    """Base exception for safemocker errors"""  # noqa: D415


class ConfigurationError(SafeMockerError):
    """Raised when client configuration cannot be resolved or validated"""  # noqa: D415


class ActionMetadataError(SafeMockerError):
    """Raised by metadata validation middleware when metadata does not match its schema.

    The message is fixed so that action results never echo the raw schema
    failure back to callers.
    """

    def __init__(self, message: str = INVALID_ACTION_METADATA) -> None:
        super().__init__(message)


class ActionConfigurationError(SafeMockerError):
    """Raised by the rate limit stub when action metadata is misconfigured."""

    def __init__(self, message: str = INVALID_ACTION_CONFIGURATION) -> None:
        super().__init__(message)


class MiddlewareContractError(SafeMockerError):
    """Raised when a middleware breaks the chain contract.

    Calling ``call_next`` more than once from a single middleware invocation
    is the only runtime violation detected.
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
