"""Pipeline stages used by every action invocation."""

from .base import ActionHandler, CallNext, Middleware
from .chain import MiddlewareChain, merge_context
from .error_handler import classify_error, handle_error
from .result_builder import (
    wrap_error,
    wrap_output_validation_errors,
    wrap_result,
    wrap_server_error,
    wrap_validation_errors,
)
from .validation import SchemaValidator, collect_field_errors, validate

__all__ = [  # noqa: RUF022
    # Protocols
    "Middleware",
    "CallNext",
    "ActionHandler",
    # Chain
    "MiddlewareChain",
    "merge_context",
    # Validation
    "SchemaValidator",
    "validate",
    "collect_field_errors",
    # Errors
    "classify_error",
    "handle_error",
    # Results
    "wrap_result",
    "wrap_error",
    "wrap_server_error",
    "wrap_validation_errors",
    "wrap_output_validation_errors",
]
