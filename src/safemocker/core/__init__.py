"""Core data types shared by the pipeline, middleware and client."""

from safemocker.core.types import (
    ActionResult,
    Context,
    Failure,
    FieldErrors,
    Result,
    Success,
)

__all__ = [
    "ActionResult",
    "Context",
    "Failure",
    "FieldErrors",
    "Result",
    "Success",
]
