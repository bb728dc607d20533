"""Constructors for the uniform ``ActionResult``.

Each constructor populates exactly one field and leaves the other three as
``None``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from safemocker.core.types import ActionResult, FieldErrors


def _copy_errors(errors: Mapping[str, Sequence[str]]) -> FieldErrors:
    return {path: list(messages) for path, messages in errors.items()}


def wrap_result[TData](data: TData) -> ActionResult[TData]:
    """Wrap a successful payload."""
    return ActionResult(data=data)


def wrap_server_error(message: str) -> ActionResult[None]:
    """Wrap an already-classified server error message."""
    return ActionResult(server_error=message)


def wrap_error(error: object, default_message: str) -> ActionResult[None]:
    """Wrap a raised value as a server error.

    An exception with a non-empty message surfaces that message; anything
    else (including an exception with an empty message) surfaces
    ``default_message``. Production-mode masking is the error handler's job.
    """
    message = str(error) if isinstance(error, Exception) else ""
    return wrap_server_error(message or default_message)


def wrap_validation_errors(
    field_errors: Mapping[str, Sequence[str]],
) -> ActionResult[None]:
    """Wrap input validation failures (caller sent bad data)."""
    return ActionResult(field_errors=_copy_errors(field_errors))


def wrap_output_validation_errors(
    validation_errors: Mapping[str, Sequence[str]],
) -> ActionResult[None]:
    """Wrap output validation failures (handler produced bad data)."""
    return ActionResult(validation_errors=_copy_errors(validation_errors))
