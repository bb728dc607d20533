"""Core data types that flow through the action pipeline.

This module defines the immutable values produced and consumed while an
action runs: the ``Success``/``Failure`` pair used by internal stages, the
``ActionResult`` returned to callers, and the shapes of context and field
errors. Every invocation builds its own instances; nothing here is shared
between invocations.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
from types import MappingProxyType
import typing

# --- Minimal guard helpers (clarity > boilerplate) ---


def _freeze_mapping(m: Mapping[str, typing.Any] | None) -> Mapping[str, typing.Any]:
    """Return an immutable mapping view, treating None as empty."""
    if isinstance(m, MappingProxyType):
        return m
    return MappingProxyType(dict(m or {}))


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


# --- Result Monad for stage outcomes ---
# Validation stages report expected failures as values instead of raising,
# so the executor only needs a single try/except for unexpected errors.


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A successful stage outcome."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """A failed stage outcome, carrying the failure payload."""

    error: TFailure


type Result[TSuccess, TFailure] = Success[TSuccess] | Failure[TFailure]

# --- Pipeline shapes ---

type FieldErrors = dict[str, list[str]]
"""Dotted field path -> messages, in the order the schema engine reported them."""

type Context = Mapping[str, typing.Any]
"""Read-only view of the context accumulated by the middleware chain."""


@dataclasses.dataclass(frozen=True, slots=True)
class ActionResult[TData]:
    """Uniform outcome of one action invocation.

    At most one field is populated. A successful action returning ``None``
    leaves all four fields ``None``, so callers can always probe every field
    without checking the object's shape first.

    Attributes:
        data: The handler's payload (parsed by the output schema, if any).
        server_error: User-visible message for any unexpected failure.
        field_errors: Input validation failures keyed by dotted field path.
        validation_errors: Output validation failures keyed by dotted path.
    """

    data: TData | None = None
    server_error: str | None = None
    field_errors: FieldErrors | None = None
    validation_errors: FieldErrors | None = None

    @property
    def is_success(self) -> bool:
        """True when no error field is populated."""
        return (
            self.server_error is None
            and self.field_errors is None
            and self.validation_errors is None
        )

    def to_dict(self) -> dict[str, typing.Any]:
        """Return all four fields as a plain dictionary."""
        return {
            "data": self.data,
            "server_error": self.server_error,
            "field_errors": self.field_errors,
            "validation_errors": self.validation_errors,
        }
