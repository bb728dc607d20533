"""Schema validation adapter over pydantic.

Schemas are anything pydantic can build a ``TypeAdapter`` for: a model
class, a ``TypedDict``, an annotated type, or an existing ``TypeAdapter``.
Structured failures (``pydantic.ValidationError``) are converted to a
dotted-path -> messages map; anything else raised while validating is
re-raised unchanged so it reaches the executor's error boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from safemocker.core.types import Failure, FieldErrors, Result, Success

__all__ = ["SchemaValidator", "collect_field_errors", "validate"]


def collect_field_errors(error: ValidationError) -> FieldErrors:
    """Group a pydantic error's issues by dotted location.

    Nested fields are joined with ``.`` and list indices appear as numeric
    segments (``tags.0``). Issues on the same path keep pydantic's order.
    Model-level issues have an empty location and are keyed by ``""``.
    """
    field_errors: FieldErrors = {}
    for issue in error.errors(include_url=False):
        path = ".".join(str(part) for part in issue["loc"])
        field_errors.setdefault(path, []).append(issue["msg"])
    return field_errors


class SchemaValidator:
    """A schema compiled once and reused for every invocation."""

    __slots__ = ("_adapter", "schema")

    def __init__(self, schema: Any) -> None:
        self.schema = schema
        self._adapter: TypeAdapter[Any] = (
            schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)
        )

    def validate(self, value: Any) -> Result[Any, FieldErrors]:
        """Validate ``value``, returning the parsed value or its field errors."""
        try:
            return Success(self._adapter.validate_python(value))
        except ValidationError as e:
            return Failure(collect_field_errors(e))

    def __repr__(self) -> str:
        return f"SchemaValidator({self.schema!r})"


def validate(value: Any, schema: Any) -> Result[Any, FieldErrors]:
    """Validate ``value`` against ``schema`` (compiling it if needed)."""
    validator = schema if isinstance(schema, SchemaValidator) else SchemaValidator(schema)
    return validator.validate(value)
