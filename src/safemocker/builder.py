"""Fluent, immutable pipeline builder.

Replicates the server-action method chain::

    client.input_schema(Schema).metadata(meta).output_schema(Out).action(handler)

Every step returns a *new* builder, so a partially built pipeline can be
reused as the base for several actions without one leaking into another.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from safemocker.config import FrozenConfig
from safemocker.core.types import _require
from safemocker.executor import SafeAction
from safemocker.pipeline.base import ActionHandler, Middleware
from safemocker.pipeline.validation import SchemaValidator


@dataclasses.dataclass(frozen=True, slots=True)
class ActionBuilder:
    """A pipeline under construction.

    Attributes are private; use the chain methods to derive new builders.
    """

    _input_schema: SchemaValidator
    _middlewares: tuple[Middleware, ...]
    _config: FrozenConfig
    _output_schema: SchemaValidator | None = None
    _metadata: Any = None

    def output_schema(self, schema: Any) -> ActionBuilder:
        """Validate the handler's return value against ``schema``.

        A failing return value is reported in ``validation_errors`` (not
        ``field_errors``), so "caller sent bad data" and "handler produced
        bad data" stay distinguishable. May be called before or after
        ``metadata()``.
        """
        return dataclasses.replace(self, _output_schema=SchemaValidator(schema))

    def metadata(self, metadata: Any) -> ActionBuilder:
        """Attach metadata passed unchanged to every middleware of this action."""
        return dataclasses.replace(self, _metadata=metadata)

    def action[TOutput](self, handler: ActionHandler[Any, TOutput]) -> SafeAction[TOutput]:
        """Finalize the pipeline with its handler.

        Args:
            handler: Callable ``(parsed_input, ctx)``, sync or async.

        Returns:
            The callable action; ``await action(raw_input)`` never raises for
            ordinary exceptions.
        """
        _require(
            condition=callable(handler),
            message="must be callable",
            exc=TypeError,
            field_name="handler",
        )
        return SafeAction(
            input_schema=self._input_schema,
            handler=handler,
            middlewares=self._middlewares,
            config=self._config,
            metadata=self._metadata,
            output_schema=self._output_schema,
        )
