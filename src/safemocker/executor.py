"""The callable action produced by the builder.

Each invocation runs, in strict order: input validation, the middleware
chain ending in the handler, optional output validation, and result
wrapping. Validation failures are returned as results at their own stage;
every other exception is caught exactly once, here, and converted into a
``server_error`` result. An action therefore never raises ``Exception``
subclasses to its caller.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from safemocker.config import FrozenConfig
from safemocker.core.types import ActionResult, Failure
from safemocker.pipeline.base import ActionHandler, Middleware
from safemocker.pipeline.chain import MiddlewareChain
from safemocker.pipeline.error_handler import handle_error
from safemocker.pipeline.result_builder import (
    wrap_output_validation_errors,
    wrap_result,
    wrap_validation_errors,
)
from safemocker.pipeline.validation import SchemaValidator

logger = logging.getLogger(__name__)


class SafeAction[TOutput]:
    """A finalized pipeline: ``await action(raw_input)`` -> ``ActionResult``.

    Everything captured here is fixed at build time. Per-invocation state
    (context, result) is created fresh on every call, so concurrent calls
    of the same action do not interact.
    """

    __slots__ = (
        "_chain",
        "_config",
        "_handler",
        "_input_schema",
        "_metadata",
        "_middlewares",
        "_output_schema",
    )

    def __init__(
        self,
        *,
        input_schema: SchemaValidator,
        handler: ActionHandler[Any, TOutput],
        middlewares: Sequence[Middleware],
        config: FrozenConfig,
        metadata: Any = None,
        output_schema: SchemaValidator | None = None,
    ) -> None:
        self._input_schema = input_schema
        self._output_schema = output_schema
        self._handler = handler
        self._middlewares = tuple(middlewares)
        self._config = config
        self._metadata = metadata
        self._chain = MiddlewareChain(self._middlewares, handler)

    async def __call__(self, raw_input: Any = None) -> ActionResult[TOutput]:
        """Run the action against unchecked input."""
        return await self.execute(raw_input)

    async def execute(self, raw_input: Any = None) -> ActionResult[TOutput]:
        """Execute the pipeline for one invocation.

        Args:
            raw_input: Untrusted input; validated against the input schema.

        Returns:
            An ActionResult with at most one populated field.
        """
        try:
            parsed = self._input_schema.validate(raw_input)
            if isinstance(parsed, Failure):
                logger.debug(
                    "Input validation failed for %s: %s", self.name, sorted(parsed.error)
                )
                return wrap_validation_errors(parsed.error)

            output = await self._chain.run(parsed.value, self._metadata)

            if self._output_schema is not None:
                checked = self._output_schema.validate(output)
                if isinstance(checked, Failure):
                    logger.debug(
                        "Output validation failed for %s: %s",
                        self.name,
                        sorted(checked.error),
                    )
                    return wrap_output_validation_errors(checked.error)
                output = checked.value

            return wrap_result(output)
        except Exception as e:
            logger.debug(
                "Action %s raised %s; converting to server error",
                self.name,
                type(e).__name__,
                exc_info=True,
            )
            return handle_error(e, self._config)

    @property
    def name(self) -> str:
        """The handler's name, used in logs."""
        return getattr(self._handler, "__name__", type(self._handler).__name__)

    @property
    def metadata(self) -> Any:
        """Metadata passed to every middleware of this action."""
        return self._metadata

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        """Middleware captured when the pipeline was started, in order."""
        return self._middlewares

    @property
    def input_schema(self) -> Any:
        return self._input_schema.schema

    @property
    def output_schema(self) -> Any:
        return None if self._output_schema is None else self._output_schema.schema

    @property
    def config(self) -> FrozenConfig:
        return self._config

    def __repr__(self) -> str:
        return f"SafeAction({self.name}, chain={self._chain!r})"
