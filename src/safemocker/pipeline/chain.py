"""Middleware chain runner.

Uses the **pipeline chain** pattern: each middleware calls ``call_next()`` to
pass through, or returns without calling it to short-circuit. Context
patches passed to ``call_next`` are shallow-merged over the accumulated
context, so later middleware wins on key collisions.

Usage::

    chain = MiddlewareChain([auth_middleware, logging_middleware], handler)
    value = await chain.run(parsed_input, metadata={"action_name": "get"})
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import inspect
from typing import Any

from safemocker.core.types import Context, _freeze_mapping
from safemocker.exceptions import MiddlewareContractError

from .base import ActionHandler, CallNext, Middleware


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, so sync and async callables mix."""
    if inspect.isawaitable(value):
        return await value
    return value


def merge_context(ctx: Context, patch: Mapping[str, Any] | None) -> Context:
    """Return a new read-only context with ``patch`` applied over ``ctx``."""
    if not patch:
        return ctx
    return _freeze_mapping({**ctx, **patch})


class MiddlewareChain:
    """Ordered middleware ending in a handler.

    The chain holds no per-invocation state; every ``run`` starts from an
    empty context, so one chain may serve concurrent invocations.
    """

    __slots__ = ("_handler", "_layers")

    def __init__(
        self, layers: Sequence[Middleware], handler: ActionHandler[Any, Any]
    ) -> None:
        self._layers = tuple(layers)
        self._handler = handler

    async def run(self, parsed_input: Any, metadata: Any = None) -> Any:
        """Run every middleware in order, then the handler; return its value."""
        return await self._execute(0, _freeze_mapping(None), parsed_input, metadata)

    async def _execute(
        self, index: int, current: Context, parsed_input: Any, metadata: Any
    ) -> Any:
        if index >= len(self._layers):
            return await resolve(self._handler(parsed_input, current))

        layer = self._layers[index]
        called = False

        async def call_next(ctx: Mapping[str, Any] | None = None) -> Any:
            nonlocal called
            if called:
                raise MiddlewareContractError(
                    f"Middleware {_layer_name(layer)} called call_next() more than once",
                    index=index,
                )
            called = True
            return await self._execute(
                index + 1, merge_context(current, ctx), parsed_input, metadata
            )

        next_fn: CallNext = call_next
        return await resolve(layer(current, metadata, next_fn))

    def __len__(self) -> int:
        return len(self._layers)

    def __repr__(self) -> str:
        names = [_layer_name(m) for m in self._layers]
        return f"MiddlewareChain({' → '.join([*names, _layer_name(self._handler)])})"


def _layer_name(obj: object) -> str:
    return getattr(obj, "__name__", None) or type(obj).__name__
