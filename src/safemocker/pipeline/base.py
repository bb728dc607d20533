"""Protocols for middleware and action handlers."""

from collections.abc import Awaitable, Mapping
from typing import Any, Protocol, runtime_checkable

from safemocker.core.types import Context


class CallNext(Protocol):
    """Continue the chain, merging ``ctx`` over the accumulated context.

    Returns whatever the rest of the chain (ultimately the handler) returned.
    """

    def __call__(self, ctx: Mapping[str, Any] | None = None) -> Awaitable[Any]: ...


@runtime_checkable
class Middleware(Protocol):
    """Protocol for pipeline middleware.

    Implementations are called with ``(ctx, metadata, call_next)`` and may:

    1. Return ``await call_next(patch)``: **pass through**, optionally
       extending the context.
    2. Return a value without calling ``call_next``: **short-circuit**; the
       value stands in for the handler's return value.
    3. Raise: the executor converts the exception into a server error.

    Both plain and ``async`` callables are accepted.
    """

    def __call__(self, ctx: Context, metadata: Any, call_next: CallNext) -> Any: ...


class ActionHandler[TInput, TOutput](Protocol):
    """Terminal business logic: receives parsed input and the final context."""

    def __call__(
        self, parsed_input: TInput, ctx: Context
    ) -> Awaitable[TOutput] | TOutput: ...
