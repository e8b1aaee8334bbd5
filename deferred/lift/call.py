"""
Calling async functions with automatic lifting.

Functions and a decorator that turn `async def ... -> Result[T, E]` into
recipes without running anything.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from kungfu import Result

from ..monad import DeferredOk, DeferredResult
from ..scheduler import Scheduler


def wrap_async[T, E](
    thunk: Callable[[], Awaitable[Result[T, E]]],
    *,
    scheduler: Scheduler | None = None,
) -> DeferredResult[T, E]:
    """
    Wrap a lazy async computation (thunk) into a recipe.

    **When to use:** You have a zero-arg callable returning an awaitable
    Result. For a function plus arguments, prefer `call()`.

    NOTE: thunk must be a zero-arg callable (lambda) for laziness.
          Passing a coroutine object would start the work on creation.
    """

    async def run() -> Result[T, E]:
        return await thunk()

    return DeferredOk(run, scheduler=scheduler)


# Same operation, named after what it accepts
from_thunk = wrap_async


def lifted[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
) -> Callable[P, DeferredResult[T, E]]:
    """
    Decorator: make an async Result-returning function return a recipe instead.

    Example:
        @lifted
        async def check_height(patron: Patron) -> Result[Patron, str]:
            ...

        check_height(patron)  # DeferredResult, nothing has run yet
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> DeferredResult[T, E]:
        return wrap_async(lambda: func(*args, **kwargs))

    return wrapper


def call[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> DeferredResult[T, E]:
    """
    Call an async function with arguments, lifted into a recipe.

    Example:
        async def fetch_patron(patron_id: int) -> Result[Patron, str]: ...

        dr = call(fetch_patron, 42)
    """
    return wrap_async(lambda: func(*args, **kwargs))


__all__ = (
    "call",
    "from_thunk",
    "lifted",
    "wrap_async",
)
