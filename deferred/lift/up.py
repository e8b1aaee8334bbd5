"""
Lifting values into DeferredResult.

Functions that turn plain values, Result, Option, predicates and
exception-based code into recipes. Every constructor takes keyword-only
`scheduler=` and `policy=`; omitted, the ambient scheduler and the reusable
policy are used.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Option, Result, Some

from .._types import Predicate
from ..config import ForcePolicy
from ..monad import DeferredError, DeferredOk, DeferredResult
from ..scheduler import Scheduler


def succeed[T](
    value: T,
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, Never]:
    """
    Lift a plain value into an always-succeeding recipe.

    **When to use:** To start a chain from a value you already have.

    Example:
        from deferred import lift as L

        patron = L.up.succeed(Patron("John", height=170, tickets=2))
        result = await patron  # Ok(Patron(...))
    """

    async def run() -> Result[T, Never]:
        return Ok(value)

    return DeferredOk(run, scheduler=scheduler, policy=policy)


def fail[E](
    error: E,
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[Never, E]:
    """
    Create an always-failing recipe. Dual of succeed().

    Every map/chain on the result is skipped; forcing yields Error(error).
    """

    async def run() -> Result[Never, E]:
        return Error(error)

    return DeferredError(run, scheduler=scheduler, policy=policy)


def from_predicate[T, E](
    value: T,
    predicate: Predicate[T],
    on_false: Callable[[], E],
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, E]:
    """
    succeed(value) if predicate(value) holds, else fail(on_false()).

    NOTE: The predicate runs NOW, at construction, not at force time.
          Only the resulting recipe is deferred. To check lazily, use
          succeed(value).filter_or_else(predicate, on_false).
    """
    if predicate(value):
        return succeed(value, scheduler=scheduler, policy=policy)
    return fail(on_false(), scheduler=scheduler, policy=policy)


def from_result[T, E](
    result: Result[T, E],
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, E]:
    """
    Lift an already-computed Result. The recipe's shape follows the tag.

    **When to use:** A sync function returned Result and the pipeline
    continues with recipes, e.g. `dr.chain(lambda p: from_result(check(p)))`.
    """
    match result:
        case Ok(value):
            return succeed(value, scheduler=scheduler, policy=policy)
        case Error(err):
            return fail(err, scheduler=scheduler, policy=policy)


def from_option[T, E](
    option: Option[T],
    on_none: Callable[[], E],
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, E]:
    """Some(value) becomes succeed(value); Nothing becomes fail(on_none())."""
    match option:
        case Some(value):
            return succeed(value, scheduler=scheduler, policy=policy)
        case _:
            return fail(on_none(), scheduler=scheduler, policy=policy)


def from_optional[T, E](
    value: T | None,
    on_none: Callable[[], E],
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, E]:
    """
    Convert Optional to a recipe. None becomes fail(on_none()).

    **When to use:** Database lookups, cache checks, config reads: anywhere
    you get `T | None` instead of a kungfu Option.

    NOTE: on_none is a thunk so the error is only built when value is None.
    """
    if value is None:
        return fail(on_none(), scheduler=scheduler, policy=policy)
    return succeed(value, scheduler=scheduler, policy=policy)


def from_try[T](
    fn: Callable[[], T],
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, Exception]:
    """
    Call fn NOW; a raised Exception becomes fail(exc), a return becomes succeed(value).

    **When to use:** Bridge from exception-based sync code into recipes.

    Example:
        parsed = from_try(lambda: json.loads(raw))

    NOTE: Catches Exception subclasses only; KeyboardInterrupt and
          SystemExit still propagate. For lazy evaluation use from_try_async.
    """
    try:
        value = fn()
    except Exception as exc:
        return fail(exc, scheduler=scheduler, policy=policy)
    return succeed(value, scheduler=scheduler, policy=policy)


def from_try_async[T](
    fn: Callable[[], Awaitable[T]],
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, Exception]:
    """
    Lazy async counterpart of from_try: fn runs at force time, exceptions become Error.

    Example:
        body = from_try_async(lambda: client.get_json(url))
    """

    async def run() -> Result[T, Exception]:
        try:
            return Ok(await fn())
        except Exception as exc:
            return Error(exc)

    return DeferredOk(run, scheduler=scheduler, policy=policy)


def from_lazy_coro_result[T, E](
    lazy: LazyCoroResult[T, E],
    *,
    scheduler: Scheduler | None = None,
    policy: ForcePolicy | None = None,
) -> DeferredResult[T, E]:
    """Adapt a kungfu LazyCoroResult. It is awaited each time the recipe is forced."""

    async def run() -> Result[T, E]:
        return await lazy

    return DeferredOk(run, scheduler=scheduler, policy=policy)


__all__ = (
    "succeed",
    "fail",
    "from_predicate",
    "from_result",
    "from_option",
    "from_optional",
    "from_try",
    "from_try_async",
    "from_lazy_coro_result",
)
