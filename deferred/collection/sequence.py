"""Sequence combinators

Structure flipping with short-circuit: [DR[T, E]] -> DR[list[T], E]."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from kungfu import Error, Ok, Result

from .._helpers import identity
from ..monad import DeferredError, DeferredOk, DeferredResult
from ..scheduler import Scheduler


async def _force_in_order[A, T, E](
    items: Iterable[A],
    handler: Callable[[A], DeferredResult[T, E]],
) -> Result[list[T], E]:
    values: list[T] = []
    for item in items:
        match await handler(item).force():
            case Ok(value):
                values.append(value)
            case Error(err):
                return Error(err)
    return Ok(values)


def traverse[A, T, E](
    items: Sequence[A],
    handler: Callable[[A], DeferredResult[T, E]],
    *,
    scheduler: Scheduler | None = None,
) -> DeferredResult[list[T], E]:
    """
    Monadic map: A -> DR[T], left to right, stop at the first Error.

    handler is called at force time, one item at a time, so items after the
    first failure are never handed to it.
    """

    async def run() -> Result[list[T], E]:
        return await _force_in_order(items, handler)

    return DeferredOk(run, scheduler=scheduler)


def sequence[T, E](
    items: Sequence[DeferredResult[T, E]],
    *,
    scheduler: Scheduler | None = None,
) -> DeferredResult[list[T], E]:
    """
    Flip structure: [DR[T, E]] -> DR[list[T], E].

    Forces items left to right. The first Error aborts the run: later items
    are never forced. Empty input yields Ok([]).
    """

    async def run() -> Result[list[T], E]:
        return await _force_in_order(items, identity)

    if any(isinstance(dr, DeferredError) for dr in items):
        return DeferredError(run, scheduler=scheduler)
    return DeferredOk(run, scheduler=scheduler)


__all__ = ("sequence", "traverse")
