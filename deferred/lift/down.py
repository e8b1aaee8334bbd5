"""
Lowering recipes into values.

Functions that force a DeferredResult and hand back a Result, a plain value,
or an exception. to_unwrapped_or_raise is the one place where a domain
failure becomes a raised exception.
"""

from __future__ import annotations

import asyncio
import logging

from kungfu import Error, Ok, Result

from .._errors import DeferredFailure
from ..monad import DeferredResult

log = logging.getLogger(__name__)


async def force[T, E](dr: DeferredResult[T, E]) -> Result[T, E]:
    """Run the recipe and return its Result. Same as `await dr.force()`."""
    return await dr.force()


async def to_result[T, E](dr: DeferredResult[T, E]) -> Result[T, E]:
    """
    Run the recipe and return its Result.

    Round-trips with from_result:
        await to_result(from_result(r))  # r
    """
    return await dr.force()


async def to_unwrapped_or_raise[T, E](dr: DeferredResult[T, E]) -> T:
    """
    Run and unwrap; raise on Error.

    **When to use:** At the edge where recipe code meets exception-based
    code (framework handlers, CLI entry points).

    An exception payload is raised as-is. Any other payload is raised as
    DeferredFailure, with the payload on `.error`.
    """
    match await dr.force():
        case Ok(value):
            return value
        case Error(err):
            log.debug("Raising failure payload %r", err)
            if isinstance(err, BaseException):
                raise err
            raise DeferredFailure(err)


async def or_else[T, E](dr: DeferredResult[T, E], default: T) -> T:
    """
    Run and return the value, or default on Error.

    Example:
        tickets = await or_else(count_tickets(patron), default=0)
    """
    match await dr.force():
        case Ok(value):
            return value
        case Error(_):
            return default


def run_sync[T, E](dr: DeferredResult[T, E]) -> Result[T, E]:
    """
    Force from synchronous code: block the calling thread until the Result is ready.

    Starts a fresh event loop, so it cannot be called from inside a running
    loop; there, await the recipe instead.
    """
    return asyncio.run(force(dr))


__all__ = (
    "force",
    "to_result",
    "to_unwrapped_or_raise",
    "or_else",
    "run_sync",
)
