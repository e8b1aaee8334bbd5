"""Internal helpers for deferred.

Common functions used across multiple modules: case analysis over the
kungfu sum types, result bookkeeping and concurrent forcing for the
collection operations."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Awaitable, Callable, Iterable

from kungfu import Error, Ok, Option, Result, Some


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


# Case analysis (Result -> R, Option -> R)
def fold_result[T, E, R](
    result: Result[T, E],
    on_ok: Callable[[T], R],
    on_error: Callable[[E], R],
) -> R:
    """
    Collapse a Result into a single value.

    Usage:
        message = fold_result(r, on_ok=str, on_error=lambda e: f"failed: {e}")
    """
    match result:
        case Ok(value):
            return on_ok(value)
        case Error(err):
            return on_error(err)


def fold_option[T, R](
    option: Option[T],
    on_some: Callable[[T], R],
    on_none: Callable[[], R],
) -> R:
    """Collapse an Option into a single value. on_none is only called for Nothing."""
    match option:
        case Some(value):
            return on_some(value)
        case _:
            return on_none()


# Result bookkeeping
def split_results[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """
    Separate results into (values, errors), each in input order.

    Usage:
        values, errors = split_results(await asyncio.gather(...))
    """
    values: list[T] = []
    errors: list[E] = []

    for r in results:
        match r:
            case Ok(value):
                values.append(value)
            case Error(err):
                errors.append(err)

    return values, errors


# Concurrent forcing
async def gather_settled[T](*aws: Awaitable[T]) -> list[T]:
    """
    Await all concurrently and wait until every one has settled.

    If any raised, the first exception in argument order is re-raised once
    all are done; no sibling is left running or unretrieved.
    """
    outcomes = await asyncio.gather(*aws, return_exceptions=True)
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome
    return typing.cast("list[T]", outcomes)


__all__ = (
    "identity",
    "fold_result",
    "fold_option",
    "split_results",
    "gather_settled",
)
