"""
Validate combinators
====================

Validation with error accumulation. Every element is forced, every failure
is kept; the applicative counterpart of sequence/traverse.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from kungfu import Error, Ok, Result

from .._helpers import gather_settled, split_results
from .._types import Validator
from ..monad import DeferredError, DeferredOk, DeferredResult
from ..scheduler import Scheduler


def _accumulate[T, E](results: Sequence[Result[T, E]]) -> Result[list[T], list[E]]:
    values, errors = split_results(results)
    if errors:
        return Error(errors)
    return Ok(values)


def sequence_accumulating[T, E](
    items: Sequence[DeferredResult[T, E]],
    *,
    scheduler: Scheduler | None = None,
) -> DeferredResult[list[T], list[E]]:
    """
    Run all, collect ALL errors (not fail-fast).

    Every item is forced exactly once, concurrently. Values and errors keep
    input order. Ok(values) only when nothing failed.
    """

    async def run() -> Result[list[T], list[E]]:
        results: list[Result[T, E]] = await gather_settled(*(dr.force() for dr in items))
        return _accumulate(results)

    if any(isinstance(dr, DeferredError) for dr in items):
        return DeferredError(run, scheduler=scheduler)
    return DeferredOk(run, scheduler=scheduler)


def traverse_accumulating[A, T, E](
    items: Sequence[A],
    handler: Callable[[A], DeferredResult[T, E]],
    *,
    scheduler: Scheduler | None = None,
) -> DeferredResult[list[T], list[E]]:
    """Applicative map: handler runs for every item at force time, all errors kept."""

    async def run() -> Result[list[T], list[E]]:
        results: list[Result[T, E]] = await gather_settled(*(handler(item).force() for item in items))
        return _accumulate(results)

    return DeferredOk(run, scheduler=scheduler)


def validate[T, E](
    value: T,
    validators: Sequence[Validator[T, E]] | Validator[T, E],
    *,
    scheduler: Scheduler | None = None,
) -> DeferredResult[T, list[E]]:
    """
    Check value against every validator; yield the ORIGINAL value if all pass.

    Validator success values are discarded. On failure the errors of every
    failing validator are collected in validator order. A single validator
    (not in a sequence) is accepted; its error is wrapped in a one-element list.

    Example:
        positive = lambda x: from_predicate(x, lambda n: n > 0, lambda: "must be positive")
        even = lambda x: from_predicate(x, lambda n: n % 2 == 0, lambda: "not even")

        await validate(-3, [positive, even])  # Error(["must be positive", "not even"])
    """
    if callable(validators):
        validators = [typing.cast("Validator[T, E]", validators)]

    checks = [validator(value) for validator in validators]
    return sequence_accumulating(checks, scheduler=scheduler).map(lambda _: value)


__all__ = ("sequence_accumulating", "traverse_accumulating", "validate")
