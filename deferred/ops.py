"""Function forms of the DeferredResult methods, for pipelines built from plain calls."""

from __future__ import annotations

from collections.abc import Callable

from .monad import DeferredResult


def fmap[T, U, E](dr: DeferredResult[T, E], f: Callable[[T], U]) -> DeferredResult[U, E]:
    return dr.map(f)


def chain[T, U, E](dr: DeferredResult[T, E], f: Callable[[T], DeferredResult[U, E]]) -> DeferredResult[U, E]:
    return dr.chain(f)


def apply[A, B, E](
    fdr: DeferredResult[Callable[[A], B], E],
    vdr: DeferredResult[A, E],
) -> DeferredResult[B, E]:
    """Apply fdr's function to vdr's value. Function-side error wins when both fail."""
    return fdr.apply(vdr)


def lift_a2[A, B, C, E](
    f: Callable[[A, B], C],
    first: DeferredResult[A, E],
    second: DeferredResult[B, E],
) -> DeferredResult[C, E]:
    """
    Combine two recipes with a binary function; both are forced concurrently.

    Example:
        total = lift_a2(operator.add, count_adults(park), count_children(park))
    """
    return first.map(lambda a: lambda b: f(a, b)).apply(second)


__all__ = ("apply", "chain", "fmap", "lift_a2")
