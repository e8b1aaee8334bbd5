"""Shared test helpers: result inspection and instrumented recipes."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable

from kungfu import Error, Ok, Result

from deferred import DeferredResult, InlineScheduler, wrap_async
from deferred._types import Thunk


def ok_value[T, E](result: Result[T, E]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(err):
            raise AssertionError(f"expected Ok, got Error({err!r})")
    raise AssertionError(f"not a Result: {result!r}")


def error_value[T, E](result: Result[T, E]) -> E:
    match result:
        case Error(err):
            return err
        case Ok(value):
            raise AssertionError(f"expected Error, got Ok({value!r})")
    raise AssertionError(f"not a Result: {result!r}")


class RecordingScheduler(InlineScheduler):
    """Inline scheduler that counts submissions."""

    __slots__ = ("submitted",)

    def __init__(self) -> None:
        self.submitted = 0

    def submit[T](self, thunk: Thunk[T], /) -> Awaitable[T]:
        self.submitted += 1
        return super().submit(thunk)


def tracked[T, E](
    calls: list[str],
    name: str,
    result: Result[T, E],
    *,
    scheduler: InlineScheduler | None = None,
) -> DeferredResult[T, E]:
    """Recipe that appends `name` to `calls` every time it actually runs."""

    async def run() -> Result[T, E]:
        calls.append(name)
        return result

    return wrap_async(run, scheduler=scheduler)


def run[T](awaitable: Awaitable[T]) -> T:
    """Drive an awaitable to completion from a sync test."""

    async def main() -> T:
        return await awaitable

    return asyncio.run(main())
