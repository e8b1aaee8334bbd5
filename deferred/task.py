"""LazyTask

Deferred unit of asynchronous work:
- Lazy (nothing runs until the task is run)
- Coro (the work is a coroutine)
- Scheduled (each run submits a new computation to a Scheduler)

No result is ever cached: running a task twice runs its thunk twice."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._types import Thunk
from .config import get_scheduler
from .scheduler import Scheduler


class LazyTask[V]:
    """Lazy scheduled coroutine.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_thunk", "_scheduler")

    def __init__(self, thunk: Thunk[V], /, *, scheduler: Scheduler | None = None) -> None:
        """Create LazyTask from a fn returning coroutine."""
        self._thunk = thunk
        self._scheduler = scheduler if scheduler is not None else get_scheduler()

    @staticmethod
    def pure[T](value: T, *, scheduler: Scheduler | None = None) -> LazyTask[T]:
        """Lift a value; running the task just yields it."""

        async def wrapper() -> T:
            return value

        return LazyTask(wrapper, scheduler=scheduler)

    @staticmethod
    def from_callable[T](fn: Callable[[], T], *, scheduler: Scheduler | None = None) -> LazyTask[T]:
        """Defer a sync zero-arg callable until the task runs."""

        async def wrapper() -> T:
            return fn()

        return LazyTask(wrapper, scheduler=scheduler)

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def thunk(self) -> Thunk[V]:
        """The unscheduled computation. Calling it bypasses the scheduler."""
        return self._thunk

    # Functor operations

    def map[U](self, f: Callable[[V], U], /) -> LazyTask[U]:
        """Apply f to the value once the task has produced it."""

        async def wrapper() -> U:
            return f(await self.run())

        return LazyTask(wrapper, scheduler=self._scheduler)

    # Monad operations

    def then[U](self, f: Callable[[V], LazyTask[U]], /) -> LazyTask[U]:
        """Monadic bind (>>=). The continuation starts after this task completes."""

        async def wrapper() -> U:
            value = await self.run()
            return await f(value).run()

        return LazyTask(wrapper, scheduler=self._scheduler)

    # Applicative operations

    def ap[A, B](self: LazyTask[Callable[[A], B]], value: LazyTask[A], /) -> LazyTask[B]:
        """Apply the function produced by this task to the value produced by `value`."""

        async def wrapper() -> B:
            func = await self.run()
            return func(await value.run())

        return LazyTask(wrapper, scheduler=self._scheduler)

    # Execution

    def run(self) -> typing.Awaitable[V]:
        """Submit a new computation to the scheduler and return its awaitable."""
        return self._scheduler.submit(self._thunk)

    def __await__(self) -> typing.Generator[typing.Any, None, V]:
        """Allow direct await on the task."""
        return self.run().__await__()

    def __repr__(self) -> str:
        return f"LazyTask({self._thunk!r}, scheduler={self._scheduler!r})"


__all__ = ("LazyTask",)
