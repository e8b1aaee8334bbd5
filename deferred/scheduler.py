"""
Schedulers
==========

The substrate a recipe is submitted to when it is forced.

A scheduler takes a thunk, starts the computation it describes and hands back
something to await. Every submit starts a new computation: schedulers never
cache. Nested forces inside combinators submit again, so a chain of N
combinators yields N nested scheduled computations, each waiting on the next.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
import typing
from collections.abc import Awaitable

from ._types import Thunk

log = logging.getLogger(__name__)


@typing.runtime_checkable
class Scheduler(typing.Protocol):
    """Start a thunk's computation and return an awaitable of its outcome."""

    def submit[T](self, thunk: Thunk[T], /) -> Awaitable[T]: ...


class TaskScheduler:
    """
    Run every submission as its own asyncio.Task on the running loop.

    The caller suspends on the returned task until it completes. Tasks are
    never cancelled by the scheduler; once submitted they run to completion.
    """

    __slots__ = ("_name", "_counter")

    def __init__(self, name: str = "deferred") -> None:
        self._name = name
        self._counter = itertools.count(1)

    @property
    def name(self) -> str:
        return self._name

    def submit[T](self, thunk: Thunk[T], /) -> Awaitable[T]:
        loop = asyncio.get_running_loop()
        task_name = f"{self._name}-{next(self._counter)}"
        log.debug("Scheduling %s", task_name)
        return loop.create_task(thunk(), name=task_name)

    def __repr__(self) -> str:
        return f"TaskScheduler(name={self._name!r})"


class InlineScheduler:
    """
    Await every submission in place, on the caller's own task.

    The scheduler creates no tasks, so a chain runs in program order.
    Useful in tests and wherever determinism matters more than overlap.
    """

    __slots__ = ()

    def submit[T](self, thunk: Thunk[T], /) -> Awaitable[T]:
        return thunk()

    def __repr__(self) -> str:
        return "InlineScheduler()"


__all__ = ("InlineScheduler", "Scheduler", "TaskScheduler")
