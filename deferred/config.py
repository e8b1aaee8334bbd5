"""
Configuration
=============

ForcePolicy controls what happens when a recipe is forced more than once.
The ambient scheduler is held in a context variable so a test or a request
handler can swap it without threading it through every constructor.
"""

from __future__ import annotations

import contextlib
import contextvars
from collections.abc import Iterator
from dataclasses import dataclass

from .scheduler import Scheduler, TaskScheduler


@dataclass(frozen=True, slots=True)
class ForcePolicy:
    """
    Force configuration shared by a recipe and everything derived from it.

    single_use=False: every force re-runs the recipe (nothing is memoized).
    single_use=True: a second force raises AlreadyForcedError.

    Forcing a derived recipe (map, chain, apply, ...) forces its receiver,
    for both DeferredOk and DeferredError, so it uses up a single-use
    receiver just like a direct force. cache() is the way to share one run.
    """

    single_use: bool = False

    @classmethod
    def reusable(cls) -> ForcePolicy:
        """Re-run on every force. The default."""
        return cls(single_use=False)

    @classmethod
    def strict(cls) -> ForcePolicy:
        """Refuse a second force of the same recipe."""
        return cls(single_use=True)


DEFAULT_POLICY = ForcePolicy.reusable()

_default_scheduler = TaskScheduler()
_current_scheduler: contextvars.ContextVar[Scheduler] = contextvars.ContextVar(
    "deferred_scheduler",
    default=_default_scheduler,
)


def get_scheduler() -> Scheduler:
    """Scheduler used by constructors that were not given one explicitly."""
    return _current_scheduler.get()


@contextlib.contextmanager
def using_scheduler(scheduler: Scheduler) -> Iterator[Scheduler]:
    """
    Make `scheduler` the ambient default inside the block.

    Only affects recipes constructed inside the block; recipes keep the
    scheduler they were built with.

    Example:
        with using_scheduler(InlineScheduler()):
            dr = succeed(1).map(str)
    """
    token = _current_scheduler.set(scheduler)
    try:
        yield scheduler
    finally:
        _current_scheduler.reset(token)


__all__ = ("DEFAULT_POLICY", "ForcePolicy", "get_scheduler", "using_scheduler")
