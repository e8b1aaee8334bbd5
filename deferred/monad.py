"""DeferredResult Monad

Combined monad unifying:
- Lazy (deferred computations)
- Scheduled (each force submits work to a Scheduler)
- Result[T, E] (success/error)

Closed sum of exactly two variants:
- DeferredOk: success-shaped recipe
- DeferredError: failure-shaped recipe, always yields Error

The shape is fixed when a recipe is built. Combinators never mutate a recipe,
they return a new one wrapping a composed thunk. Only force() runs anything."""

from __future__ import annotations

import abc
import logging
import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result
from kungfu.library.caching import acache

from ._errors import AlreadyForcedError
from ._helpers import gather_settled
from ._types import Predicate, ResultThunk
from .config import DEFAULT_POLICY, ForcePolicy
from .scheduler import Scheduler
from .task import LazyTask

log = logging.getLogger(__name__)


class DeferredResult[T, E](abc.ABC):
    """Lazy scheduled Result.

    Monadic laws:
    - Left identity: succeed(a).chain(f) ≡ f(a)
    - Right identity: m.chain(succeed) ≡ m
    - Associativity: m.chain(f).chain(g) ≡ m.chain(x => f(x).chain(g))

    Do not instantiate directly: use DeferredOk/DeferredError or the
    constructors in deferred.lift.
    """

    __slots__ = ("_task", "_policy", "_forced")

    tag: typing.ClassVar[typing.Literal["ok", "error"]]

    def __init_subclass__(cls, **kwargs: typing.Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"{cls.__name__}: DeferredResult has exactly two variants, DeferredOk and DeferredError")

    def __init__(
        self,
        thunk: ResultThunk[T, E],
        /,
        *,
        scheduler: Scheduler | None = None,
        policy: ForcePolicy | None = None,
    ) -> None:
        self._task = LazyTask(thunk, scheduler=scheduler)
        self._policy = policy if policy is not None else DEFAULT_POLICY
        self._forced = False

    @property
    def scheduler(self) -> Scheduler:
        return self._task.scheduler

    @property
    def policy(self) -> ForcePolicy:
        return self._policy

    @property
    def task(self) -> LazyTask[Result[T, E]]:
        """The underlying deferred work unit."""
        return self._task

    # Derivation: new recipes keep this recipe's scheduler and policy

    def _ok[U, F](self, thunk: ResultThunk[U, F]) -> DeferredOk[U, F]:
        return DeferredOk(thunk, scheduler=self.scheduler, policy=self._policy)

    def _error[U, F](self, thunk: ResultThunk[U, F]) -> DeferredError[U, F]:
        return DeferredError(thunk, scheduler=self.scheduler, policy=self._policy)

    @abc.abstractmethod
    def _derive[U, F](self, thunk: ResultThunk[U, F]) -> DeferredResult[U, F]:
        """Wrap thunk in a recipe of this recipe's shape."""

    # Execution

    async def force(self) -> Result[T, E]:
        """
        Run the recipe: submit it to the scheduler and wait for the Result.

        Every force runs the recipe again. Under ForcePolicy.strict() the
        second force raises AlreadyForcedError instead.
        """
        if self._policy.single_use:
            if self._forced:
                log.debug("Refusing second force of single-use %r", self)
                raise AlreadyForcedError()
            self._forced = True

        result = await self._task.run()
        log.debug("Forced %s-shaped recipe: %s", self.tag, type(result).__name__)
        return result

    def __await__(self) -> typing.Generator[typing.Any, None, Result[T, E]]:
        """Allow direct await on the recipe; same as force()."""
        return self.force().__await__()

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> DeferredResult[U, E]:
        """Functor fmap - apply f to the success value. f never sees a failure."""

        async def wrapper() -> Result[U, E]:
            match await self.force():
                case Ok(value):
                    return Ok(f(value))
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return self._derive(wrapper)

    def map_err[F](self, f: Callable[[E], F], /) -> DeferredResult[T, F]:
        """Map over error type."""

        async def wrapper() -> Result[T, F]:
            match await self.force():
                case Ok(value):
                    return Ok(value)
                case Error(err):
                    return Error(f(err))
                case _ as unreachable:
                    assert_never(unreachable)

        return self._derive(wrapper)

    # Monad operations

    def chain[U](self, f: Callable[[T], DeferredResult[U, E]], /) -> DeferredResult[U, E]:
        """
        Monadic bind (>>=).

        - On Ok: forces f(value) and yields its Result
        - On Error: short-circuit, f is never called
        """

        async def wrapper() -> Result[U, E]:
            match await self.force():
                case Ok(value):
                    return await f(value).force()
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return self._derive(wrapper)

    def then[U](self, f: Callable[[T], DeferredResult[U, E]], /) -> DeferredResult[U, E]:
        """Alias of chain."""
        return self.chain(f)

    def filter_or_else(self, predicate: Predicate[T], on_false: Callable[[], E], /) -> DeferredResult[T, E]:
        """Turn Ok into Error(on_false()) if the value FAILS predicate."""

        async def wrapper() -> Result[T, E]:
            match await self.force():
                case Ok(value):
                    return Ok(value) if predicate(value) else Error(on_false())
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return self._derive(wrapper)

    # Applicative operations

    def apply[A, B](
        self: DeferredResult[Callable[[A], B], E],
        value: DeferredResult[A, E],
        /,
    ) -> DeferredResult[B, E]:
        """
        Applicative <*>: apply the function this recipe yields to the value `value` yields.

        Both sides are forced concurrently. If both fail, the function side's
        error wins.
        """

        async def wrapper() -> Result[B, E]:
            func_result, value_result = await gather_settled(self.force(), value.force())
            match func_result:
                case Error(err):
                    return Error(err)
                case Ok(func):
                    pass
            match value_result:
                case Error(err):
                    return Error(err)
                case Ok(v):
                    return Ok(func(v))

        if isinstance(value, DeferredError):
            return self._error(wrapper)
        return self._ok(wrapper)

    # Utility operations

    def cache(self) -> DeferredResult[T, E]:
        """
        Memoize: the first force runs the recipe, later forces reuse its Result.

        The memoized recipe is always reusable, even over a single-use recipe:
        the receiver itself is forced at most once.
        """
        return type(self)(acache(self.force), scheduler=self.scheduler, policy=ForcePolicy.reusable())

    def to_lazy_coro_result(self) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult; awaiting it forces this recipe."""
        return LazyCoroResult(self.force)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scheduler={self.scheduler!r}, policy={self._policy!r})"


class DeferredOk[T, E](DeferredResult[T, E]):
    """Success-shaped recipe. Built by succeed() and by combinators over it."""

    __slots__ = ()

    tag = "ok"

    def _derive[U, F](self, thunk: ResultThunk[U, F]) -> DeferredResult[U, F]:
        return self._ok(thunk)


class DeferredError[T, E](DeferredResult[T, E]):
    """
    Failure-shaped recipe. Built by fail(); always yields Error.

    map/chain/apply forward this recipe's failure without composing a
    continuation, so their callbacks are unreachable. The derived recipe
    still forces this one, so a single-use policy is honoured.
    """

    __slots__ = ()

    tag = "error"

    def _derive[U, F](self, thunk: ResultThunk[U, F]) -> DeferredResult[U, F]:
        return self._error(thunk)

    def _same_failure[U](self) -> DeferredError[U, E]:
        return self._error(typing.cast("ResultThunk[U, E]", self.force))

    def map[U](self, f: Callable[[T], U], /) -> DeferredResult[U, E]:
        _ = f
        return self._same_failure()

    def chain[U](self, f: Callable[[T], DeferredResult[U, E]], /) -> DeferredResult[U, E]:
        _ = f
        return self._same_failure()

    def filter_or_else(self, predicate: Predicate[T], on_false: Callable[[], E], /) -> DeferredResult[T, E]:
        _ = (predicate, on_false)
        return self._same_failure()

    def apply(self, value: DeferredResult[typing.Any, E], /) -> DeferredResult[typing.Any, E]:  # type: ignore[override]
        _ = value
        return self._same_failure()


__all__ = ("DeferredError", "DeferredOk", "DeferredResult")
