"""
Core type definitions for deferred.

Aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Result

if typing.TYPE_CHECKING:
    from .monad import DeferredResult

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = zero-arg callable producing a coroutine; calling it starts nothing
# until the coroutine is awaited or scheduled
type Thunk[T] = Callable[[], Coroutine[typing.Any, typing.Any, T]]

# ResultThunk = thunk of a deferred result
type ResultThunk[T, E] = Thunk[Result[T, E]]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Validator = check that succeeds or fails for a value; its success value is ignored
type Validator[T, E] = Callable[[T], DeferredResult[typing.Any, E]]

# NoError = error type of a computation that never fails
type NoError = typing.Never

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# DR = DeferredResult shortcut
type DR[T, E] = DeferredResult[T, E]

__all__ = (
    "Thunk",
    "ResultThunk",
    "Predicate",
    "Validator",
    "NoError",
    "DR",
)
