"""
Deferred library for composing lazy asynchronous results.

A DeferredResult is a recipe for an async computation that succeeds or
fails. Building, mapping, chaining and combining recipes runs nothing; only
forcing does.

Architecture:
- LazyTask: deferred unit of work submitted to a Scheduler when run
- DeferredResult (DeferredOk | DeferredError): LazyTask yielding kungfu Result
- lift: constructors (up), async-function lifting (call), eliminators (down)
- collection: short-circuit (sequence) and accumulating (validate) operations
"""

import logging

# Core types
from ._types import DR, NoError, Predicate, ResultThunk, Thunk, Validator

# Internal helpers
from . import _helpers
from ._helpers import fold_option, fold_result

# Scheduling substrate and configuration
from .scheduler import InlineScheduler, Scheduler, TaskScheduler
from .config import ForcePolicy, get_scheduler, using_scheduler

# Deferred work unit
from .task import LazyTask

# DeferredResult monad
from .monad import DeferredError, DeferredOk, DeferredResult

# Function forms
from .ops import apply, chain, fmap, lift_a2

# Lift helpers
from . import lift
from .lift import (
    call,
    fail,
    force,
    from_lazy_coro_result,
    from_option,
    from_optional,
    from_predicate,
    from_result,
    from_thunk,
    from_try,
    from_try_async,
    lifted,
    or_else,
    run_sync,
    succeed,
    to_result,
    to_unwrapped_or_raise,
    wrap_async,
)

# Collection operations
from .collection import (
    sequence,
    sequence_accumulating,
    traverse,
    traverse_accumulating,
    validate,
)

# Predicates
from .predicate import p_all, p_and, p_any, p_not, p_or

# Errors
from ._errors import AlreadyForcedError, DeferredFailure

logging.getLogger("deferred").addHandler(logging.NullHandler())

__all__ = (
    # Types
    "DR",
    "NoError",
    "Predicate",
    "ResultThunk",
    "Thunk",
    "Validator",
    # Internal helpers
    "_helpers",
    "fold_option",
    "fold_result",
    # Scheduling
    "InlineScheduler",
    "Scheduler",
    "TaskScheduler",
    # Config
    "ForcePolicy",
    "get_scheduler",
    "using_scheduler",
    # Deferred work unit
    "LazyTask",
    # Monad
    "DeferredError",
    "DeferredOk",
    "DeferredResult",
    # Function forms
    "apply",
    "chain",
    "fmap",
    "lift_a2",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift - up
    "succeed",
    "fail",
    "from_predicate",
    "from_result",
    "from_option",
    "from_optional",
    "from_try",
    "from_try_async",
    "from_lazy_coro_result",
    # Lift - call
    "call",
    "from_thunk",
    "lifted",
    "wrap_async",
    # Lift - down
    "force",
    "to_result",
    "to_unwrapped_or_raise",
    "or_else",
    "run_sync",
    # Collection
    "sequence",
    "traverse",
    "sequence_accumulating",
    "traverse_accumulating",
    "validate",
    # Predicates
    "p_all",
    "p_and",
    "p_any",
    "p_not",
    "p_or",
    # Errors
    "AlreadyForcedError",
    "DeferredFailure",
)
