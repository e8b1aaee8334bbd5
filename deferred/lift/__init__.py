"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from deferred import lift as L   # Recommended
    from deferred import lift        # Explicit

Architecture:
- L.up.*    - lift values into a recipe
- L.down.*  - force a recipe back into a value
- L.call()  - call async functions with lifting

Examples:
    from deferred import lift as L

    # Lifting values
    patron = L.up.succeed(Patron("John", 170, 2))
    error = L.up.fail("out of tickets")
    found = L.up.from_optional(db_row, on_none=lambda: "not found")

    # Calling functions
    dr = L.call(fetch_patron, 42)

    # Lowering
    result = await L.down.to_result(dr)
    patron = await L.down.to_unwrapped_or_raise(dr)

    # Decorator
    @L.lifted
    async def fetch(): ...
"""

from __future__ import annotations

from . import down, up

# Most common functions at the root for easy access
from .call import call, from_thunk, lifted, wrap_async
from .down import force, or_else, run_sync, to_result, to_unwrapped_or_raise
from .up import (
    fail,
    from_lazy_coro_result,
    from_option,
    from_optional,
    from_predicate,
    from_result,
    from_try,
    from_try_async,
    succeed,
)

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "succeed",
    "fail",
    "from_predicate",
    "from_result",
    "from_option",
    "from_optional",
    "from_try",
    "from_try_async",
    "from_lazy_coro_result",
    # Call
    "call",
    "from_thunk",
    "lifted",
    "wrap_async",
    # Down
    "force",
    "to_result",
    "to_unwrapped_or_raise",
    "or_else",
    "run_sync",
)
