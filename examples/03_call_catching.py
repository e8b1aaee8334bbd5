from __future__ import annotations

import json

from _infra import FakeRegistry, Patron, banner, run

from deferred import DeferredFailure, DeferredResult, lift as L
from kungfu import Error, Ok, Result

registry = FakeRegistry(patrons={"John": Patron("John", 170, 2)}, delay_seconds=0.01)


# ============================================================================
# Approach 1: L.call (function already returns Result)
# ============================================================================


def lookup(name: str) -> DeferredResult[Patron, str]:
    return L.call(registry.find, name)


# ============================================================================
# Approach 2: @L.lifted decorator (for your own functions)
# ============================================================================


@L.lifted
async def lookup_tickets(name: str) -> Result[int, str]:
    match await registry.find(name):
        case Ok(patron):
            return Ok(patron.tickets)
        case Error(err):
            return Error(err)


# ============================================================================
# Approach 3: from_try / from_try_async (code that RAISES)
# ============================================================================


def lookup_raising(name: str) -> DeferredResult[Patron, Exception]:
    return L.up.from_try_async(lambda: registry.find_raising(name))


def parse_patron(raw: str) -> DeferredResult[Patron, Exception]:
    # json.loads runs right here, the recipe only carries its outcome
    return L.up.from_try(lambda: json.loads(raw)).map(lambda data: Patron(**data))


async def main() -> None:
    banner("03_call_catching: call + lifted + from_try")

    print(await lookup("John"))
    print(await lookup("Nobody"))
    print(await lookup_tickets("John"))

    match await lookup_raising("Nobody"):
        case Ok(patron):
            print(f"found {patron}")
        case Error(exc):
            print(f"lookup raised {type(exc).__name__}: {exc}")

    print(await parse_patron('{"name": "Jane", "height": 165, "tickets": 1}'))
    print(await parse_patron("{broken"))

    try:
        await L.down.to_unwrapped_or_raise(lookup("Nobody"))
    except DeferredFailure as failure:
        print(f"boundary raised DeferredFailure carrying {failure.error!r}")


if __name__ == "__main__":
    run(main)
