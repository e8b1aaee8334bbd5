from __future__ import annotations

import asyncio

from _infra import Patron, banner, run

from deferred import DeferredResult, lift as L, lift_a2, validate
from kungfu import Error, Ok


def check_height(patron: Patron) -> DeferredResult[Patron, str]:
    async def check() -> bool:
        await asyncio.sleep(0.01)  # simulated remote check
        return patron.valid_height()

    return (
        L.up.from_try_async(check)
        .map_err(str)
        .filter_or_else(bool, lambda: "height invalid")
        .map(lambda _: patron)
    )


def check_tickets(patron: Patron) -> DeferredResult[Patron, str]:
    return L.up.from_predicate(patron, Patron.has_ticket, lambda: "out of tickets")


def take_ride(patron: DeferredResult[Patron, str]) -> DeferredResult[Patron, list[str]]:
    # Both checks run, every failure is reported
    return (
        patron.map_err(lambda err: [err])
        .chain(lambda p: validate(p, [check_height, check_tickets]))
        .map(Patron.decrement_ticket)
    )


def add_ticket(patron: DeferredResult[Patron, str]) -> DeferredResult[Patron, str]:
    return L.up.succeed(Patron.increment_ticket).apply(patron)


async def main() -> None:
    banner("02_validate_and_apply: validate + apply + lift_a2")

    for patron in (Patron("John", 170, 2), Patron("Tiny", 120, 0)):
        match await take_ride(L.up.succeed(patron)):
            case Ok(rider):
                print(f"{rider.name} rides, {rider.tickets} ticket(s) left")
            case Error(errors):
                print(f"{patron.name} refused: {', '.join(errors)}")

    topped_up = await L.down.to_unwrapped_or_raise(add_ticket(L.up.succeed(Patron("Broke", 180, 0))))
    print(f"{topped_up.name} now has {topped_up.tickets} ticket(s)")

    pair = lift_a2(lambda a, b: a.tickets + b.tickets, L.up.succeed(Patron("A", 160, 1)), L.up.succeed(Patron("B", 165, 3)))
    print(f"tickets held together: {await L.down.or_else(pair, 0)}")


if __name__ == "__main__":
    run(main)
