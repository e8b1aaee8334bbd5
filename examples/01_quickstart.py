from __future__ import annotations

from _infra import Patron, banner, run

from deferred import DeferredResult, lift as L
from kungfu import Error, Ok


def check_height(patron: Patron) -> DeferredResult[Patron, str]:
    return L.up.from_predicate(patron, Patron.valid_height, lambda: "height invalid")


def check_tickets(patron: Patron) -> DeferredResult[Patron, str]:
    return L.up.from_predicate(patron, Patron.has_ticket, lambda: "out of tickets")


def take_ride(patron: DeferredResult[Patron, str]) -> DeferredResult[Patron, str]:
    # Nothing below runs until the recipe is awaited
    return patron.chain(check_height).chain(check_tickets).map(Patron.decrement_ticket)


async def main() -> None:
    banner("01_quickstart: succeed + chain + map")

    for patron in (Patron("John", 170, 2), Patron("Shorty", 140, 2), Patron("Broke", 180, 0)):
        match await take_ride(L.up.succeed(patron)):
            case Ok(rider):
                print(f"{rider.name} rides, {rider.tickets} ticket(s) left")
            case Error(err):
                print(f"{patron.name} refused: {err}")


if __name__ == "__main__":
    run(main)
