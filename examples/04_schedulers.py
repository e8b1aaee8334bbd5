from __future__ import annotations

import logging

from _infra import Patron, banner

from deferred import AlreadyForcedError, ForcePolicy, InlineScheduler, TaskScheduler, lift as L, sequence, using_scheduler


def main() -> None:
    banner("04_schedulers: schedulers + policies + run_sync")
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Every combinator level is one scheduled task, named after the scheduler
    rides = TaskScheduler(name="rides")
    riders = [L.up.succeed(Patron(name, 170, 1), scheduler=rides) for name in ("Ann", "Bob")]
    print(L.down.run_sync(sequence(riders, scheduler=rides).map(len)))

    # Inline: awaited in place on the caller's task
    with using_scheduler(InlineScheduler()):
        recipe = L.up.succeed(Patron("Cat", 160, 3)).map(Patron.decrement_ticket)
    print(L.down.run_sync(recipe))

    once = L.up.succeed(1, policy=ForcePolicy.strict())
    print(L.down.run_sync(once))
    try:
        L.down.run_sync(once)
    except AlreadyForcedError as exc:
        print(f"second force refused: {exc}")


if __name__ == "__main__":
    main()
