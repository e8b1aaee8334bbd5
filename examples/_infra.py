from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field, replace
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

MIN_HEIGHT = 150
MAX_HEIGHT = 200


@dataclass(frozen=True, slots=True)
class Patron:
    name: str
    height: int
    tickets: int = 0

    def valid_height(self) -> bool:
        return MIN_HEIGHT <= self.height <= MAX_HEIGHT

    def has_ticket(self) -> bool:
        return self.tickets > 0

    def decrement_ticket(self) -> Patron:
        return replace(self, tickets=self.tickets - 1)

    def increment_ticket(self) -> Patron:
        return replace(self, tickets=self.tickets + 1)


def _empty_patrons() -> dict[str, Patron]:
    return {}


@dataclass(slots=True)
class FakeRegistry:
    """Patron lookup with a simulated network delay."""

    patrons: dict[str, Patron] = field(default_factory=_empty_patrons)
    delay_seconds: float = 0.0

    async def find(self, name: str) -> Result[Patron, str]:
        await asyncio.sleep(self.delay_seconds)
        patron = self.patrons.get(name)
        if patron is None:
            return Error(f"unknown patron: {name}")
        return Ok(patron)

    async def find_raising(self, name: str) -> Patron:
        """Same lookup, raising KeyError instead of returning Result."""
        await asyncio.sleep(self.delay_seconds)
        return self.patrons[name]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
