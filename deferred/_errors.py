from __future__ import annotations

import typing


class DeferredFailure(Exception):
    """A forced recipe failed with a payload that is not an exception."""

    error: typing.Any

    def __init__(self, error: typing.Any) -> None:
        self.error = error
        super().__init__(f"Deferred computation failed: {error!r}")


class AlreadyForcedError(RuntimeError):
    """A single-use recipe was forced a second time."""

    def __init__(self) -> None:
        super().__init__("Recipe was already forced and its policy is single-use")


__all__ = ("AlreadyForcedError", "DeferredFailure")
