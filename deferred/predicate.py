"""
Predicate combinators
=====================

Build predicates from predicates. Pairs naturally with from_predicate and
filter_or_else:

    adult_with_ticket = p_and(is_adult, has_ticket)
    from_predicate(patron, adult_with_ticket, lambda: "not allowed")
"""

from __future__ import annotations

from ._types import Predicate


def p_and[T](first: Predicate[T], second: Predicate[T]) -> Predicate[T]:
    """Both must hold. `second` is not evaluated when `first` fails."""

    def check(value: T) -> bool:
        return first(value) and second(value)

    return check


def p_or[T](first: Predicate[T], second: Predicate[T]) -> Predicate[T]:
    """Either must hold. `second` is not evaluated when `first` holds."""

    def check(value: T) -> bool:
        return first(value) or second(value)

    return check


def p_not[T](predicate: Predicate[T]) -> Predicate[T]:
    def check(value: T) -> bool:
        return not predicate(value)

    return check


def p_all[T](*predicates: Predicate[T]) -> Predicate[T]:
    """All must hold; an empty p_all() always holds."""

    def check(value: T) -> bool:
        return all(p(value) for p in predicates)

    return check


def p_any[T](*predicates: Predicate[T]) -> Predicate[T]:
    """At least one must hold; an empty p_any() never holds."""

    def check(value: T) -> bool:
        return any(p(value) for p in predicates)

    return check


__all__ = ("p_all", "p_and", "p_any", "p_not", "p_or")
