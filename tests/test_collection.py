import asyncio

import pytest
from kungfu import Error, Ok

from deferred import (
    DeferredError,
    DeferredResult,
    fail,
    from_predicate,
    sequence,
    sequence_accumulating,
    succeed,
    traverse,
    traverse_accumulating,
    validate,
    wrap_async,
)

from helpers import RecordingScheduler, error_value, ok_value, run, tracked


def positive(x: int) -> DeferredResult[int, str]:
    return from_predicate(x, lambda n: n > 0, lambda: "must be positive")


def even(x: int) -> DeferredResult[int, str]:
    return from_predicate(x, lambda n: n % 2 == 0, lambda: "not even")


# sequence


def test_sequence_all_success_keeps_order() -> None:
    assert ok_value(run(sequence([succeed(1), succeed(2), succeed(3)]))) == [1, 2, 3]


def test_sequence_empty() -> None:
    assert ok_value(run(sequence([]))) == []


def test_sequence_first_failure_wins() -> None:
    dr = sequence([succeed(1), fail("err"), succeed(3)])

    assert isinstance(dr, DeferredError)
    assert error_value(run(dr)) == "err"


def test_sequence_never_schedules_items_after_failure() -> None:
    scheduler = RecordingScheduler()
    calls: list[str] = []
    dr = sequence(
        [
            tracked(calls, "one", Ok(1), scheduler=scheduler),
            tracked(calls, "two", Error("err"), scheduler=scheduler),
            tracked(calls, "three", Ok(3), scheduler=scheduler),
        ],
        scheduler=scheduler,
    )

    assert error_value(run(dr)) == "err"
    assert calls == ["one", "two"]
    # the sequence itself, then "one" and "two"
    assert scheduler.submitted == 3


def test_sequence_forces_left_to_right() -> None:
    calls: list[str] = []
    items = [tracked(calls, name, Ok(name)) for name in ("a", "b", "c")]

    assert ok_value(run(sequence(items))) == ["a", "b", "c"]
    assert calls == ["a", "b", "c"]


def test_traverse_stops_calling_handler_after_failure() -> None:
    handled: list[int] = []

    def handler(x: int) -> DeferredResult[int, str]:
        handled.append(x)
        return positive(x)

    assert error_value(run(traverse([1, -2, 3], handler))) == "must be positive"
    assert handled == [1, -2]


def test_traverse_success() -> None:
    assert ok_value(run(traverse([1, 2, 3], lambda x: succeed(x * 10)))) == [10, 20, 30]


# sequence_accumulating


def test_accumulating_collects_all_errors_in_order() -> None:
    dr = sequence_accumulating([succeed(1), fail("e1"), fail("e2")])
    assert error_value(run(dr)) == ["e1", "e2"]


def test_accumulating_all_success() -> None:
    assert ok_value(run(sequence_accumulating([succeed(1), succeed(2)]))) == [1, 2]


def test_accumulating_empty() -> None:
    assert ok_value(run(sequence_accumulating([]))) == []


def test_accumulating_forces_every_item_once() -> None:
    calls: list[str] = []
    items = [
        tracked(calls, "a", Error("e1")),
        tracked(calls, "b", Ok(2)),
        tracked(calls, "c", Error("e3")),
    ]

    assert error_value(run(sequence_accumulating(items))) == ["e1", "e3"]
    assert sorted(calls) == ["a", "b", "c"]


def test_traverse_accumulating() -> None:
    assert error_value(run(traverse_accumulating([-1, 2, -3], positive))) == [
        "must be positive",
        "must be positive",
    ]
    assert ok_value(run(traverse_accumulating([1, 2], positive))) == [1, 2]


# validate


def test_validate_returns_original_value() -> None:
    assert ok_value(run(validate(4, [positive, lambda x: even(x).map(lambda _: "ignored")]))) == 4


def test_validate_single_failure() -> None:
    assert error_value(run(validate(3, [positive, even]))) == ["not even"]


def test_validate_accumulates_failures() -> None:
    assert error_value(run(validate(-3, [positive, even]))) == ["must be positive", "not even"]


def test_validate_single_validator_wraps_error() -> None:
    assert error_value(run(validate(3, even))) == ["not even"]
    assert ok_value(run(validate(4, even))) == 4


def test_validate_without_validators() -> None:
    assert ok_value(run(validate("anything", []))) == "anything"


def test_validate_single_validator_uses_given_scheduler() -> None:
    scheduler = RecordingScheduler()
    dr = validate(3, even, scheduler=scheduler)

    assert dr.scheduler is scheduler
    assert error_value(run(dr)) == ["not even"]
    assert scheduler.submitted > 0


def test_accumulating_settles_every_item_before_raising() -> None:
    calls: list[str] = []

    def boom(_: object) -> object:
        raise ValueError("bad callback")

    async def slow():
        await asyncio.sleep(0.01)
        calls.append("slow")
        return Ok(2)

    dr = sequence_accumulating([succeed(1).map(boom), wrap_async(slow)])

    with pytest.raises(ValueError, match="bad callback"):
        run(dr)
    assert calls == ["slow"]
