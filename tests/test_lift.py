import json

import pytest
from kungfu import Error, LazyCoroResult, Nothing, Ok, Result, Some

from deferred import (
    DeferredError,
    DeferredFailure,
    DeferredOk,
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
    lift,
    lifted,
    or_else,
    run_sync,
    succeed,
    to_result,
    to_unwrapped_or_raise,
    wrap_async,
)

from helpers import error_value, ok_value, run


# up


def test_from_predicate_checks_at_construction() -> None:
    seen: list[int] = []

    def is_tall(height: int) -> bool:
        seen.append(height)
        return height >= 150

    tall = from_predicate(170, is_tall, lambda: "height invalid")
    short = from_predicate(140, is_tall, lambda: "height invalid")

    assert seen == [170, 140]
    assert isinstance(tall, DeferredOk)
    assert isinstance(short, DeferredError)
    assert ok_value(run(tall)) == 170
    assert error_value(run(short)) == "height invalid"


def test_from_result_follows_tag() -> None:
    assert isinstance(from_result(Ok(1)), DeferredOk)
    assert isinstance(from_result(Error("e")), DeferredError)
    assert ok_value(run(to_result(from_result(Ok(1))))) == 1
    assert error_value(run(to_result(from_result(Error("e"))))) == "e"


def test_from_option() -> None:
    assert ok_value(run(from_option(Some(5), lambda: "missing"))) == 5
    assert error_value(run(from_option(Nothing(), lambda: "missing"))) == "missing"


def test_from_optional() -> None:
    assert ok_value(run(from_optional(0, lambda: "missing"))) == 0
    assert error_value(run(from_optional(None, lambda: "missing"))) == "missing"


def test_from_try_catches_exception() -> None:
    dr = from_try(lambda: json.loads("{not json"))

    assert isinstance(dr, DeferredError)
    assert isinstance(error_value(run(dr)), json.JSONDecodeError)


def test_from_try_success() -> None:
    assert ok_value(run(from_try(lambda: 42))) == 42


def test_from_try_async_is_lazy() -> None:
    calls: list[str] = []

    async def boom() -> int:
        calls.append("boom")
        raise ValueError("bad")

    dr = from_try_async(boom)
    assert calls == []

    err = error_value(run(dr))
    assert isinstance(err, ValueError)
    assert calls == ["boom"]


def test_from_try_async_success() -> None:
    async def answer() -> int:
        return 42

    assert ok_value(run(from_try_async(answer))) == 42


def test_lazy_coro_result_interop() -> None:
    async def seven() -> Result[int, str]:
        return Ok(7)

    assert ok_value(run(from_lazy_coro_result(LazyCoroResult(seven)))) == 7

    async def main() -> Result[int, str]:
        return await succeed(3).map(lambda x: x + 1).to_lazy_coro_result()

    assert ok_value(run(main())) == 4


# call


def test_wrap_async_is_lazy() -> None:
    calls: list[str] = []

    async def work() -> Result[int, str]:
        calls.append("work")
        return Ok(1)

    dr = wrap_async(work)
    assert calls == []
    assert ok_value(run(dr)) == 1
    assert from_thunk is wrap_async


def test_call_and_lifted() -> None:
    async def check_height(height: int, minimum: int = 150) -> Result[int, str]:
        return Ok(height) if height >= minimum else Error("height invalid")

    assert ok_value(run(call(check_height, 170))) == 170
    assert error_value(run(call(check_height, 170, minimum=180))) == "height invalid"

    checked = lifted(check_height)
    assert checked.__name__ == "check_height"
    assert ok_value(run(checked(160))) == 160


# down


def test_force_function() -> None:
    assert ok_value(run(force(succeed(1)))) == 1


def test_to_unwrapped_or_raise_success() -> None:
    assert run(to_unwrapped_or_raise(succeed("ok"))) == "ok"


def test_to_unwrapped_or_raise_reraises_exception_payload() -> None:
    with pytest.raises(KeyError):
        run(to_unwrapped_or_raise(fail(KeyError("missing"))))


def test_to_unwrapped_or_raise_wraps_plain_payload() -> None:
    with pytest.raises(DeferredFailure) as exc_info:
        run(to_unwrapped_or_raise(fail("height invalid")))

    assert exc_info.value.error == "height invalid"


def test_or_else() -> None:
    assert run(or_else(succeed(1), 0)) == 1
    assert run(or_else(fail("e"), 0)) == 0


def test_run_sync_blocks_until_result() -> None:
    assert ok_value(run_sync(succeed(1).map(lambda x: x + 1))) == 2
    assert error_value(run_sync(fail("e"))) == "e"


def test_namespaces() -> None:
    assert lift.up.succeed is succeed
    assert lift.down.run_sync is run_sync
    assert lift.call is call
