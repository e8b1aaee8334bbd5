from deferred import InlineScheduler, LazyTask

from helpers import RecordingScheduler, run


def test_pure_runs_to_value() -> None:
    assert run(LazyTask.pure(42)) == 42


def test_from_callable_is_lazy() -> None:
    calls: list[int] = []

    def work() -> int:
        calls.append(1)
        return len(calls)

    task = LazyTask.from_callable(work)
    assert calls == []

    assert run(task) == 1
    assert run(task) == 2


def test_map() -> None:
    assert run(LazyTask.pure(10).map(lambda x: x * 2)) == 20


def test_then() -> None:
    assert run(LazyTask.pure(10).then(lambda x: LazyTask.pure(x + 5))) == 15


def test_then_runs_continuation_after_predecessor() -> None:
    order: list[str] = []

    def first() -> int:
        order.append("first")
        return 1

    def second() -> int:
        order.append("second")
        return 2

    task = LazyTask.from_callable(first).then(lambda _: LazyTask.from_callable(second))
    assert run(task) == 2
    assert order == ["first", "second"]


def test_ap() -> None:
    assert run(LazyTask.pure(lambda x: x * 2).ap(LazyTask.pure(10))) == 20


def test_each_run_submits_new_computation() -> None:
    scheduler = RecordingScheduler()
    task = LazyTask.pure(1, scheduler=scheduler).map(str)

    run(task)
    run(task)

    # outer map + inner pure, twice
    assert scheduler.submitted == 4


def test_derived_tasks_keep_scheduler() -> None:
    scheduler = InlineScheduler()
    task = LazyTask.pure(1, scheduler=scheduler).map(str).then(LazyTask.pure)
    assert task.scheduler is scheduler
