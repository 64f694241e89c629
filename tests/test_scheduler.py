import pytest

from rovercore.scheduler import Scheduler


def test_period_one_runs_every_tick():
    calls = []
    sched = Scheduler()
    sched.add("fast", 1, lambda: calls.append("fast"))
    for _ in range(5):
        sched.tick()
    assert len(calls) == 5


def test_period_three_runs_on_third_ticks():
    runs = []
    sched = Scheduler()
    tick_no = [0]
    sched.add("slow", 3, lambda: runs.append(tick_no[0]))
    for i in range(1, 10):
        tick_no[0] = i
        sched.tick()
    assert runs == [3, 6, 9]


def test_tasks_run_in_registration_order():
    order = []
    sched = Scheduler()
    sched.add("a", 1, lambda: order.append("a"))
    sched.add("b", 1, lambda: order.append("b"))
    sched.tick()
    assert order == ["a", "b"]


def test_disabled_task_counts_but_does_not_run():
    calls = []
    sched = Scheduler()
    sched.add("t", 5, lambda: calls.append(1), enabled=False)
    for _ in range(7):
        sched.tick()
    assert calls == []
    assert sched["t"].n == 7
    sched.set_enabled("t", True)
    sched.tick()
    assert calls == [1]
    assert sched["t"].n == 0


def test_duplicate_name_rejected():
    sched = Scheduler()
    sched.add("t", 1, lambda: None)
    with pytest.raises(ValueError):
        sched.add("t", 2, lambda: None)


def test_unknown_task():
    with pytest.raises(KeyError):
        Scheduler().set_enabled("missing", True)


def test_invalid_period():
    with pytest.raises(ValueError):
        Scheduler().add("t", 0, lambda: None)