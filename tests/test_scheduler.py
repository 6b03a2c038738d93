"""Tests de la cola de temporizadores."""

from core.scheduler import TimerQueue


def test_task_runs_only_when_due(scheduler, clock):
    calls = []
    scheduler.schedule(2.0, lambda: calls.append("a"))

    assert scheduler.run_due() == 0
    clock.advance(1.99)
    assert scheduler.run_due() == 0
    clock.advance(0.01)
    assert scheduler.run_due() == 1
    assert calls == ["a"]
    # Un solo disparo
    clock.advance(10)
    assert scheduler.run_due() == 0


def test_tasks_run_in_due_order(scheduler, clock):
    calls = []
    scheduler.schedule(3, lambda: calls.append("late"))
    scheduler.schedule(1, lambda: calls.append("early"))
    scheduler.schedule(1, lambda: calls.append("early-2"))
    clock.advance(5)
    scheduler.run_due()
    assert calls == ["early", "early-2", "late"]


def test_cancelled_task_never_runs(scheduler, clock):
    calls = []
    task = scheduler.schedule(1, lambda: calls.append("x"))
    task.cancel()
    assert task.cancelled
    assert scheduler.pending() == 0
    clock.advance(2)
    assert scheduler.run_due() == 0
    assert calls == []


def test_cancel_after_run_has_no_effect(scheduler, clock):
    task = scheduler.schedule(0, lambda: None)
    scheduler.run_due()
    task.cancel()
    assert task.done
    assert not task.cancelled


def test_task_scheduled_from_callback_waits_for_next_pass(scheduler, clock):
    calls = []

    def first():
        calls.append("first")
        scheduler.schedule(1, lambda: calls.append("second"))

    scheduler.schedule(0, first)
    assert scheduler.run_due() == 1
    assert calls == ["first"]
    clock.advance(1)
    assert scheduler.run_due() == 1
    assert calls == ["first", "second"]


def test_run_due_with_explicit_time():
    queue = TimerQueue(clock=lambda: 0.0)
    calls = []
    queue.schedule(5, lambda: calls.append(1))
    assert queue.run_due(now=4.9) == 0
    assert queue.run_due(now=5.0) == 1
    assert queue.pending() == 0
