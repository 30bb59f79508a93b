"""
Tests for the tick-driven scheduler.
"""

from combat.scheduler import TickScheduler


def test_action_runs_once_when_due():
    scheduler = TickScheduler()
    calls = []
    scheduler.schedule(0.5, lambda: calls.append("respawn"), name="respawn")

    assert scheduler.advance(0.25) == 0
    assert calls == []
    assert scheduler.advance(0.25) == 1
    assert calls == ["respawn"]
    assert scheduler.advance(1.0) == 0
    assert scheduler.pending() == 0


def test_actions_run_in_due_order():
    scheduler = TickScheduler()
    calls = []
    scheduler.schedule(1.0, lambda: calls.append("late"))
    scheduler.schedule(0.5, lambda: calls.append("early"))
    scheduler.schedule(0.5, lambda: calls.append("early-second"))

    scheduler.advance(2.0)

    assert calls == ["early", "early-second", "late"]


def test_cancelled_action_does_not_run():
    scheduler = TickScheduler()
    calls = []
    action = scheduler.schedule(0.5, lambda: calls.append("x"))

    scheduler.cancel(action)
    scheduler.advance(1.0)

    assert calls == []


def test_cancel_all():
    scheduler = TickScheduler()
    calls = []
    scheduler.schedule(0.1, lambda: calls.append("a"))
    scheduler.schedule(0.2, lambda: calls.append("b"))

    scheduler.cancel_all()
    scheduler.advance(1.0)

    assert calls == []
    assert scheduler.pending() == 0


def test_zero_delay_runs_on_next_advance():
    scheduler = TickScheduler()
    calls = []
    scheduler.schedule(0.0, lambda: calls.append("now"))

    assert calls == []
    scheduler.advance(0.0)
    assert calls == ["now"]
