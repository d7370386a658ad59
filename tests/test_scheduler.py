import pytest

from intersection_sim.schedulers import (
    ManualScheduler,
    RealtimeScheduler,
    SCHEDULERS,
    get_scheduler,
)


class TestManualScheduler:
    def test_fires_after_delay(self):
        s = ManualScheduler()
        calls = []
        s.schedule(100, lambda: calls.append(s.now()))
        s.advance_by(99)
        assert calls == []
        s.advance_by(1)
        assert calls == [100]

    def test_ties_run_in_scheduling_order(self):
        s = ManualScheduler()
        calls = []
        s.schedule(50, lambda: calls.append("a"))
        s.schedule(50, lambda: calls.append("b"))
        s.schedule(10, lambda: calls.append("c"))
        s.advance_by(50)
        assert calls == ["c", "a", "b"]

    def test_callback_can_schedule_within_window(self):
        s = ManualScheduler()
        calls = []

        def first():
            calls.append(("first", s.now()))
            s.schedule(50, lambda: calls.append(("second", s.now())))

        s.schedule(100, first)
        ran = s.advance_by(200)
        assert ran == 2
        assert calls == [("first", 100), ("second", 150)]
        assert s.now() == 200

    def test_cancel_is_idempotent(self):
        s = ManualScheduler()
        calls = []
        h = s.schedule(10, lambda: calls.append(1))
        s.cancel(h)
        s.cancel(h)
        s.cancel(None)
        s.advance_by(100)
        assert calls == []
        assert h.cancelled and not h.fired

    def test_cancel_after_fire(self):
        s = ManualScheduler()
        h = s.schedule(10, lambda: None)
        s.advance_by(10)
        assert h.fired
        s.cancel(h)
        assert not h.cancelled

    def test_pending_count(self):
        s = ManualScheduler()
        h1 = s.schedule(10, lambda: None)
        s.schedule(20, lambda: None)
        assert s.pending_count() == 2
        s.cancel(h1)
        assert s.pending_count() == 1
        assert s.next_due() == 20
        s.advance_by(20)
        assert s.pending_count() == 0
        assert s.next_due() is None

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            ManualScheduler().schedule(-1, lambda: None)

    def test_clock_cannot_go_backwards(self):
        with pytest.raises(ValueError):
            ManualScheduler().advance_by(-5)


class TestRealtimeScheduler:
    def test_poll_runs_due_callbacks(self):
        s = RealtimeScheduler()
        calls = []
        s.schedule(0, lambda: calls.append(1))
        assert s.poll() == 1
        assert calls == [1]

    def test_poll_leaves_future_callbacks(self):
        s = RealtimeScheduler()
        s.schedule(60_000, lambda: None)
        assert s.poll() == 0
        assert s.pending_count() == 1


class TestRegistry:
    def test_known_names(self):
        assert get_scheduler("manual") is ManualScheduler
        assert get_scheduler("realtime") is RealtimeScheduler
        assert set(SCHEDULERS) == {"manual", "realtime"}

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown scheduler"):
            get_scheduler("cuda")
