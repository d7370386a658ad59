from intersection_sim.schedulers.base_scheduler import TimerHandle, TimerScheduler


class ManualScheduler(TimerScheduler):
    """
    Virtual-clock scheduler.
    Time only moves when advance_by() / run_until() is called, which makes
    runs deterministic (tests, headless experiments).
    """

    name = "manual"

    def __init__(self, start_ms: float = 0.0) -> None:
        super().__init__()
        self._now = float(start_ms)

    def now(self) -> float:
        return self._now

    def advance_by(self, delta_ms: float) -> int:
        if delta_ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({delta_ms} ms)")
        return self.run_until(self._now + delta_ms)

    def run_until(self, target_ms: float) -> int:
        ran = self.run_due(target_ms)
        self._now = max(self._now, target_ms)
        return ran

    def _before_fire(self, handle: TimerHandle) -> None:
        # callbacks observe the clock at their own due time
        self._now = max(self._now, handle.due_ms)
