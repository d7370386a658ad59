import time

from intersection_sim.schedulers.base_scheduler import TimerScheduler


class RealtimeScheduler(TimerScheduler):
    """
    Wall-clock scheduler driven by the host loop.
    The owner (e.g. the pygame frame loop) calls poll() regularly; due
    callbacks run on that same thread, so there is a single logical
    event queue and no locking.
    """

    name = "realtime"

    def __init__(self) -> None:
        super().__init__()
        self._origin = time.perf_counter()

    def now(self) -> float:
        return (time.perf_counter() - self._origin) * 1000.0

    def poll(self) -> int:
        return self.run_due(self.now())
