import heapq
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple


Callback = Callable[[], None]


@dataclass
class TimerHandle:
    id: int
    due_ms: float                # scheduler time when the callback runs
    callback: Callback = field(repr=False)

    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class TimerScheduler(ABC):
    """
    Abstract base for all schedulers (manual, realtime).

    Holds delayed callbacks in a heap ordered by due time, ties broken by
    scheduling order. Subclasses only decide where "now" comes from and
    who pumps the queue.
    """

    name: str = "base"

    def __init__(self) -> None:
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._ids = itertools.count()

    @abstractmethod
    def now(self) -> float:
        """Current scheduler time [ms]."""
        raise NotImplementedError

    def schedule(self, delay_ms: float, callback: Callback) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        handle = TimerHandle(id=next(self._ids), due_ms=self.now() + delay_ms, callback=callback)
        heapq.heappush(self._queue, (handle.due_ms, handle.id, handle))
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        """Safe on None, fired and already cancelled handles."""
        if handle is None or not handle.active:
            return
        handle.cancelled = True

    def pending_count(self) -> int:
        return sum(1 for _, _, h in self._queue if h.active)

    def next_due(self) -> Optional[float]:
        self._drop_inactive()
        if not self._queue:
            return None
        return self._queue[0][0]

    def run_due(self, now: float) -> int:
        """
        Run every active callback due at or before `now`, in order.
        Callbacks scheduled from inside a callback run too if already due.
        :return: number of callbacks run
        """
        ran = 0
        while True:
            self._drop_inactive()
            if not self._queue or self._queue[0][0] > now:
                return ran
            _, _, handle = heapq.heappop(self._queue)
            self._before_fire(handle)
            handle.fired = True
            handle.callback()
            ran += 1

    def _before_fire(self, handle: TimerHandle) -> None:
        pass

    def _drop_inactive(self) -> None:
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)
