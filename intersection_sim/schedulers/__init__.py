from typing import Dict, Type

from intersection_sim.schedulers.base_scheduler import TimerHandle, TimerScheduler
from intersection_sim.schedulers.scheduler_manual import ManualScheduler
from intersection_sim.schedulers.scheduler_realtime import RealtimeScheduler

SCHEDULERS: Dict[str, Type[TimerScheduler]] = {
    ManualScheduler.name: ManualScheduler,
    RealtimeScheduler.name: RealtimeScheduler,
}


def get_scheduler(name: str) -> Type[TimerScheduler]:
    try:
        return SCHEDULERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULERS.keys())}"
        )


__all__ = [
    "TimerHandle",
    "TimerScheduler",
    "ManualScheduler",
    "RealtimeScheduler",
    "SCHEDULERS",
    "get_scheduler",
]
