import time
from dataclasses import asdict
from typing import Dict, Iterable, List

import numpy as np

from intersection_sim.config import SimulationConfig
from intersection_sim.io.logging_utils import get_logger
from intersection_sim.metrics.timers import Timer
from intersection_sim.metrics.types import SimulationResult
from intersection_sim.model.controller import (
    IntersectionController,
    EMERGENCY_LABEL,
    STATUS_PREFIX,
)
from intersection_sim.model.directions import Direction, PedestrianSignal
from intersection_sim.schedulers import ManualScheduler, TimerScheduler, get_scheduler
from intersection_sim.sinks.sink_recording import RecordingSink


logger = get_logger("experiments")


class _RunObserver:
    """
    Reads the command log of a RecordingSink incrementally and turns it
    into phase and pedestrian statistics.
    """

    def __init__(self, sink: RecordingSink) -> None:
        self.sink = sink
        self._cursor = 0
        self.waiting_since: Dict[Direction, float] = {}
        self.waits: List[float] = []
        self.phase_visits: Dict[str, int] = {}
        self.requests = 0

    def requested(self, direction: Direction, t: float) -> None:
        self.requests += 1
        # presses collapse into the first outstanding one
        self.waiting_since.setdefault(direction, t)

    def drain(self) -> None:
        commands = self.sink.commands
        for cmd in commands[self._cursor:]:
            if cmd.kind == "pedestrian" and cmd.value is PedestrianSignal.WALK:
                since = self.waiting_since.pop(cmd.target, None)
                if since is not None:
                    self.waits.append(cmd.time_ms - since)
            elif cmd.kind == "status":
                label = cmd.value[len(STATUS_PREFIX):] if cmd.value.startswith(STATUS_PREFIX) else cmd.value
                self.phase_visits[label] = self.phase_visits.get(label, 0) + 1
        self._cursor = len(commands)

    def requests_dropped(self) -> None:
        self.waiting_since.clear()


def _advance_clock(scheduler: TimerScheduler, target_ms: float) -> None:
    if isinstance(scheduler, ManualScheduler):
        scheduler.run_until(target_ms)
        return
    # realtime: wait for the wall clock, then dispatch
    remaining = target_ms - scheduler.now()
    if remaining > 0:
        time.sleep(remaining / 1000.0)
    scheduler.run_due(scheduler.now())


def run_single(config: SimulationConfig) -> SimulationResult:
    SchedulerCls = get_scheduler(config.scheduler)
    scheduler = SchedulerCls()
    sink = RecordingSink(clock=scheduler.now)
    controller = IntersectionController(sink, scheduler, config.timing)
    observer = _RunObserver(sink)

    rng = np.random.default_rng(config.random_seed)
    directions = list(Direction)
    press_prob = config.pedestrian_rate * (config.step_ms / 1000.0)
    steps = int(config.total_time_ms // config.step_ms)

    starts = 0
    emergency_stops = 0
    emergency_done = False
    reset_done = False

    with Timer() as t:
        if controller.on_startup():
            starts += 1
        observer.drain()

        for step in range(steps):
            now_ms = step * config.step_ms

            if config.emergency_at_ms is not None and not emergency_done and now_ms >= config.emergency_at_ms:
                controller.on_emergency_button_pressed()
                emergency_done = True
                emergency_stops += 1
                observer.drain()
                observer.requests_dropped()

            if config.reset_at_ms is not None and not reset_done and now_ms >= config.reset_at_ms:
                controller.on_reset_button_pressed()
                reset_done = True
                starts += 1
                observer.drain()
                observer.requests_dropped()

            presses = rng.random(len(directions)) < press_prob
            for d, pressed in zip(directions, presses):
                if pressed and controller.on_pedestrian_button_pressed(d):
                    observer.requested(d, scheduler.now())
                    observer.drain()

            _advance_clock(scheduler, now_ms + config.step_ms)
            observer.drain()

    waits = np.asarray(observer.waits, dtype=float)
    avg_wait = float(waits.mean()) if waits.size else 0.0
    max_wait = float(waits.max()) if waits.size else 0.0

    visits = dict(observer.phase_visits)
    phase_labels = sum(n for label, n in visits.items() if label != EMERGENCY_LABEL)

    debug_stats = {
        "final_phase": controller.status(),
        "pending_requests_end": len(controller.pedestrians),
        "pending_timers_end": scheduler.pending_count(),
        "sink_commands": len(sink.commands),
    }
    logger.debug(f"Run finished in {t.elapsed_ms:.1f} ms: {debug_stats}")

    return SimulationResult(
        scheduler=scheduler.name,
        config=asdict(config),
        wall_time_seconds=t.elapsed,
        total_simulated_time_ms=float(steps * config.step_ms),
        phase_changes=max(phase_labels - starts, 0),
        phase_visits=visits,
        pedestrian_requests=observer.requests,
        pedestrian_grants=len(observer.waits),
        avg_pedestrian_wait_ms=avg_wait,
        max_pedestrian_wait_ms=max_wait,
        emergency_stops=emergency_stops,
        extra_stats=debug_stats,
    )


def run_scaling_experiment(
    base_config: SimulationConfig,
    param_name: str,
    values: Iterable[int | float]
) -> List[SimulationResult]:
    """
    Helper: changes one parameter (e.g pedestrian_rate) and runs the scenario

    :param base_config: scenario every run starts from
    :param param_name: SimulationConfig field to vary
    :param values: values for that field, one run each
    :return: one result per value, in order
    """

    results: List[SimulationResult] = []
    for v in values:
        cfg_dict = base_config.to_dict()
        cfg_dict[param_name] = v
        cfg = SimulationConfig(**cfg_dict)  # type: ignore[arg-type]
        res = run_single(cfg)
        results.append(res)
    return results
