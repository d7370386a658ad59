from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from intersection_sim.config import TimingConfig
from intersection_sim.errors import MissingTargetError
from intersection_sim.io.logging_utils import get_logger
from intersection_sim.schedulers.base_scheduler import TimerHandle, TimerScheduler
from intersection_sim.sinks.base_sink import OutputSink

from .directions import Direction, PedestrianSignal, LightColor
from .pedestrians import PedestrianRequestQueue
from .phases import Phase, get_lights, next_phase, phase_duration_ms


logger = get_logger("controller")

STATUS_PREFIX = "Current Phase: "
EMERGENCY_LABEL = "EMERGENCY STOP - All Red"
NOT_STARTED_LABEL = "Not started"


@dataclass
class SystemState:
    current_phase: Optional[Phase] = None
    emergency_stopped: bool = False
    pending_timer: Optional[TimerHandle] = None


class IntersectionController:
    """
    Owns the full state of one intersection:
    - current phase and its scheduled advance
    - pedestrian requests
    - emergency stop / reset

    Every mutation happens on the thread that pumps the scheduler, one
    event at a time. At most one advance is pending at any moment: each
    path that schedules cancels the previous handle first.
    """

    def __init__(
        self,
        sink: OutputSink,
        scheduler: TimerScheduler,
        timing: TimingConfig | None = None,
    ) -> None:
        self.sink = sink
        self.scheduler = scheduler
        self.timing = timing or TimingConfig()

        self.state = SystemState()
        self.pedestrians = PedestrianRequestQueue()

    # ------------------------ PUBLIC API ------------------------

    @property
    def current_phase(self) -> Optional[Phase]:
        return self.state.current_phase

    @property
    def emergency_stopped(self) -> bool:
        return self.state.emergency_stopped

    def start(self) -> None:
        """(Re)start the cycle at NS_GREEN, dropping emergency and requests."""
        self.state.emergency_stopped = False
        self._cancel_pending()
        self.pedestrians.clear()

        for d in Direction:
            self._send(self.sink.set_emergency_indicator, d, False)
            self._send(self.sink.set_pedestrian_signal, d, PedestrianSignal.DONT_WALK)

        self.state.current_phase = Phase.NS_GREEN
        self.apply_phase_outputs(Phase.NS_GREEN)
        self._schedule_advance(self.timing.green_duration_ms)
        logger.info("Traffic system reset")

    def reset(self) -> None:
        self.start()

    def advance(self) -> None:
        """Move to the next phase. No-op while stopped or before start()."""
        if self.state.emergency_stopped:
            logger.debug("Ignoring advance during emergency stop")
            return
        if self.state.current_phase is None:
            logger.debug("Ignoring advance before start")
            return

        phase = next_phase(self.state.current_phase)
        self.state.current_phase = phase
        self.apply_phase_outputs(phase)
        self._schedule_advance(phase_duration_ms(phase, self.timing))
        logger.debug(f"Phase -> {phase.name}")

    def apply_phase_outputs(self, phase: Phase) -> None:
        for direction, color in get_lights(phase).items():
            self._send(self.sink.set_light, direction, color)

        if phase.is_yellow:
            for d in self.pedestrians.end_walk():
                self._send(self.sink.set_pedestrian_signal, d, PedestrianSignal.DONT_WALK)
        else:
            self._release_pedestrians(phase)

        self._send(self.sink.set_status_text, STATUS_PREFIX + phase.label)

    def status(self) -> str:
        if self.state.emergency_stopped:
            return EMERGENCY_LABEL
        if self.state.current_phase is None:
            return NOT_STARTED_LABEL
        return self.state.current_phase.label

    def request(self, direction: Union[Direction, str]) -> bool:
        """
        Register a crossing request. Granted at once when the current
        phase is the direction's safe window, otherwise on its next entry.
        :return: False if ignored (emergency stop, not started)
        """
        d = Direction.parse(direction)
        if self.state.emergency_stopped:
            logger.info(f"Pedestrian request for {d.name} ignored during emergency stop")
            return False
        if self.state.current_phase is None:
            logger.info(f"Pedestrian request for {d.name} ignored before start")
            return False

        self.pedestrians.request(d)
        self._release_pedestrians(self.state.current_phase)
        return True

    def emergency_stop(self) -> None:
        """All red, all don't-walk, nothing scheduled. Safe to repeat."""
        self.state.emergency_stopped = True
        self._cancel_pending()
        self.pedestrians.clear()

        for d in Direction:
            self._send(self.sink.set_light, d, LightColor.RED)
        for d in Direction:
            self._send(self.sink.set_emergency_indicator, d, True)
        for d in Direction:
            self._send(self.sink.set_pedestrian_signal, d, PedestrianSignal.DONT_WALK)

        self._send(self.sink.set_status_text, STATUS_PREFIX + EMERGENCY_LABEL)
        logger.info("Emergency stop activated")

    # ------------------------ INPUT EVENTS ------------------------

    def on_startup(self) -> bool:
        """Start the cycle once every sink target exists."""
        if not self.sink.is_ready():
            logger.warning(f"Output sink '{self.sink.name}' not ready, traffic system not started")
            return False
        self.start()
        logger.info("Traffic system started")
        return True

    def on_pedestrian_button_pressed(self, direction: Union[Direction, str]) -> bool:
        return self.request(direction)

    def on_emergency_button_pressed(self) -> None:
        self.emergency_stop()

    def on_reset_button_pressed(self) -> None:
        self.reset()

    # ------------------------ INTERNAL LOGIC ------------------------

    def _release_pedestrians(self, phase: Phase) -> None:
        for d in self.pedestrians.release_if_safe(phase):
            self._send(self.sink.set_pedestrian_signal, d, PedestrianSignal.WALK)
            logger.debug(f"WALK granted for {d.name}")

    def _schedule_advance(self, delay_ms: int) -> None:
        self._cancel_pending()
        self.state.pending_timer = self.scheduler.schedule(delay_ms, self.advance)

    def _cancel_pending(self) -> None:
        self.scheduler.cancel(self.state.pending_timer)
        self.state.pending_timer = None

    def _send(self, command: Callable[..., None], *args: Any) -> None:
        """Issue one sink command; a missing target skips only that command."""
        try:
            command(*args)
        except MissingTargetError as e:
            logger.warning(f"Skipping {command.__name__}{args}: {e}")
