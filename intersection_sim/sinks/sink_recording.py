from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from intersection_sim.errors import MissingTargetError
from intersection_sim.model.directions import Direction, LightColor, PedestrianSignal
from intersection_sim.sinks.base_sink import OutputSink


@dataclass(frozen=True)
class SinkCommand:
    kind: str                       # "light" / "pedestrian" / "status" / "emergency"
    target: Optional[Direction]     # None for status
    value: Any
    time_ms: Optional[float] = None


class RecordingSink(OutputSink):
    """
    Sink that keeps every command plus the latest state per target.
    Used by tests and by the headless experiment runner.

    :param directions: directions that have a light and a pedestrian
        signal; the others behave as missing targets
    :param has_status: whether a status display exists
    :param clock: optional time source stamped on every command
    """

    name = "recording"

    def __init__(
        self,
        directions: Optional[Iterable[Direction]] = None,
        has_status: bool = True,
        ready: bool = True,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.directions = set(Direction) if directions is None else set(directions)
        self.has_status = has_status
        self.ready = ready
        self.clock = clock

        self.commands: List[SinkCommand] = []
        self.lights: Dict[Direction, LightColor] = {}
        self.pedestrian_signals: Dict[Direction, PedestrianSignal] = {}
        self.emergency_indicators: Dict[Direction, bool] = {}
        self.status_text: Optional[str] = None

    def is_ready(self) -> bool:
        return self.ready

    def set_light(self, direction: Direction, color: LightColor) -> None:
        self._check(direction)
        self.lights[direction] = color
        self._record("light", direction, color)

    def set_pedestrian_signal(self, direction: Direction, signal: PedestrianSignal) -> None:
        self._check(direction)
        self.pedestrian_signals[direction] = signal
        self._record("pedestrian", direction, signal)

    def set_status_text(self, text: str) -> None:
        if not self.has_status:
            raise MissingTargetError("status")
        self.status_text = text
        self._record("status", None, text)

    def set_emergency_indicator(self, direction: Direction, active: bool) -> None:
        self._check(direction)
        self.emergency_indicators[direction] = active
        self._record("emergency", direction, active)

    def of_kind(self, kind: str) -> List[SinkCommand]:
        return [c for c in self.commands if c.kind == kind]

    def clear_commands(self) -> None:
        self.commands.clear()

    def _record(self, kind: str, target: Optional[Direction], value: Any) -> None:
        t = self.clock() if self.clock is not None else None
        self.commands.append(SinkCommand(kind, target, value, t))

    def _check(self, direction: Direction) -> None:
        if direction not in self.directions:
            raise MissingTargetError(direction.name.lower())
