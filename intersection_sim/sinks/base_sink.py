from abc import ABC, abstractmethod

from intersection_sim.model.directions import Direction, LightColor, PedestrianSignal


class OutputSink(ABC):
    """
    Abstract receiver of light / pedestrian signal / status commands
    (recording double, pygame window).

    Implementations raise MissingTargetError for a target they cannot
    resolve; the controller skips that single command.
    """

    name: str = "base"

    def is_ready(self) -> bool:
        """True once every target can be resolved."""
        return True

    @abstractmethod
    def set_light(self, direction: Direction, color: LightColor) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_pedestrian_signal(self, direction: Direction, signal: PedestrianSignal) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_status_text(self, text: str) -> None:
        raise NotImplementedError

    def set_emergency_indicator(self, direction: Direction, active: bool) -> None:
        """Optional blinking cue on red lights; ignored by default."""
