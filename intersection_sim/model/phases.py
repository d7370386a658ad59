from enum import IntEnum
from typing import Dict, Tuple

from intersection_sim.config import TimingConfig
from .directions import Direction, LightColor, NS_AXIS, EW_AXIS


class Phase(IntEnum):
    """
    Four-phase fixed cycle:
    - NS_GREEN:  NS green,  EW red
    - NS_YELLOW: NS yellow, EW red
    - EW_GREEN:  EW green,  NS red
    - EW_YELLOW: EW yellow, NS red
    """

    NS_GREEN = 0
    NS_YELLOW = 1
    EW_GREEN = 2
    EW_YELLOW = 3

    @property
    def is_yellow(self) -> bool:
        return self in (Phase.NS_YELLOW, Phase.EW_YELLOW)

    @property
    def label(self) -> str:
        return PHASE_LABELS[self]


PHASE_LABELS: Dict[Phase, str] = {
    Phase.NS_GREEN: "North/South Green",
    Phase.NS_YELLOW: "North/South Yellow",
    Phase.EW_GREEN: "East/West Green",
    Phase.EW_YELLOW: "East/West Yellow",
}

# phase -> color per direction
PHASE_LIGHTS: Dict[Phase, Dict[Direction, LightColor]] = {
    Phase.NS_GREEN: {
        Direction.NORTH: LightColor.GREEN,
        Direction.SOUTH: LightColor.GREEN,
        Direction.EAST: LightColor.RED,
        Direction.WEST: LightColor.RED,
    },
    Phase.NS_YELLOW: {
        Direction.NORTH: LightColor.YELLOW,
        Direction.SOUTH: LightColor.YELLOW,
        Direction.EAST: LightColor.RED,
        Direction.WEST: LightColor.RED,
    },
    Phase.EW_GREEN: {
        Direction.NORTH: LightColor.RED,
        Direction.SOUTH: LightColor.RED,
        Direction.EAST: LightColor.GREEN,
        Direction.WEST: LightColor.GREEN,
    },
    Phase.EW_YELLOW: {
        Direction.NORTH: LightColor.RED,
        Direction.SOUTH: LightColor.RED,
        Direction.EAST: LightColor.YELLOW,
        Direction.WEST: LightColor.YELLOW,
    },
}

# green phase -> directions whose pedestrians may cross (own axis red)
SAFE_CROSSINGS: Dict[Phase, Tuple[Direction, Direction]] = {
    Phase.NS_GREEN: EW_AXIS,
    Phase.EW_GREEN: NS_AXIS,
}


def next_phase(phase: Phase) -> Phase:
    return Phase((phase + 1) % len(Phase))


def phase_duration_ms(phase: Phase, timing: TimingConfig) -> int:
    """How long the given phase stays active before the next advance."""
    if phase.is_yellow:
        return timing.yellow_duration_ms
    return timing.green_duration_ms


def get_lights(phase: Phase) -> Dict[Direction, LightColor]:
    """
    :param phase: current phase
    :return: dict Direction -> LightColor
    """
    return dict(PHASE_LIGHTS[phase])
