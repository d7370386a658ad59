from enum import Enum, IntEnum
from typing import Tuple, Union


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Accept a Direction or its case-insensitive name ('east')."""
        if isinstance(value, Direction):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown direction '{value}'. Available: {', '.join(d.name.lower() for d in cls)}"
            )


class LightColor(Enum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"


class PedestrianSignal(Enum):
    WALK = "walk"
    DONT_WALK = "dont_walk"


NS_AXIS: Tuple[Direction, Direction] = (Direction.NORTH, Direction.SOUTH)
EW_AXIS: Tuple[Direction, Direction] = (Direction.EAST, Direction.WEST)
