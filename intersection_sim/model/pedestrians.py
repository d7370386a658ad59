from typing import List, Set, Union

from .directions import Direction
from .phases import Phase, SAFE_CROSSINGS


class PedestrianRequestQueue:
    """
    Outstanding crossing requests, one flag per direction.

    A direction is released only in the green phase of the perpendicular
    axis (its own axis red). Repeated presses before release collapse into
    one request. Released directions are tracked as walking until the
    following yellow phase ends their window.
    """

    def __init__(self) -> None:
        self.pending: Set[Direction] = set()
        self.walking: Set[Direction] = set()

    def request(self, direction: Union[Direction, str]) -> Direction:
        d = Direction.parse(direction)
        self.pending.add(d)
        return d

    def is_pending(self, direction: Union[Direction, str]) -> bool:
        return Direction.parse(direction) in self.pending

    def release_if_safe(self, phase: Phase) -> List[Direction]:
        """
        Grant every pending request whose safe window is `phase`.
        :return: granted directions, in Direction order
        """
        safe = SAFE_CROSSINGS.get(phase, ())
        granted = sorted(d for d in self.pending if d in safe)
        for d in granted:
            self.pending.discard(d)
            self.walking.add(d)
        return granted

    def end_walk(self) -> List[Direction]:
        """Close the walk window: return and forget the walking directions."""
        ended = sorted(self.walking)
        self.walking.clear()
        return ended

    def clear(self) -> None:
        self.pending.clear()
        self.walking.clear()

    def __len__(self) -> int:
        return len(self.pending)
