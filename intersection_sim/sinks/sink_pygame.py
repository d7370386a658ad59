from typing import Dict, Optional, Tuple

import pygame

from intersection_sim.errors import MissingTargetError
from intersection_sim.model.directions import Direction, LightColor, PedestrianSignal
from intersection_sim.sinks.base_sink import OutputSink


WIDTH, HEIGHT = 800, 600
BACKGROUND_COLOR = (30, 30, 30)
ROAD_COLOR = (100, 100, 100)
HOUSING_COLOR = (20, 20, 20)
OFF_COLOR = (60, 60, 60)
TEXT_COLOR = (230, 230, 230)

LAMP_COLORS: Dict[LightColor, Tuple[int, int, int]] = {
    LightColor.RED: (255, 0, 0),
    LightColor.YELLOW: (255, 200, 0),
    LightColor.GREEN: (0, 255, 0),
}
WALK_COLOR = (255, 255, 255)
DONT_WALK_COLOR = (255, 120, 0)

LANE_WIDTH = 18
CENTER_X = WIDTH // 2
CENTER_Y = HEIGHT // 2
LAMP_RADIUS = 10
BLINK_PERIOD_MS = 500

# top-left corner of each signal head
HEAD_POSITIONS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (CENTER_X - LANE_WIDTH * 2 - 40, CENTER_Y - LANE_WIDTH * 2 - 90),
    Direction.SOUTH: (CENTER_X + LANE_WIDTH * 2 + 16, CENTER_Y + LANE_WIDTH * 2 + 16),
    Direction.EAST: (CENTER_X + LANE_WIDTH * 2 + 16, CENTER_Y - LANE_WIDTH * 2 - 90),
    Direction.WEST: (CENTER_X - LANE_WIDTH * 2 - 40, CENTER_Y + LANE_WIDTH * 2 + 16),
}


class PygameSink(OutputSink):
    """
    Draws the intersection: one three-lamp head and one pedestrian lamp per
    direction, a status line at the bottom. Commands only store state;
    draw() renders it, so the controller never touches pygame directly.
    """

    name = "pygame"

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        self.surface = surface
        self.font: Optional[pygame.font.Font] = None
        self.lights: Dict[Direction, LightColor] = {}
        self.pedestrian_signals: Dict[Direction, PedestrianSignal] = {}
        self.emergency: Dict[Direction, bool] = {d: False for d in Direction}
        self.status_text = ""

    def attach(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.font = pygame.font.Font(None, 28)

    def is_ready(self) -> bool:
        return self.surface is not None and self.font is not None

    def set_light(self, direction: Direction, color: LightColor) -> None:
        self._check(direction)
        self.lights[direction] = color

    def set_pedestrian_signal(self, direction: Direction, signal: PedestrianSignal) -> None:
        self._check(direction)
        self.pedestrian_signals[direction] = signal

    def set_status_text(self, text: str) -> None:
        if self.font is None:
            raise MissingTargetError("status")
        self.status_text = text

    def set_emergency_indicator(self, direction: Direction, active: bool) -> None:
        self._check(direction)
        self.emergency[direction] = active

    def draw(self, ticks_ms: int) -> None:
        if not self.is_ready():
            return
        screen = self.surface
        screen.fill(BACKGROUND_COLOR)
        self._draw_roads(screen)

        blink_on = (ticks_ms // BLINK_PERIOD_MS) % 2 == 0
        for direction, (x, y) in HEAD_POSITIONS.items():
            self._draw_head(screen, direction, x, y, blink_on)

        label = self.font.render(self.status_text, True, TEXT_COLOR)
        screen.blit(label, (20, HEIGHT - 40))

    def _draw_roads(self, screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, ROAD_COLOR, (0, CENTER_Y - LANE_WIDTH * 2, WIDTH, LANE_WIDTH * 4))
        pygame.draw.rect(screen, ROAD_COLOR, (CENTER_X - LANE_WIDTH * 2, 0, LANE_WIDTH * 4, HEIGHT))

    def _draw_head(self, screen: pygame.Surface, direction: Direction, x: int, y: int, blink_on: bool) -> None:
        pygame.draw.rect(screen, HOUSING_COLOR, (x, y, 2 * LAMP_RADIUS + 8, 6 * LAMP_RADIUS + 16))
        current = self.lights.get(direction)
        for i, color in enumerate((LightColor.RED, LightColor.YELLOW, LightColor.GREEN)):
            lit = current is color
            if lit and color is LightColor.RED and self.emergency[direction]:
                lit = blink_on
            fill = LAMP_COLORS[color] if lit else OFF_COLOR
            center = (x + LAMP_RADIUS + 4, y + LAMP_RADIUS + 4 + i * (2 * LAMP_RADIUS + 4))
            pygame.draw.circle(screen, fill, center, LAMP_RADIUS)

        ped = self.pedestrian_signals.get(direction, PedestrianSignal.DONT_WALK)
        ped_color = WALK_COLOR if ped is PedestrianSignal.WALK else DONT_WALK_COLOR
        pygame.draw.rect(screen, ped_color, (x + 2 * LAMP_RADIUS + 14, y + 4, 12, 12))

        name = self.font.render(direction.name[0], True, TEXT_COLOR)
        screen.blit(name, (x + 2 * LAMP_RADIUS + 14, y + 24))

    def _check(self, direction: Direction) -> None:
        if self.surface is None or direction not in HEAD_POSITIONS:
            raise MissingTargetError(direction.name.lower())
