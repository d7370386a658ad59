import pygame

from intersection_sim.config import TimingConfig
from intersection_sim.io.logging_utils import setup_logging, logger
from intersection_sim.model.controller import IntersectionController
from intersection_sim.model.directions import Direction
from intersection_sim.schedulers.scheduler_realtime import RealtimeScheduler
from intersection_sim.sinks.sink_pygame import PygameSink, WIDTH, HEIGHT

PEDESTRIAN_KEYS = {
    pygame.K_n: Direction.NORTH,
    pygame.K_e: Direction.EAST,
    pygame.K_s: Direction.SOUTH,
    pygame.K_w: Direction.WEST,
}


def main():
    setup_logging()
    pygame.init()

    sink = PygameSink()
    scheduler = RealtimeScheduler()
    controller = IntersectionController(sink, scheduler, TimingConfig())

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Intersection (N/E/S/W: pedestrian, SPACE: emergency, R: reset)")
    sink.attach(screen)
    controller.on_startup()

    clock = pygame.time.Clock()
    running = True
    while running:
        clock.tick(60)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    controller.on_emergency_button_pressed()
                elif event.key == pygame.K_r:
                    controller.on_reset_button_pressed()
                elif event.key in PEDESTRIAN_KEYS:
                    controller.on_pedestrian_button_pressed(PEDESTRIAN_KEYS[event.key])

        scheduler.poll()
        sink.draw(pygame.time.get_ticks())
        pygame.display.flip()

    logger.info(f"Demo closed in state '{controller.status()}'")
    pygame.quit()


if __name__ == "__main__":
    main()
