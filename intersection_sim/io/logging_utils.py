import logging


def setup_logging(level: int = logging.INFO, verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


logger = logging.getLogger("intersection_sim")


def get_logger(component: str) -> logging.Logger:
    """Child of the package logger, e.g. 'intersection_sim.controller'."""
    return logger.getChild(component)
