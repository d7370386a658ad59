from intersection_sim.config import SimulationConfig, TimingConfig
from intersection_sim.errors import MissingTargetError
from intersection_sim.model.controller import IntersectionController, SystemState
from intersection_sim.model.directions import Direction, LightColor, PedestrianSignal
from intersection_sim.model.phases import Phase
from intersection_sim.schedulers import get_scheduler, SCHEDULERS


__all__ = [
    "SimulationConfig",
    "TimingConfig",
    "MissingTargetError",
    "IntersectionController",
    "SystemState",
    "Direction",
    "LightColor",
    "PedestrianSignal",
    "Phase",
    "get_scheduler",
    "SCHEDULERS",
]
