from intersection_sim.config import SimulationConfig
from intersection_sim.experiments.runner import run_single, run_scaling_experiment


__all__ = ["SimulationConfig", "run_single", "run_scaling_experiment"]
