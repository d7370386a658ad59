from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class SimulationResult:
    scheduler: str
    config: Dict[str, Any]

    # total time
    wall_time_seconds: float
    total_simulated_time_ms: float

    # phase statistics
    phase_changes: int
    phase_visits: Dict[str, int]

    # pedestrian statistics
    pedestrian_requests: int
    pedestrian_grants: int
    # [ms] from first press to WALK
    avg_pedestrian_wait_ms: float
    max_pedestrian_wait_ms: float

    emergency_stops: int = 0

    # anything else (requests still pending at the end etc.)
    extra_stats: Dict[str, Any] = field(default_factory=dict)
