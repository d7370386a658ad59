from dataclasses import dataclass, asdict, field
from typing import Literal, Optional


SchedulerName = Literal["manual", "realtime"]


@dataclass(frozen=True)
class TimingConfig:
    green_duration_ms: int = 4000   # [ms] green for the active axis
    yellow_duration_ms: int = 2000  # [ms] yellow before the axis turns red

    def __post_init__(self) -> None:
        if self.green_duration_ms <= 0 or self.yellow_duration_ms <= 0:
            raise ValueError(
                f"Phase durations must be positive, got green={self.green_duration_ms} "
                f"yellow={self.yellow_duration_ms}"
            )


@dataclass
class SimulationConfig:
    # total simulated time (ms)
    total_time_ms: int = 120_000
    # step of the virtual clock (ms)
    step_ms: int = 100
    # pedestrian button presses/s/direction
    pedestrian_rate: float = 0.05
    random_seed: int = 42

    scheduler: SchedulerName = "manual"

    # operator actions, None = never
    emergency_at_ms: Optional[int] = None
    reset_at_ms: Optional[int] = None

    timing: TimingConfig = field(default_factory=TimingConfig)

    output_dir: str = "results"
    # scenario desc
    label: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.timing, dict):
            self.timing = TimingConfig(**self.timing)
        if self.step_ms <= 0:
            raise ValueError(f"step_ms must be positive, got {self.step_ms}")

    def to_dict(self) -> dict:
        return asdict(self)
