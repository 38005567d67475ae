from dataclasses import dataclass, asdict, field
from typing import List, Literal, Optional, Tuple


BackendName = Literal["sequential", "numba"]

# maximum speed [cells/step], shared by every vehicle on the road
MAX_SPEED: int = 5


def _default_vehicles() -> List[Tuple[int, int]]:
    return [(0, 1), (5, 2)]


@dataclass
class SimulationConfig:
    # circumference of the ring [cells]
    road_length: int = 20
    total_steps: int = 10
    # pause between printed steps, display only
    step_delay_ms: int = 1000
    # initial (position, speed) per vehicle, in registration order
    vehicles: List[Tuple[int, int]] = field(default_factory=_default_vehicles)

    backend: BackendName = "sequential"

    output_dir: str = "results"
    # scenario desc
    label: Optional[str] = None
    verbose: bool = True

    def validate(self) -> None:
        if self.road_length <= 0:
            raise ValueError(f"road_length must be positive, got {self.road_length}")
        if self.total_steps < 0:
            raise ValueError(f"total_steps must be >= 0, got {self.total_steps}")
        if self.step_delay_ms < 0:
            raise ValueError(f"step_delay_ms must be >= 0, got {self.step_delay_ms}")

    def to_dict(self) -> dict:
        return asdict(self)
