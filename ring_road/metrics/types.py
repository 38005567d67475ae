from dataclasses import dataclass, field
from typing import Dict, Any, List, Tuple


@dataclass
class SimulationResult:
    backend: str
    config: Dict[str, Any]

    # total time, sleeps between steps included
    wall_time_seconds: float
    # time spent inside road steps only
    step_time_seconds: float
    total_steps: int

    # (position, speed) per vehicle after the last step
    final_vehicles: List[Tuple[int, int]]
    # [cells/step]
    avg_speed: float
    avg_stopped_vehicles: float
    # [veh/step]
    flow: float

    extra_stats: Dict[str, Any] = field(default_factory=dict)
