from typing import Any, Iterable, List, Optional

from ring_road.backends import get_backend
from ring_road.config import SimulationConfig
from ring_road.io.console import StepReporter
from ring_road.metrics.types import SimulationResult


def run_single(
    config: SimulationConfig,
    reporter: Optional[StepReporter] = None,
) -> SimulationResult:
    BackendCls = get_backend(config.backend)
    backend = BackendCls(config)
    return backend.run(reporter)


def run_scaling_experiment(
    base_config: SimulationConfig,
    backend_name: str,
    param_name: str,
    values: Iterable[Any],
) -> List[SimulationResult]:
    """
    Helper: changes one config field (e.g. road_length) and reruns the backend
    without console output or delays.
    """
    if param_name not in base_config.to_dict():
        raise ValueError(f"Unknown config field '{param_name}'")

    results: List[SimulationResult] = []
    for v in values:
        cfg_dict = base_config.to_dict()
        cfg_dict["backend"] = backend_name
        cfg_dict["step_delay_ms"] = 0
        cfg_dict[param_name] = v
        cfg = SimulationConfig(**cfg_dict)  # type: ignore[arg-type]
        results.append(run_single(cfg))
    return results
