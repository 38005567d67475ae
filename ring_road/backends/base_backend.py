import time
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Optional

from ring_road.config import SimulationConfig
from ring_road.io.console import StepReporter
from ring_road.io.logging_utils import logger
from ring_road.metrics.timers import Timer
from ring_road.metrics.types import SimulationResult
from ring_road.model.road import Road, RoadMetricsRaw


class SimulationBackend(ABC):
    """
    Abstract base for all backends (sequential, numba).

    Builds the road from the config and drives it step by step;
    subclasses only decide how a single step is computed.
    """

    name: str = "base"

    def __init__(self, config: SimulationConfig):
        config.validate()
        self.config = config

        self.road = Road(config.road_length)
        for position, speed in config.vehicles:
            self.road.add_vehicle(position, speed)

        self.metrics_raw = RoadMetricsRaw()


    @abstractmethod
    def step(self) -> None:
        """Advance the road by exactly one step."""
        raise NotImplementedError


    def run(self, reporter: Optional[StepReporter] = None) -> SimulationResult:
        cfg: SimulationConfig = self.config
        delay_s = cfg.step_delay_ms / 1000.0

        if reporter is not None:
            reporter.reset()
            reporter.header()

        step_time = 0.0
        with Timer() as wall:
            for step in range(cfg.total_steps):
                with Timer() as t:
                    self.step()
                step_time += t.elapsed

                self.metrics_raw.record_step(self.road.get_vehicles())

                if reporter is not None:
                    reporter.report(step, self.road)

                # display pacing only
                if delay_s > 0:
                    time.sleep(delay_s)

        vehicles = self.road.get_vehicles()
        avg_speed, avg_stopped, flow = self.metrics_raw.compute_summary(
            len(vehicles), cfg.road_length
        )
        logger.debug(f"Backend '{self.name}' finished {cfg.total_steps} steps")

        return SimulationResult(
            backend=self.name,
            config=asdict(cfg),
            wall_time_seconds=wall.elapsed,
            step_time_seconds=step_time,
            total_steps=cfg.total_steps,
            final_vehicles=[(v.position, v.speed) for v in vehicles],
            avg_speed=avg_speed,
            avg_stopped_vehicles=avg_stopped,
            flow=flow,
            extra_stats=self.get_debug_stats(),
        )


    def get_debug_stats(self) -> dict:
        return {
            "num_vehicles": len(self.road),
            "steps_recorded": self.metrics_raw.steps_recorded,
        }
