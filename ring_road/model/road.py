from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, TextIO, Tuple

import numpy as np

from ring_road.config import MAX_SPEED
from ring_road.io.logging_utils import logger
from .kernels import update_ring_kernel
from .vehicles import Vehicle, VehicleState


EMPTY_CELL = "."
OCCUPIED_CELL = "V"


class EmptyRoadError(RuntimeError):
    """Raised when a step is requested on a road without vehicles."""


@dataclass
class RoadMetricsRaw:
    steps_recorded: int = 0
    sum_mean_speed: float = 0.0
    sum_stopped: int = 0

    def record_step(self, vehicles: Tuple[VehicleState, ...]) -> None:
        """Store per-step statistics for the current road state."""
        if not vehicles:
            return
        self.steps_recorded += 1
        self.sum_mean_speed += sum(v.speed for v in vehicles) / len(vehicles)
        self.sum_stopped += sum(1 for v in vehicles if v.speed == 0)

    def compute_summary(self, num_vehicles: int, road_length: int) -> Tuple[float, float, float]:
        """
        Compute derived statistics:
        - average speed [cells/step]
        - average number of stopped vehicles per step
        - flow [vehicles/step], average speed times density
        """
        if self.steps_recorded == 0:
            return 0.0, 0.0, 0.0

        avg_speed = self.sum_mean_speed / self.steps_recorded
        avg_stopped = self.sum_stopped / self.steps_recorded
        flow = avg_speed * num_vehicles / road_length

        return avg_speed, avg_stopped, flow


class Road:
    """
    Circular single-lane road of `length` cells.

    Vehicles are kept in registration order, and vehicle i follows
    vehicle (i + 1) % N whatever their positions on the ring are.
    """

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise ValueError(f"Road length must be positive, got {length}")
        self.length = length
        self._vehicles: List[Vehicle] = []

    # ------------------------ PUBLIC API ------------------------

    def add_vehicle(self, position: int, speed: int) -> VehicleState:
        """Append a vehicle; position and speed are not validated."""
        v = Vehicle(id=len(self._vehicles), position=position, speed=speed)
        self._vehicles.append(v)
        return v.state()

    def update(self) -> None:
        """
        One simulation step:
        1) speed phase, gaps measured against positions before anyone moves
        2) position phase, every vehicle advances by its new speed
        """
        self._check_not_empty()

        n = len(self._vehicles)
        for i, v in enumerate(self._vehicles):
            next_pos = self._vehicles[(i + 1) % n].position
            distance_to_next = (next_pos - v.position + self.length) % self.length
            v.update_speed(MAX_SPEED, distance_to_next)

        for v in self._vehicles:
            v.update_position(self.length)

        logger.debug("Road step done: %s", self._vehicles)

    def update_compiled(self) -> None:
        """
        Same step as update(), computed by the Numba kernel on NumPy arrays
        and written back to the vehicle objects.
        """
        self._check_not_empty()

        positions = np.array([v.position for v in self._vehicles], dtype=np.int64)
        speeds = np.array([v.speed for v in self._vehicles], dtype=np.int64)

        update_ring_kernel(positions, speeds, self.length, MAX_SPEED)

        for i, v in enumerate(self._vehicles):
            v.position = int(positions[i])
            v.speed = int(speeds[i])

    def render(self) -> List[str]:
        """Cell strip of the road; vehicles sharing a cell show as one marker."""
        cells = [EMPTY_CELL] * self.length
        for v in self._vehicles:
            cells[v.position % self.length] = OCCUPIED_CELL
        return cells

    snapshot = render

    def print_state(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write("".join(self.render()) + "\n")

    def get_vehicles(self) -> Tuple[VehicleState, ...]:
        return tuple(v.state() for v in self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    # ------------------------ INTERNAL LOGIC ------------------------

    def _check_not_empty(self) -> None:
        if not self._vehicles:
            raise EmptyRoadError("Cannot step a road without vehicles")
