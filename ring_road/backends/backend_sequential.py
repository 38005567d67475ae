from ring_road.backends.base_backend import SimulationBackend


class SequentialBackend(SimulationBackend):
    """
    Pure Python implementation of the step.
    This is the reference the numba backend is checked against.
    """

    name = "sequential"

    def step(self) -> None:
        self.road.update()
