from ring_road.backends.base_backend import SimulationBackend
from ring_road.config import SimulationConfig
from ring_road.model.road import Road


class NumbaBackend(SimulationBackend):
    """
    Backend using the Numba-compiled kernel.
    It uses the same Road model, but calls update_compiled()
    which runs the step on NumPy arrays.
    """

    name = "numba"

    def __init__(self, config: SimulationConfig):
        super().__init__(config)

        # Warm-up step on a scratch road to trigger JIT compilation (not measured)
        scratch = Road(config.road_length)
        scratch.add_vehicle(0, 0)
        scratch.update_compiled()

    def step(self) -> None:
        self.road.update_compiled()
