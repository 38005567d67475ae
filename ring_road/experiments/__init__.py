from ring_road.config import SimulationConfig
from ring_road.backends import get_backend, BACKENDS


__all__ = ["SimulationConfig", "get_backend", "BACKENDS"]
