from ring_road.config import MAX_SPEED, SimulationConfig
from ring_road.model.road import Road
from ring_road.model.vehicles import Vehicle, VehicleState


__all__ = ["MAX_SPEED", "SimulationConfig", "Road", "Vehicle", "VehicleState"]
