from dataclasses import dataclass


@dataclass(frozen=True)
class VehicleState:
    """Read-only copy of a vehicle handed out to reporting code."""
    id: int
    position: int
    speed: int


@dataclass
class Vehicle:
    id: int                      # registration index on the road
    position: int                # [cell]
    speed: int                   # [cells/step]

    def update_speed(self, max_speed: int, distance_to_next: int) -> None:
        """
        Car-following rule, speed changes by at most 1 per call:
        - accelerate if the gap exceeds speed + 1
        - brake if the gap is not larger than the current speed
        - otherwise hold
        """
        if distance_to_next > self.speed + 1:
            self.speed = min(self.speed + 1, max_speed)
        elif distance_to_next <= self.speed:
            self.speed = max(self.speed - 1, 0)

    def update_position(self, road_length: int) -> None:
        """Advance by the current speed, wrapping around the ring."""
        self.position = (self.position + self.speed) % road_length

    def state(self) -> VehicleState:
        return VehicleState(id=self.id, position=self.position, speed=self.speed)
