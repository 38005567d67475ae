import pytest

from ring_road.config import MAX_SPEED
from ring_road.model.vehicles import Vehicle, VehicleState


@pytest.mark.parametrize(
    "speed, gap, expected",
    [
        (3, 10, 4),   # room ahead -> accelerate
        (5, 10, 5),   # capped at max speed
        (0, 2, 1),
        (2, 1, 1),    # too close -> brake
        (2, 2, 1),
        (0, 0, 0),    # floored at zero
        (2, 3, 2),    # gap == speed + 1 -> hold
        (0, 1, 0),
    ],
)
def test_update_speed_rule(speed, gap, expected):
    v = Vehicle(id=0, position=0, speed=speed)
    v.update_speed(MAX_SPEED, gap)
    assert v.speed == expected


def test_update_speed_changes_nothing_but_speed():
    v = Vehicle(id=3, position=7, speed=1)
    v.update_speed(MAX_SPEED, 10)
    assert (v.id, v.position) == (3, 7)


def test_update_position_wraps_around():
    v = Vehicle(id=0, position=18, speed=5)
    v.update_position(20)
    assert v.position == 3


def test_update_position_without_wrap():
    v = Vehicle(id=0, position=4, speed=2)
    v.update_position(20)
    assert v.position == 6


def test_state_is_a_frozen_copy():
    v = Vehicle(id=1, position=2, speed=3)
    s = v.state()
    assert s == VehicleState(id=1, position=2, speed=3)

    v.update_position(20)
    assert s.position == 2
    with pytest.raises(AttributeError):
        s.position = 9  # type: ignore[misc]
