import numpy as np
from numba import njit


@njit
def update_ring_kernel(
    positions: np.ndarray,
    speeds: np.ndarray,
    length: int,
    max_speed: int,
) -> None:
    """
    Numba kernel doing one step of the ring road in place.

    positions and speeds are int64 arrays in registration order.
    Vehicle i follows vehicle (i + 1) % n.
    """
    n = positions.shape[0]

    # Speed phase: reads positions only
    for i in range(n):
        next_pos = positions[(i + 1) % n]
        gap = (next_pos - positions[i] + length) % length
        speed = speeds[i]

        if gap > speed + 1:
            speed = min(speed + 1, max_speed)
        elif gap <= speed:
            speed = max(speed - 1, 0)

        speeds[i] = speed

    # Position phase: each vehicle reads only its own state
    for i in range(n):
        positions[i] = (positions[i] + speeds[i]) % length
