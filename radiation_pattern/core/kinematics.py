"""
Free-fall kinematics for the beam source.
"""

from __future__ import annotations

from typing import Tuple

from .constants import GRAVITY_CM_S2


def free_fall_step(
    position: float,
    velocity: float,
    dt: float,
    gravity: float = GRAVITY_CM_S2,
) -> Tuple[float, float]:
    """Advance a falling body by one semi-implicit Euler step.

    The velocity is updated first and the new velocity moves the position::

        v' = v - g * dt
        y' = y + v' * dt

    Parameters
    ----------
    position : float
        Vertical position (cm).
    velocity : float
        Vertical velocity (cm/s), positive upwards.
    dt : float
        Time step (s).
    gravity : float
        Downward acceleration (cm/s²).

    Returns
    -------
    tuple : (position, velocity)
    """
    velocity -= gravity * dt
    position += velocity * dt
    return position, velocity


def count_ticks(dt: float, end_time: float) -> int:
    """Number of ticks a fixed-step loop ``while t < end_time: t += dt`` runs.

    The time is accumulated the same way the simulation loop does it, so the
    count includes floating-point drift. ``dt`` must be positive.
    """
    time = 0.0
    ticks = 0
    while time < end_time:
        time += dt
        ticks += 1
    return ticks
