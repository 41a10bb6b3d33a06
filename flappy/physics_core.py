"""
physics_core.py: The shared, deterministic kinematic functions and gap logic.
"""

from .constants import (
    GRAVITY_ACCEL, TERMINAL_VELOCITY, FLY_VELOCITY, PHYSICS_PRECISION,
    MAX_GAP_SIZE, MIN_GAP_SIZE
)


def apply_gravity_and_movement(y_real: float, velocity: float) -> tuple[float, float]:
    """
    Calculates new position and velocity after one fixed timestep.

    The terminal velocity check happens before gravity is added, so a
    velocity just under the cap can overshoot it by one step (1.9 -> 2.1).
    """
    if velocity < TERMINAL_VELOCITY:
        velocity += GRAVITY_ACCEL
    velocity = round(velocity, PHYSICS_PRECISION)

    y_real += velocity
    y_real = round(y_real, PHYSICS_PRECISION)

    return y_real, velocity


def fly_velocity() -> float:
    """Returns the instantaneous velocity after a fly impulse."""
    return FLY_VELOCITY


def gap_size(score: int) -> int:
    """Gap width for an obstacle spawned at the given score."""
    return max(MIN_GAP_SIZE, MAX_GAP_SIZE - score)


def gap_bounds(gap_y: int, size: int) -> tuple[int, int]:
    """Returns the (top, bottom) rows of the passable corridor."""
    half_size = size // 2
    return gap_y - half_size, gap_y + half_size
