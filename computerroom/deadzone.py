"""Dead-zone filtering for analogue sticks and triggers."""

from __future__ import annotations

import math

from computerroom.vector import Vector2

_F32_EPSILON = 1.1920929e-07


def _check_range(low: float, high: float) -> float:
    span = high - low
    if span == 0:
        raise ValueError("dead zone range must not be empty")
    return span


def axis_deadzone(value: float, low: float, high: float) -> float:
    """Rescale one axis so that ``|value| <= low`` is zero and ``|value| >= high`` is full."""
    span = _check_range(low, high)
    magnitude = abs(value)
    if magnitude <= low:
        return 0.0
    if magnitude >= high:
        return math.copysign(1.0, value)
    return math.copysign(magnitude - low, value) / span


def cardinal_deadzone(vector: Vector2, low: float, high: float) -> Vector2:
    """Apply the axis dead zone to each component separately."""
    return Vector2(axis_deadzone(vector.x, low, high), axis_deadzone(vector.y, low, high))


def radial_deadzone(vector: Vector2, low: float, high: float) -> Vector2:
    """Apply the dead zone to the vector's length, keeping its direction."""
    span = _check_range(low, high)
    magnitude = vector.mag()
    if magnitude < _F32_EPSILON or magnitude < low:
        return Vector2.ZERO
    if magnitude >= high:
        return vector / magnitude
    rescale = (magnitude - low) / span
    return vector / magnitude * rescale