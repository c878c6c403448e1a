"""A snapshot of one gamepad's axes and buttons for the current frame."""

from __future__ import annotations

from typing import Sequence

from computerroom.buttons import PadAxis, PadButton
from computerroom.vector import Vector2

_AXIS_COUNT = len(PadAxis)
_I16_MIN = -(1 << 15)
_I16_MAX = (1 << 15) - 1


class PadState:
    """Axis values and button masks, with the buttons that changed this frame."""

    __slots__ = ("_axes", "_buttons", "_impulse")

    def __init__(self, axes: Sequence[int], current: int, previous: int) -> None:
        if len(axes) != _AXIS_COUNT:
            raise ValueError(f"expected {_AXIS_COUNT} axis values, got {len(axes)}")
        self._axes = tuple(axes)
        self._buttons = int(current)
        self._impulse = int(current) ^ int(previous)

    def __repr__(self) -> str:
        return f"PadState(axes={self._axes}, buttons={self._buttons:#x}, impulse={self._impulse:#x})"

    def raw_axis(self, axis: PadAxis) -> int:
        """Return the signed 16-bit reading of ``axis``."""
        return self._axes[PadAxis(axis)]

    def axis(self, axis: PadAxis) -> float:
        """Return ``axis`` scaled to the range -1 to 1."""
        raw = self.raw_axis(axis)
        return raw / -_I16_MIN if raw < 0 else raw / _I16_MAX

    def down(self, button: PadButton) -> bool:
        """Whether every button in ``button`` is held."""
        mask = int(button)
        return self._buttons & mask == mask

    def pressed(self, button: PadButton) -> bool:
        """Whether every button in ``button`` went down this frame."""
        mask = int(button)
        return self._buttons & self._impulse & mask == mask

    def pressed_any(self, buttons: PadButton) -> bool:
        """Whether any button in ``buttons`` went down this frame."""
        return self._buttons & self._impulse & int(buttons) != 0

    def released(self, button: PadButton) -> bool:
        """Whether every button in ``button`` went up this frame."""
        mask = int(button)
        return self._impulse & ~self._buttons & mask == mask

    def left_stick(self) -> Vector2:
        return Vector2(self.axis(PadAxis.LEFT_STICK_X), self.axis(PadAxis.LEFT_STICK_Y))

    def right_stick(self) -> Vector2:
        return Vector2(self.axis(PadAxis.RIGHT_STICK_X), self.axis(PadAxis.RIGHT_STICK_Y))

    def left_trigger(self) -> float:
        return self.axis(PadAxis.LEFT_TRIGGER)

    def right_trigger(self) -> float:
        return self.axis(PadAxis.RIGHT_TRIGGER)