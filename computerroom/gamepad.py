"""Tracking of connected gamepads from device events."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from computerroom.buttons import PadAxis
from computerroom.padstate import PadState

Opener = Callable[[int], Optional[Any]]


@dataclass
class GamePad:
    """One open gamepad and its raw input for the current and previous frame."""

    instance_id: int
    device: Any = None
    axes: list[int] = field(default_factory=lambda: [0] * len(PadAxis))
    current: int = 0
    previous: int = 0

    @property
    def name(self) -> str:
        return str(getattr(self.device, "name", None) or f"gamepad {self.instance_id}")

    def snapshot(self) -> PadState:
        """Return the pad's input as a :class:`PadState`."""
        return PadState(tuple(self.axes), self.current, self.previous)

    def close(self) -> None:
        closer = getattr(self.device, "close", None)
        if callable(closer):
            closer()


class GamePads:
    """The set of connected gamepads; the first one connected is the current one."""

    def __init__(self, opener: Opener | None = None) -> None:
        self._opener = opener
        self._pads: list[GamePad] = []
        self._first_id = 0

    def _find(self, instance_id: int) -> GamePad | None:
        return next((pad for pad in self._pads if pad.instance_id == instance_id), None)

    def current(self) -> PadState | None:
        """Return the state of the current gamepad, if one is connected."""
        return self.state(self._first_id)

    def state(self, instance_id: int) -> PadState | None:
        """Return the state of the given gamepad, if it is connected."""
        pad = self._find(instance_id)
        return pad.snapshot() if pad is not None else None

    def connected_event(self, instance_id: int) -> None:
        """Open a newly connected gamepad unless it is already tracked."""
        if self._find(instance_id) is not None:
            return
        if self._opener is None:
            device = None
        else:
            device = self._opener(instance_id)
            if device is None:
                return
        pad = GamePad(instance_id, device)
        print(f'Using gamepad #{instance_id} "{pad.name}"', file=sys.stderr)
        if self._first_id == 0:
            self._first_id = instance_id
        self._pads.append(pad)

    def removed_event(self, instance_id: int) -> None:
        """Forget a disconnected gamepad, choosing a new current one if needed."""
        pad = self._find(instance_id)
        if pad is not None:
            self._pads.remove(pad)
            pad.close()
        if self._first_id == instance_id:
            self._first_id = self._pads[0].instance_id if self._pads else 0

    def button_event(self, instance_id: int, button: int, down: bool) -> None:
        """Record a button at controller index ``button`` going down or up."""
        if button < 0:
            raise ValueError(f"invalid button index {button}")
        pad = self._find(instance_id)
        if pad is None:
            return
        mask = 1 << int(button)
        pad.current = pad.current | mask if down else pad.current & ~mask

    def axis_event(self, instance_id: int, axis: int, value: int) -> None:
        """Record a new reading for ``axis``."""
        index = PadAxis(axis)
        pad = self._find(instance_id)
        if pad is not None:
            pad.axes[index] = value

    def advance_frame(self) -> None:
        """Make the current button masks the previous ones."""
        for pad in self._pads:
            pad.previous = pad.current