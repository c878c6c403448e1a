"""Per-frame keyboard state: held keys, presses, repeats and releases."""

from __future__ import annotations

from enum import IntEnum, IntFlag

SCANCODE_COUNT = 512


class Key(IntEnum):
    """Keys the game reads, valued by their scancodes."""

    SPACE = 44
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82


class _KeyFlag(IntFlag):
    UP = 0b000
    IMPULSE = 0b001
    DOWN = 0b010
    REPEAT = 0b100


_PRESS = _KeyFlag.DOWN | _KeyFlag.IMPULSE
_RELEASE = _KeyFlag.UP | _KeyFlag.IMPULSE


class Keyboard:
    """Keyboard state fed by key events and queried by scancode or :class:`Key`."""

    def __init__(self) -> None:
        self._states: dict[int, _KeyFlag] = {}

    @staticmethod
    def _code(key: int) -> int:
        code = int(key)
        if not 0 <= code < SCANCODE_COUNT:
            raise ValueError(f"scancode {code} out of range")
        return code

    def _state(self, key: int) -> _KeyFlag:
        return self._states.get(self._code(key), _KeyFlag.UP)

    def down(self, key: int) -> bool:
        """Whether the key is held."""
        return bool(self._state(key) & _KeyFlag.DOWN)

    def pressed(self, key: int) -> bool:
        """Whether the key went down this frame, not counting auto-repeat."""
        return self._state(key) == _PRESS

    def repeat(self, key: int) -> bool:
        """Whether the key went down or auto-repeated this frame."""
        return self._state(key) & ~_KeyFlag.REPEAT == _PRESS

    def released(self, key: int) -> bool:
        """Whether the key went up this frame."""
        return self._state(key) == _RELEASE

    def key_event(self, key: int, down: bool, repeat: bool) -> None:
        """Record a key going down, repeating or going up."""
        code = self._code(key)
        if down:
            self._states[code] = _KeyFlag.REPEAT | _PRESS if repeat else _PRESS
        else:
            self._states[code] = _RELEASE

    def advance_frame(self) -> None:
        """Clear the one-frame press, release and repeat markers."""
        cleared = ~(_KeyFlag.IMPULSE | _KeyFlag.REPEAT)
        for code, state in self._states.items():
            self._states[code] = state & cleared