"""Frame timing from a nanosecond clock."""

from __future__ import annotations

import time
from typing import Callable

_U64 = (1 << 64) - 1


class TimeHelper:
    """Tracks the time between consecutive frames."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic_ns
        self._prev = 0
        self._cur = 0

    def init(self) -> None:
        """Take the initial reading of the clock."""
        self._prev = self._clock()

    def frame_advance(self) -> None:
        """Start a new frame: the last reading becomes the previous one."""
        self._prev = self._cur
        self._cur = self._clock()

    def _raw_delta(self) -> int:
        return (self._cur - self._prev) & _U64

    def deltatime(self) -> float:
        """Return the last frame's length in seconds."""
        return self._raw_delta() * 1e-9

    def duration(self) -> int:
        """Return the last frame's length in nanoseconds."""
        return self._raw_delta()