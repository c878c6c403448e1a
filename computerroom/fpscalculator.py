"""Frames-per-second counting."""

from __future__ import annotations

NANOS_PER_SECOND = 1_000_000_000


class FPSCalculator:
    """Counts frames and reports the count once a second of time has accumulated."""

    def __init__(self) -> None:
        self._accumulator = 0
        self._frames = 0

    def frame(self, delta: int) -> int | None:
        """Record a frame lasting ``delta`` nanoseconds.

        Returns the number of frames counted when a full second has elapsed,
        otherwise ``None``.
        """
        self._frames += 1
        self._accumulator += delta
        if self._accumulator < NANOS_PER_SECOND:
            return None
        count = self._frames
        self._frames = 0
        self._accumulator %= NANOS_PER_SECOND
        return count


def duration_from_performance(counter_delta: int, frequency: int) -> int:
    """Convert a performance-counter difference to nanoseconds."""
    if frequency <= 0:
        raise ValueError("frequency must be positive")
    if counter_delta < 0:
        raise ValueError("counter delta must not be negative")
    return round(counter_delta / frequency * NANOS_PER_SECOND)