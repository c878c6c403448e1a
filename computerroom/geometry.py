"""Axis-aligned rectangles as extents (edges) or as origin plus size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Extent:
    """A rectangle described by its left, top, right and bottom edges."""

    left: Number = 0
    top: Number = 0
    right: Number = 0
    bottom: Number = 0

    def width(self) -> Number:
        return self.right - self.left

    def height(self) -> Number:
        return self.bottom - self.top

    def to_rectangle(self) -> Rectangle:
        """Return the same area as a position and size."""
        return Rectangle(self.left, self.top, self.width(), self.height())


@dataclass(frozen=True)
class Rectangle:
    """A rectangle described by its top-left corner and its size."""

    x: Number = 0
    y: Number = 0
    w: Number = 0
    h: Number = 0

    def right(self) -> Number:
        return self.x + self.w

    def bottom(self) -> Number:
        return self.y + self.h

    def to_extent(self) -> Extent:
        """Return the same area as edges."""
        return Extent(self.x, self.y, self.right(), self.bottom())