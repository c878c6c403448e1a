"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator

_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class Colour:
    """A colour with red, green, blue and alpha channels in the range 0 to 255."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    BLACK: ClassVar[Colour]
    WHITE: ClassVar[Colour]
    RED: ClassVar[Colour]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"channel {name} must be between 0 and 255, got {value}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Colour:
        """Return an opaque colour."""
        return cls(r, g, b, 0xFF)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Colour:
        """Return a colour with the given alpha."""
        return cls(r, g, b, a)

    @classmethod
    def hex(cls, value: int) -> Colour:
        """Return the colour packed as ``0xRRGGBBAA``."""
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"packed colour must fit in 32 bits, got {value:#x}")
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )


Colour.BLACK = Colour.rgb(0x00, 0x00, 0x00)
Colour.WHITE = Colour.rgb(0xFF, 0xFF, 0xFF)
Colour.RED = Colour.rgb(0xFF, 0x00, 0x00)