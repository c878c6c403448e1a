"""Drawing onto a fixed-size logical canvas that is letterboxed onto a target surface."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, Optional, Tuple, Union

import pygame

from computerroom.colour import Colour
from computerroom.geometry import Rectangle
from computerroom.vector import Vector2

Texture = Optional[pygame.Surface]
_Painter = Callable[[pygame.Surface, Tuple[int, ...]], object]

_DEBUG_FONT_SIZE = 12


class Flip(Enum):
    """Mirroring applied when copying a texture."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2
    DIAGONAL = 3

    @property
    def horizontal(self) -> bool:
        return self in (Flip.HORIZONTAL, Flip.DIAGONAL)

    @property
    def vertical(self) -> bool:
        return self in (Flip.VERTICAL, Flip.DIAGONAL)


class BlendMode(Enum):
    """How drawing operations combine the draw colour with the canvas."""

    NONE = 0
    BLEND = 1
    ADD = 2
    ADD_PREMULTIPLIED = 3
    MODULATE = 4
    MULTIPLY = 5
    INVALID = 6


class Renderer:
    """Draws primitives and textures onto a logical canvas and presents it to ``target``."""

    def __init__(self, target: pygame.Surface, width: int = 640, height: int = 480) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"logical size must be positive, got {width}x{height}")
        self._target = target
        self.width = width
        self.height = height
        self._canvas = pygame.Surface((width, height))
        self.draw_colour = Colour.BLACK
        self._blendmode = BlendMode.NONE
        self._font: pygame.font.Font | None = None

    @property
    def blendmode(self) -> BlendMode:
        return self._blendmode

    def _paint(self, painter: _Painter) -> None:
        colour = self.draw_colour
        mode = self._blendmode
        rgb = (colour.r, colour.g, colour.b)
        size = self._canvas.get_size()
        if mode is BlendMode.NONE or (mode is BlendMode.BLEND and colour.a == 0xFF):
            painter(self._canvas, rgb)
        elif mode is BlendMode.BLEND:
            overlay = pygame.Surface(size, pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 0))
            painter(overlay, tuple(colour))
            self._canvas.blit(overlay, (0, 0))
        elif mode in (BlendMode.ADD, BlendMode.ADD_PREMULTIPLIED):
            if mode is BlendMode.ADD:
                rgb = tuple(channel * colour.a // 0xFF for channel in rgb)
            overlay = pygame.Surface(size)
            overlay.fill((0, 0, 0))
            painter(overlay, rgb)
            self._canvas.blit(overlay, (0, 0), special_flags=pygame.BLEND_RGB_ADD)
        else:
            overlay = pygame.Surface(size)
            overlay.fill((0xFF, 0xFF, 0xFF))
            painter(overlay, rgb)
            self._canvas.blit(overlay, (0, 0), special_flags=pygame.BLEND_RGB_MULT)

    def line(self, start: Vector2, end: Vector2) -> None:
        """Draw a line in the draw colour."""
        self._paint(lambda surface, colour: pygame.draw.line(
            surface, colour, (start.x, start.y), (end.x, end.y)))

    def fill(self, rect: Rectangle) -> None:
        """Fill a rectangle in the draw colour."""
        area = pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h))
        self._paint(lambda surface, colour: surface.fill(colour, area))

    def copy_fill(self, texture: Texture) -> None:
        """Stretch a texture over the whole canvas."""
        if texture is None:
            return
        size = self._canvas.get_size()
        image = texture if texture.get_size() == size else pygame.transform.scale(texture, size)
        self._canvas.blit(image, (0, 0))

    def load_texture(self, path: Union[str, os.PathLike]) -> Texture:
        """Load an image file, returning ``None`` and reporting the error if it fails."""
        try:
            image = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            print(f"Texture load failure: {exc}", file=sys.stderr)
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def copy(self, texture: Texture, dst: Rectangle, angle: float, flip: Flip) -> None:
        """Draw a texture into ``dst``, rotated clockwise by ``angle`` degrees about its centre."""
        if texture is None:
            return
        size = (round(dst.w), round(dst.h))
        if size[0] <= 0 or size[1] <= 0:
            return
        image = texture if texture.get_size() == size else pygame.transform.scale(texture, size)
        if flip is not Flip.NONE:
            image = pygame.transform.flip(image, flip.horizontal, flip.vertical)
        if angle:
            image = pygame.transform.rotate(image, -angle)
            centre = (round(dst.x + dst.w / 2), round(dst.y + dst.h / 2))
            self._canvas.blit(image, image.get_rect(center=centre))
        else:
            self._canvas.blit(image, (round(dst.x), round(dst.y)))

    def text(self, pos: Vector2, text: str) -> None:
        """Draw a line of text in the draw colour with its top-left corner at ``pos``."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _DEBUG_FONT_SIZE)
        colour = self.draw_colour
        image = self._font.render(text, False, (colour.r, colour.g, colour.b))
        if self._blendmode is BlendMode.BLEND:
            image.set_alpha(colour.a)
        self._canvas.blit(image, (round(pos.x), round(pos.y)))

    def clear_colour(self, r: int, g: int, b: int) -> None:
        """Clear the canvas to an opaque colour, keeping the draw colour."""
        previous = self.draw_colour
        self.draw_colour = Colour.rgb(r, g, b)
        self.clear()
        self.draw_colour = previous

    def clear(self) -> None:
        """Fill the whole canvas with the draw colour, ignoring the blend mode."""
        colour = self.draw_colour
        self._canvas.fill((colour.r, colour.g, colour.b))

    def set_blendmode(self, mode: BlendMode) -> None:
        """Choose how later drawing combines with the canvas."""
        mode = BlendMode(mode)
        if mode is BlendMode.INVALID:
            raise ValueError("invalid blend mode")
        self._blendmode = mode

    def present(self) -> None:
        """Scale the canvas onto the target, keeping its aspect ratio with black bars."""
        target_w, target_h = self._target.get_size()
        if target_w == 0 or target_h == 0:
            return
        scale = min(target_w / self.width, target_h / self.height)
        scaled = (max(1, int(self.width * scale)), max(1, int(self.height * scale)))
        image = (self._canvas if scaled == self._canvas.get_size()
                 else pygame.transform.scale(self._canvas, scaled))
        self._target.fill((0, 0, 0))
        self._target.blit(image, ((target_w - scaled[0]) // 2, (target_h - scaled[1]) // 2))
        if pygame.display.get_init() and self._target is pygame.display.get_surface():
            pygame.display.flip()