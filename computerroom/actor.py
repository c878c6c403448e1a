"""Things that live in the game world, and the player character."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from computerroom.buttons import PadButton
from computerroom.colour import Colour
from computerroom.deadzone import radial_deadzone
from computerroom.gamepad import GamePads
from computerroom.geometry import Extent, Rectangle
from computerroom.keyboard import Key, Keyboard
from computerroom.renderer import Flip, Renderer, Texture
from computerroom.rng import Drand48
from computerroom.vector import Vector2

_ACCELERATION = 3600.0
_FRICTION = 6.0
_WRAP = Extent(-32, -48, 640 + 32, 480 + 48)

_BOLT_ADVANCE = 10.0
_BOLT_JITTER = 8.0
_BOLT_ANGLE_JITTER = 0.18
_BOLT_LEVELS = 50


class Actor(ABC):
    """Something with a position that is updated and drawn every frame."""

    position: Vector2

    @abstractmethod
    def update(self, deltatime: float) -> None:
        """Advance the actor by ``deltatime`` seconds."""

    @abstractmethod
    def draw(self, renderer: Renderer, deltatime: float) -> None:
        """Draw the actor."""


class Beato(Actor):
    """The player: moves with the left stick or arrows, fires lightning with the right."""

    def __init__(self, keyboard: Keyboard, gamepads: GamePads,
                 random: Drand48 | None = None) -> None:
        self._keyboard = keyboard
        self._gamepads = gamepads
        self._random = random if random is not None else Drand48()
        self.position = Vector2.ZERO
        self.velocity = Vector2.ZERO
        self.flipped = False
        self.lazervec = Vector2.ZERO
        self.lazering = False
        self.texture: Texture = None

    def load_textures(self, renderer: Renderer) -> None:
        self.texture = renderer.load_texture("beato.png")

    def _read_input(self) -> tuple[Vector2, Vector2, bool]:
        lstick = Vector2.ZERO
        rstick = Vector2.ZERO
        fire = False

        pad = self._gamepads.current()
        if pad is not None:
            lstick += radial_deadzone(pad.left_stick(), 0.1, 1.0)
            lstick += Vector2(
                pad.down(PadButton.DPAD_RIGHT) - pad.down(PadButton.DPAD_LEFT),
                pad.down(PadButton.DPAD_DOWN) - pad.down(PadButton.DPAD_UP),
            )
            rstick += radial_deadzone(pad.right_stick(), 0.1, 1.0)
            fire = pad.right_trigger() >= 0.5

        keys = self._keyboard
        lstick += Vector2(
            keys.down(Key.RIGHT) - keys.down(Key.LEFT),
            keys.down(Key.DOWN) - keys.down(Key.UP),
        )
        if keys.down(Key.SPACE):
            fire = True
            rstick = -Vector2.X if self.flipped else Vector2.X
        return lstick, rstick, fire

    def update(self, deltatime: float) -> None:
        lstick, rstick, fire = self._read_input()

        if lstick.mag() > 1.0:
            lstick = lstick.normalise()
        self.velocity += lstick * _ACCELERATION * deltatime
        if lstick.x < -0.1:
            self.flipped = True
        elif lstick.x > 0.1:
            self.flipped = False

        lazer_mag = rstick.mag()
        if lazer_mag > 0.125:
            self.lazering = fire
            if fire:
                self.lazervec = rstick / lazer_mag
            self.flipped = rstick.x < 0.0
        else:
            self.lazering = False

        x, y = self.position + self.velocity * deltatime
        if x < _WRAP.left:
            x += _WRAP.width()
        if y < _WRAP.top:
            y += _WRAP.height()
        if x >= _WRAP.right:
            x -= _WRAP.width()
        if y >= _WRAP.bottom:
            y -= _WRAP.height()
        self.position = Vector2(x, y)

        self.velocity -= self.velocity * _FRICTION * deltatime

    def _lightning(self, renderer: Renderer, start: Vector2, angle: float, levels: int) -> None:
        rand = self._random
        jitter_x = rand.next_float() * _BOLT_JITTER - _BOLT_JITTER * 0.5
        jitter_y = rand.next_float() * _BOLT_JITTER - _BOLT_JITTER * 0.5
        end = (start + Vector2(math.cos(angle), math.sin(angle)) * _BOLT_ADVANCE
               + Vector2(jitter_x, jitter_y))

        bright = rand.next_bound(0x7F)
        renderer.draw_colour = Colour.rgb(0x7F + bright, 0x7F + bright, 0xFF)
        renderer.line(start, end)

        wrapped = Vector2(
            (end.x + 32.0) % (640.0 + 64.0) - 32.0,
            (end.y + 48.0) % (480.0 + 96.0) - 48.0,
        )

        if levels > 1:
            bent = angle + rand.next_float() * _BOLT_ANGLE_JITTER - _BOLT_ANGLE_JITTER * 0.5 + 0.01
            loss = 2 if rand.next_bound(3) == 0 else 1
            self._lightning(renderer, wrapped, bent, levels - loss)
            if rand.next_bound(14) == 0:
                fork = angle - rand.next_float() * _BOLT_ANGLE_JITTER - _BOLT_ANGLE_JITTER * 0.5
                self._lightning(renderer, wrapped, fork, levels - 1)

    def draw(self, renderer: Renderer, deltatime: float) -> None:
        width, height = 48.0, 64.0
        dst = Rectangle(self.position.x - width * 0.5, self.position.y - height * 0.5,
                        width, height)
        flip = Flip.HORIZONTAL if self.flipped else Flip.NONE
        angle = self.velocity.x / 120.0 * 2.45
        renderer.copy(self.texture, dst, angle, flip)

        if self.lazering:
            self._lightning(renderer, self.position, self.lazervec.angle(), _BOLT_LEVELS)