"""Game scenes and the commands a scene returns to the main loop each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from computerroom.actor import Beato
from computerroom.buttons import PadButton
from computerroom.colour import Colour
from computerroom.gamepad import GamePads
from computerroom.geometry import Rectangle
from computerroom.keyboard import Keyboard
from computerroom.renderer import BlendMode, Flip, Renderer, Texture
from computerroom.rng import Drand48
from computerroom.vector import Vector2

_F32_EPSILON = 1.1920929e-07


class State(ABC):
    """One scene of the game: loaded once, then ticked and drawn every frame."""

    def init(self) -> None:
        """Prepare the scene after its resources are loaded."""

    def quit(self) -> None:
        """Release the scene before it is replaced."""

    @abstractmethod
    def tick(self, deltatime: float) -> Command:
        """Advance the scene and say what the main loop should do next."""

    @abstractmethod
    def load(self, renderer: Renderer) -> None:
        """Load the scene's textures."""

    @abstractmethod
    def draw(self, renderer: Renderer, deltatime: float) -> None:
        """Draw the scene."""


@dataclass(frozen=True)
class Continue:
    """Keep running the current scene."""


@dataclass(frozen=True)
class ChangeState:
    """Replace the current scene with ``state``."""

    state: State


@dataclass(frozen=True)
class Quit:
    """Stop the game with an exit code."""

    code: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.code <= 0xFF:
            raise ValueError(f"exit code must be between 0 and 255, got {self.code}")


Command = Union[Continue, ChangeState, Quit]


class SplashState(State):
    """Fades a picture in and out, then moves on to the game."""

    def __init__(self, keyboard: Keyboard, gamepads: GamePads) -> None:
        self._keyboard = keyboard
        self._gamepads = gamepads
        self.time = 0.0
        self.fade = 0.0
        self.bgtex: Texture = None

    def init(self) -> None:
        self.time = 0.0
        self.fade = 1.0

    def tick(self, deltatime: float) -> Command:
        self.time += deltatime
        if self.time < 2.0:
            self.fade = max(self.fade - 0.75 * deltatime, 0.0)
        elif self.time < 3.2:
            self.fade = min(self.fade + 0.85 * deltatime, 1.0)
        else:
            return ChangeState(GameState(self._keyboard, self._gamepads))
        return Continue()

    def load(self, renderer: Renderer) -> None:
        self.bgtex = renderer.load_texture("gamepad.jpeg")

    def draw(self, renderer: Renderer, deltatime: float) -> None:
        renderer.draw_colour = Colour.BLACK
        renderer.clear()
        renderer.copy_fill(self.bgtex)
        renderer.set_blendmode(BlendMode.BLEND)
        alpha = min(max(int(self.fade * 255.0), 0), 0xFF)
        renderer.draw_colour = Colour.rgba(0x00, 0x00, 0x00, alpha)
        renderer.fill(Rectangle(0, 0, 640, 480))


_SECRET_SEQUENCE = (
    PadButton.DPAD_UP, PadButton.DPAD_UP,
    PadButton.DPAD_DOWN, PadButton.DPAD_DOWN,
    PadButton.DPAD_LEFT, PadButton.DPAD_RIGHT,
    PadButton.DPAD_LEFT, PadButton.DPAD_RIGHT,
    PadButton.EAST, PadButton.SOUTH, PadButton.START,
)
_WATCHED_BUTTONS = (
    PadButton.DPAD_LEFT | PadButton.DPAD_RIGHT | PadButton.DPAD_UP | PadButton.DPAD_DOWN
    | PadButton.EAST | PadButton.SOUTH | PadButton.START
)


class GameState(State):
    """The player wanders about; entering the secret button sequence moves on."""

    def __init__(self, keyboard: Keyboard, gamepads: GamePads) -> None:
        self._keyboard = keyboard
        self._gamepads = gamepads
        self.beato = Beato(keyboard, gamepads)
        self.sequence_index = 0

    def tick(self, deltatime: float) -> Command:
        self.beato.update(deltatime)
        pad = self._gamepads.current()
        if pad is not None and pad.pressed_any(_WATCHED_BUTTONS):
            expected = _SECRET_SEQUENCE[self.sequence_index]
            if not pad.pressed(expected):
                self.sequence_index = 0
            elif self.sequence_index == len(_SECRET_SEQUENCE) - 1:
                return ChangeState(BeatoBurnerState(self._keyboard, self._gamepads))
            else:
                self.sequence_index += 1
        return Continue()

    def load(self, renderer: Renderer) -> None:
        self.beato.load_textures(renderer)

    def draw(self, renderer: Renderer, deltatime: float) -> None:
        renderer.clear_colour(0x1F, 0x1F, 0x1F)
        self.beato.draw(renderer, deltatime)


class BeatoBurnerState(State):
    """The player over a gamepad picture; pressing East breaks it with a shake."""

    def __init__(self, keyboard: Keyboard, gamepads: GamePads) -> None:
        self._gamepads = gamepads
        self.beato = Beato(keyboard, gamepads)
        self.bgpad: Texture = None
        self.bgbad: Texture = None
        self.bad = False
        self.shakeshake = 0.0
        self.random = Drand48()

    def init(self) -> None:
        self.beato.position = Vector2.ONE * -20.0

    def load(self, renderer: Renderer) -> None:
        self.bgpad = renderer.load_texture("gamepad.jpeg")
        self.bgbad = renderer.load_texture("gamebad.jpg")
        self.beato.load_textures(renderer)

    def tick(self, deltatime: float) -> Command:
        if self.shakeshake > 0.0:
            self.shakeshake = max(0.0, self.shakeshake - deltatime)
        self.beato.update(deltatime)
        pad = self._gamepads.current()
        if pad is not None and pad.pressed(PadButton.EAST):
            if not self.bad:
                self.shakeshake = 1.0
            self.bad = True
        return Continue()

    def draw(self, renderer: Renderer, deltatime: float) -> None:
        renderer.draw_colour = Colour.RED
        renderer.clear()
        background = self.bgbad if self.bad else self.bgpad
        if self.shakeshake > _F32_EPSILON:
            shake_x = self.random.next_range(-32, 32)
            shake_y = self.random.next_range(-32, 32)
            shake = Vector2(shake_x, shake_y) * self.shakeshake
            renderer.copy(background, Rectangle(shake.x, shake.y, 640.0, 480.0), 0.0, Flip.NONE)
        else:
            renderer.copy_fill(background)
        self.beato.draw(renderer, deltatime)