"""The window, the main loop and the switching between scenes."""

from __future__ import annotations

import sys
from typing import Any

import pygame

from computerroom.colour import Colour
from computerroom.fpscalculator import FPSCalculator
from computerroom.gamepad import GamePads
from computerroom.keyboard import SCANCODE_COUNT, Keyboard
from computerroom.renderer import Renderer
from computerroom.states import ChangeState, Command, Continue, Quit, SplashState, State
from computerroom.timehelper import TimeHelper
from computerroom.vector import Vector2

WINDOW_TITLE = "Find the computer room!"
WIDTH = 640
HEIGHT = 480
_MAX_DELTA_TIME = 1.0 / 15.0
_FRAME_CAP = 60
_FPS_COLOUR = Colour.hex(0xFF1F4FFF)


class AppError(Exception):
    """The application could not start."""


class Application:
    """Owns the window and renderer and drives the current scene."""

    def __init__(self) -> None:
        self.window: pygame.Surface | None = None
        self.renderer: Renderer | None = None
        self.should_quit = False
        self.exit_code = 0
        self.state: State | None = None
        self.time = TimeHelper()
        self.fps_counter = FPSCalculator()
        self.fps_string = ""
        self.currently_fullscreen = False
        self.keyboard = Keyboard()
        self._pending: dict[int, Any] = {}
        self.gamepads = GamePads(lambda instance_id: self._pending.pop(instance_id, None))

    def change_state(self, state: State) -> None:
        """Replace the current scene with ``state``, loading and initialising it."""
        if self.renderer is None:
            raise AppError("cannot change state before the renderer exists")
        if self.state is not None:
            self.state.quit()
        self.state = state
        state.load(self.renderer)
        state.init()

    def init(self) -> None:
        """Open the window and renderer and show the splash scene."""
        pygame.init()
        if not pygame.display.get_init():
            raise AppError(f"display init failed: {pygame.get_error()}")
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            self.window = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE, vsync=1)
        except pygame.error:
            try:
                self.window = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
            except pygame.error as exc:
                raise AppError(f"window creation failed: {exc}") from exc
        self.renderer = Renderer(self.window, WIDTH, HEIGHT)
        self.change_state(SplashState(self.keyboard, self.gamepads))
        self.time.init()

    def _toggle_fullscreen(self) -> None:
        if self.window is not None:
            pygame.display.toggle_fullscreen()
        self.currently_fullscreen = not self.currently_fullscreen

    def _key_event(self, event: Any, down: bool) -> None:
        key = event.key
        repeat = bool(getattr(event, "repeat", False))
        if (key == pygame.K_RETURN and down and not repeat
                and getattr(event, "mod", 0) & pygame.KMOD_ALT):
            self._toggle_fullscreen()
        elif key == pygame.K_ESCAPE:
            self.should_quit = True
        else:
            scancode = getattr(event, "scancode", -1)
            if 0 <= scancode < SCANCODE_COUNT:
                self.keyboard.key_event(scancode, down, repeat)

    def _controller_added(self, device_index: int) -> None:
        try:
            from pygame._sdl2 import controller
            if not controller.get_init():
                controller.init()
            pad = controller.Controller(device_index)
            instance_id = pad.as_joystick().get_instance_id()
        except (pygame.error, ImportError) as exc:
            print(f"Gamepad open failure: {exc}", file=sys.stderr)
            return
        # Device instance ids may be zero, which the pad tracker reserves for "none".
        key = instance_id + 1
        self._pending[key] = pad
        self.gamepads.connected_event(key)
        self._pending.pop(key, None)

    def handle_event(self, event: Any) -> None:
        """React to one window, keyboard or gamepad event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.should_quit = True
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            self._key_event(event, kind == pygame.KEYDOWN)
        elif kind == pygame.CONTROLLERDEVICEADDED:
            self._controller_added(event.device_index)
        elif kind == pygame.CONTROLLERDEVICEREMOVED:
            self.gamepads.removed_event(event.instance_id + 1)
        elif kind in (pygame.CONTROLLERBUTTONDOWN, pygame.CONTROLLERBUTTONUP):
            self.gamepads.button_event(event.instance_id + 1, event.button,
                                       kind == pygame.CONTROLLERBUTTONDOWN)
        elif kind == pygame.CONTROLLERAXISMOTION:
            self.gamepads.axis_event(event.instance_id + 1, event.axis, event.value)

    def draw(self, deltatime: float) -> None:
        """Draw the scene and the frame-rate counter, then show the frame."""
        if self.renderer is None:
            return
        if self.state is not None:
            self.state.draw(self.renderer, deltatime)
        self.renderer.draw_colour = _FPS_COLOUR
        if self.fps_string:
            self.renderer.text(Vector2.ONE * 5.0, self.fps_string)
        self.renderer.present()

    def apply(self, command: Command) -> None:
        """Carry out the command a scene returned from its tick."""
        match command:
            case ChangeState(state=state):
                self.change_state(state)
            case Quit(code=code):
                self.exit_code = code
                self.should_quit = True
            case Continue():
                pass
            case _:
                raise TypeError(f"unknown state command {command!r}")

    def free(self) -> None:
        """Release the scene, renderer and window."""
        if self.state is not None:
            self.state.quit()
        self.state = None
        self.renderer = None
        self.window = None
        pygame.quit()

    def run(self) -> int:
        """Run the game until it is closed and return the exit code."""
        try:
            self.init()
        except AppError as err:
            print(f"ERROR: {err}", file=sys.stderr)
            self.free()
            return 1

        clock = pygame.time.Clock()
        while not self.should_quit:
            self.time.frame_advance()

            fps = self.fps_counter.frame(self.time.duration())
            if fps is not None:
                self.fps_string = f"FPS: {fps}"

            self.gamepads.advance_frame()
            self.keyboard.advance_frame()
            for event in pygame.event.get():
                self.handle_event(event)

            delta = min(_MAX_DELTA_TIME, self.time.deltatime())
            command = self.state.tick(delta) if self.state is not None else Continue()
            self.draw(delta)
            self.apply(command)
            clock.tick(_FRAME_CAP)

        self.free()
        return self.exit_code


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    return Application().run()


if __name__ == "__main__":
    sys.exit(main())