import pygame
import pytest

from computerroom.application import AppError, Application
from computerroom.keyboard import Key
from computerroom.renderer import Renderer
from computerroom.states import ChangeState, Continue, GameState, Quit, State


class Recorder(State):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def init(self):
        self.log.append((self.name, "init"))

    def quit(self):
        self.log.append((self.name, "quit"))

    def tick(self, deltatime):
        return Continue()

    def load(self, renderer):
        self.log.append((self.name, "load"))

    def draw(self, renderer, deltatime):
        self.log.append((self.name, "draw"))


def key_event(kind, key, scancode, mod=0, **extra):
    return pygame.event.Event(kind, key=key, scancode=scancode, mod=mod, **extra)


@pytest.fixture
def app():
    application = Application()
    application.renderer = Renderer(pygame.Surface((640, 480)), 640, 480)
    return application


def test_new_application_is_running():
    application = Application()
    assert application.should_quit is False
    assert application.exit_code == 0
    assert application.state is None


def test_quit_event_stops():
    application = Application()
    application.handle_event(pygame.event.Event(pygame.QUIT))
    assert application.should_quit is True


@pytest.mark.parametrize("kind", [pygame.KEYDOWN, pygame.KEYUP])
def test_escape_stops(kind):
    application = Application()
    application.handle_event(key_event(kind, pygame.K_ESCAPE, pygame.KSCAN_ESCAPE))
    assert application.should_quit is True


def test_arrow_keys_reach_keyboard():
    application = Application()
    application.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT, int(Key.LEFT)))
    assert application.keyboard.down(Key.LEFT)
    assert application.keyboard.pressed(Key.LEFT)
    application.keyboard.advance_frame()
    application.handle_event(key_event(pygame.KEYUP, pygame.K_LEFT, int(Key.LEFT)))
    assert application.keyboard.released(Key.LEFT)
    assert not application.keyboard.down(Key.LEFT)


def test_alt_return_toggles_fullscreen():
    application = Application()
    event = key_event(pygame.KEYDOWN, pygame.K_RETURN, pygame.KSCAN_RETURN, mod=pygame.KMOD_LALT)
    application.handle_event(event)
    assert application.currently_fullscreen is True
    assert not application.keyboard.down(pygame.KSCAN_RETURN)
    application.handle_event(event)
    assert application.currently_fullscreen is False


def test_plain_return_goes_to_keyboard():
    application = Application()
    application.handle_event(key_event(pygame.KEYDOWN, pygame.K_RETURN, pygame.KSCAN_RETURN))
    assert application.currently_fullscreen is False
    assert application.keyboard.pressed(pygame.KSCAN_RETURN)


def test_repeated_alt_return_does_not_toggle():
    application = Application()
    application.handle_event(key_event(pygame.KEYDOWN, pygame.K_RETURN, pygame.KSCAN_RETURN,
                                       mod=pygame.KMOD_LALT, repeat=True))
    assert application.currently_fullscreen is False
    assert application.keyboard.repeat(pygame.KSCAN_RETURN)
    assert not application.keyboard.pressed(pygame.KSCAN_RETURN)


def test_button_from_unknown_pad_is_ignored():
    application = Application()
    application.handle_event(pygame.event.Event(
        pygame.CONTROLLERBUTTONDOWN, instance_id=0, button=0))
    assert application.gamepads.current() is None


def test_apply_quit_sets_exit_code():
    application = Application()
    application.apply(Quit(7))
    assert application.should_quit is True
    assert application.exit_code == 7


def test_apply_continue_changes_nothing():
    application = Application()
    application.apply(Continue())
    assert application.should_quit is False
    assert application.exit_code == 0


def test_change_state_without_renderer_fails():
    application = Application()
    with pytest.raises(AppError):
        application.change_state(Recorder("a", []))


def test_change_state_quits_old_then_loads_new(app):
    log = []
    app.change_state(Recorder("first", log))
    app.apply(ChangeState(Recorder("second", log)))
    assert log == [
        ("first", "load"), ("first", "init"),
        ("first", "quit"), ("second", "load"), ("second", "init"),
    ]
    assert app.state.name == "second"


def test_draw_renders_current_state(app):
    target = pygame.Surface((640, 480))
    app.renderer = Renderer(target, 640, 480)
    app.change_state(GameState(app.keyboard, app.gamepads))
    app.draw(0.0)
    assert tuple(target.get_at((320, 240)))[:3] == (0x1F, 0x1F, 0x1F)


def test_free_quits_state(app):
    log = []
    app.change_state(Recorder("only", log))
    app.free()
    assert log[-1] == ("only", "quit")
    assert app.state is None
    assert app.renderer is None