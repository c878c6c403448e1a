import pytest

from computerroom.buttons import PadAxis, PadButton
from computerroom.padstate import PadState
from computerroom.vector import Vector2


def make(axes=(0, 0, 0, 0, 0, 0), current=0, previous=0):
    return PadState(axes, current, previous)


def test_axis_extremes_scale_to_unit():
    state = make(axes=(32767, -32768, 0, 0, 0, 0))
    assert state.axis(PadAxis.LEFT_STICK_X) == 1.0
    assert state.axis(PadAxis.LEFT_STICK_Y) == -1.0
    assert state.axis(PadAxis.RIGHT_STICK_X) == 0.0


def test_raw_axis_returns_given_value():
    state = make(axes=(1, 2, 3, 4, 5, 6))
    assert [state.raw_axis(axis) for axis in PadAxis] == [1, 2, 3, 4, 5, 6]


def test_newly_pressed_button():
    state = make(current=PadButton.EAST, previous=0)
    assert state.down(PadButton.EAST)
    assert state.pressed(PadButton.EAST)
    assert not state.released(PadButton.EAST)
    assert not state.down(PadButton.SOUTH)


def test_held_button_is_not_pressed_again():
    state = make(current=PadButton.EAST, previous=PadButton.EAST)
    assert state.down(PadButton.EAST)
    assert not state.pressed(PadButton.EAST)
    assert not state.released(PadButton.EAST)


def test_released_button():
    state = make(current=0, previous=PadButton.START)
    assert state.released(PadButton.START)
    assert not state.down(PadButton.START)
    assert not state.pressed(PadButton.START)


def test_pressed_any_and_pressed_all():
    state = make(current=PadButton.DPAD_UP, previous=0)
    both = PadButton.DPAD_UP | PadButton.DPAD_DOWN
    assert state.pressed_any(both)
    assert not state.pressed(both)
    assert not state.pressed_any(PadButton.DPAD_LEFT | PadButton.DPAD_RIGHT)


def test_sticks_and_triggers_read_their_axes():
    state = make(axes=(32767, -32768, -32768, 32767, 0, 32767))
    assert state.left_stick() == Vector2(1.0, -1.0)
    assert state.right_stick() == Vector2(-1.0, 1.0)
    assert state.left_trigger() == state.axis(PadAxis.LEFT_TRIGGER)
    assert state.right_trigger() == 1.0


def test_wrong_axis_count_raises():
    with pytest.raises(ValueError):
        PadState((0, 0, 0), 0, 0)