"""Gamepad buttons as bit flags and gamepad axes as indices."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class PadButton(IntFlag):
    """One bit per gamepad button, placed at the controller's button index."""

    SOUTH = 1 << 0
    EAST = 1 << 1
    WEST = 1 << 2
    NORTH = 1 << 3
    GUIDE = 1 << 5
    START = 1 << 6
    LEFT_STICK = 1 << 7
    RIGHT_STICK = 1 << 8
    LEFT_SHOULDER = 1 << 9
    RIGHT_SHOULDER = 1 << 10
    DPAD_UP = 1 << 11
    DPAD_DOWN = 1 << 12
    DPAD_LEFT = 1 << 13
    DPAD_RIGHT = 1 << 14
    MISC1 = 1 << 15
    PADDLE1 = 1 << 16
    PADDLE2 = 1 << 17
    PADDLE3 = 1 << 18
    PADDLE4 = 1 << 19
    TOUCHPAD = 1 << 20
    MISC2 = 1 << 21
    MISC3 = 1 << 22
    MISC4 = 1 << 23
    MISC5 = 1 << 24
    MISC6 = 1 << 25


class PadAxis(IntEnum):
    """Index of each analogue axis in a gamepad's axis array."""

    LEFT_STICK_X = 0
    LEFT_STICK_Y = 1
    RIGHT_STICK_X = 2
    RIGHT_STICK_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5