# computerroom

*Find the computer room!* is a small arcade toy built on pygame. It opens a
resizable window with a 640×480 canvas. The canvas is scaled to fit the window
and letterboxed with black bars. The game runs through three scenes:

1. **Splash.** A picture fades in from black, holds, then fades back out.
   After about 3.2 seconds the game moves on.
2. **Wander.** Beato moves about on a dark grey screen that wraps at the
   edges. Entering the secret gamepad sequence moves on to the next scene.
   The sequence is Up, Up, Down, Down, Left, Right, Left, Right, East,
   South, Start. A wrong watched button starts the sequence over.
3. **Burner.** Beato moves in front of a gamepad picture. Press East on the
   gamepad and the picture is swapped for a broken one, with a one-second
   screen shake.

Beato can throw forking lightning in the wander and burner scenes. The bolt
wraps around the screen edges as it goes.

## Installing

```
pip install .
```

The game loads `beato.png`, `gamepad.jpeg` and `gamebad.jpg` from the working
directory. If an image cannot be loaded, the game prints
`Texture load failure: …` to standard error and carries on without that
picture.

## Playing

```
computerroom
```

| Action            | Keyboard                     | Gamepad                                      |
|-------------------|------------------------------|----------------------------------------------|
| Move              | Arrow keys                   | Left stick (radial dead zone) or D-pad       |
| Fire lightning    | Space (in the facing direction) | Aim the right stick, hold the right trigger at least halfway |
| Toggle fullscreen | Alt + Return                 |                                              |
| Quit              | Escape, or close the window  |                                              |

The first gamepad that is connected is the one used. If it is unplugged, the
earliest-connected pad still plugged in takes over. Each connected pad is
reported on standard error as `Using gamepad #<id> "<name>"`.

After the first second, the frame rate is drawn in the top-left corner as
`FPS: <n>`. The loop is capped at 60 frames per second. Each frame's time
step is capped at 1/15 s.

The command exits with status 0 when the game is closed. It exits with 1,
after printing `ERROR: …`, if the display or window could not be set up.

## What it does not do

There is no sound, score or saving. The secret sequence can only be entered
on a gamepad; the keyboard cannot reach the burner scene. Nothing in the game
asks to quit with any status other than 0.

## Using the pieces

The parts the game is built from can be used on their own:

- `computerroom.vector.Vector2`: an immutable 2-D vector. It supports `+`,
  `-`, unary `-`, and component-wise or scalar `*` and `/`. It also has
  `dot`, `mag2`, `mag`, `normalise` and `angle`, plus the constants `ZERO`,
  `ONE`, `X` and `Y`.
- `computerroom.geometry.Rectangle` (`x`, `y`, `w`, `h`) and
  `computerroom.geometry.Extent` (`left`, `top`, `right`, `bottom`): two forms
  of an axis-aligned box. They convert into each other with `to_extent` and
  `to_rectangle`.
- `computerroom.rng.Drand48`: the 48-bit linear congruential generator. It is
  seeded the way Java's `Random` is, and has `next_bits`, `next`, `next_int`,
  `next_bound`, `next_range` and `next_float`. With no seed it uses the
  current time.
- `computerroom.deadzone`: the functions `axis_deadzone`, `cardinal_deadzone`
  and `radial_deadzone`. Each raises `ValueError` if the low and high limits
  are equal.
- `computerroom.keyboard.Keyboard`: per-frame key state fed by `key_event`
  and cleared by `advance_frame`. Query it with `down`, `pressed`, `repeat`
  and `released`. Keys are scancodes; `Key` names the ones the game reads.
- `computerroom.gamepad.GamePads`: tracks connected pads from connect,
  remove, button and axis events. `current()` and `state(id)` return a
  `computerroom.padstate.PadState`, or `None` if no such pad is connected.
  `PadState` reads axes scaled to −1…1 and has `down`, `pressed`,
  `pressed_any` and `released` for `computerroom.buttons.PadButton` flags.
- `computerroom.colour.Colour`: an RGBA colour built with `rgb`, `rgba` or
  `hex` (packed as `0xRRGGBBAA`).
- `computerroom.fpscalculator.FPSCalculator` and
  `computerroom.timehelper.TimeHelper`: frame counting and frame timing in
  nanoseconds.

```python
from computerroom.rng import Drand48
from computerroom.deadzone import radial_deadzone
from computerroom.vector import Vector2

rng = Drand48(42)
print(rng.next_range(-32, 32), rng.next_float())
print(radial_deadzone(Vector2(0.05, 0.0), 0.1, 1.0))  # Vector2(x=0.0, y=0.0)
```

## Running the tests

```
pip install ".[test]"
pytest
```