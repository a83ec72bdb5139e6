# samclock

A small analog clock for the desktop. It opens as a frameless, always-on-top
window showing a round dial with hour, minute and second hands, redrawn every
200 milliseconds.

The window is drawn with tkinter, which must be available in your Python
installation.

## Installation

```
pip install .
```

## Running

```
samclock
```

Settings are read from, and saved to, the per-user configuration file by
default. Another file can be given instead:

```
samclock --config path/to/settings.json
```

## Using the clock

- Drag the clock with the left mouse button to move it around the screen.
- Right-click for a menu with **Preferences** and **Close**.
- Press `c` while the clock has focus to open the preferences as well.

The window background is black; where the window system supports a
transparent colour, the black is made transparent so only the clock shows.

The preferences dialog changes the clock while it runs:

- the size of the clock, from 50 to 1000 pixels;
- whether the second hand is shown, and whether it sweeps smoothly or ticks
  once a second;
- whether the dial has its outer circle;
- minute marks and five-minute marks;
- points in place of marks (while points are on, the two mark options are
  greyed out);
- rounded or square ends on the hands.

The dial has no numerals.

## Settings

Position, size and every preference are saved as JSON when the clock is
closed and restored the next time it starts. Missing or unreadable values
fall back to the defaults. `samclock.settings.default_settings_path()`
returns the default location. Without a saved file the clock starts at
(100, 100), 400 pixels wide, with a ticking second hand, the dial circle,
minute and five-minute marks, and square hand ends.

`samclock.settings.ClockSettings` holds these values; `ClockSettings.load()`
and `ClockSettings.save()` read and write them, optionally at a given path.

## Using it from Python

The drawing geometry does not depend on any window toolkit and can be used
on its own:

```python
from datetime import datetime

from samclock.face import ClockFace
from samclock.settings import ClockSettings

face = ClockFace.from_settings(ClockSettings())
for shape in face.shapes(datetime.now()):
    print(shape)
```

`ClockFace.shapes` returns plain `Line` and `Circle` values (from
`samclock.dial`) for the dial marks, the dial circle and the hands, back to
front, ready to hand to any drawing surface. `samclock.hands.hand_angle`
gives the angle of a single hand, in radians measured clockwise from the
right, for a `HandType` and a time.

## Running the tests

```
pip install .[test]
pytest
```