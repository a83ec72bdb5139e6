from datetime import time

from samclock.dial import Line
from samclock.face import ClockFace
from samclock.settings import ClockSettings

NOW = time(10, 8, 42)


def test_center_and_radius():
    face = ClockFace(width=400)
    assert face.center() == (200.0, 200.0)
    assert face.radius() == 199.0


def test_default_shapes_are_dial_plus_three_hands():
    face = ClockFace()
    dial_shapes = face.dial.shapes(face.center(), face.radius())
    shapes = face.shapes(NOW)
    assert shapes[: len(dial_shapes)] == dial_shapes
    assert len(shapes) == len(dial_shapes) + 3
    hands = shapes[len(dial_shapes):]
    assert all(isinstance(h, Line) and h.thickness == 10 for h in hands)


def test_hand_order_hour_minute_second():
    face = ClockFace(has_dial=False)
    shapes = face.shapes(NOW)
    c, r = face.center(), face.radius()
    assert shapes == [
        face.hour_hand.shape(c, r, NOW),
        face.minute_hand.shape(c, r, NOW),
        face.second_hand.shape(c, r, NOW),
    ]


def test_without_second_hand():
    face = ClockFace(has_dial=False, has_sec_hand=False)
    assert len(face.shapes(NOW)) == 2


def test_rounded_edges_propagate():
    face = ClockFace(has_dial=False, has_rounded_hand_edges=True)
    assert all(s.rounded for s in face.shapes(NOW))


def test_settings_round_trip():
    settings = ClockSettings(
        position=(5, 6),
        size=(320, 320),
        has_sec_hand=False,
        has_circle=False,
        has_minute_marks=False,
        has_points=True,
        has_sweeping_second_hand=True,
    )
    face = ClockFace.from_settings(settings)
    assert face.width == 320
    assert face.dial.has_points is True
    assert face.to_settings((5, 6)) == settings


def test_to_settings_uses_position():
    assert ClockFace().to_settings((7, 9)).position == (7, 9)