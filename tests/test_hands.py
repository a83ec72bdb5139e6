import math
from datetime import datetime, time

import pytest

from samclock.hands import ClockHand, HandType, hand_angle

CENTER = (200.0, 200.0)
RADIUS = 199.0


def _direction(angle):
    return (round(math.cos(angle), 9), round(math.sin(angle), 9))


def test_minute_at_quarter_points_right():
    assert hand_angle(HandType.MINUTE, time(10, 15)) == pytest.approx(0.0)


def test_minute_at_zero_points_up():
    assert math.sin(hand_angle(HandType.MINUTE, time(10, 0))) == pytest.approx(-1.0)


def test_second_sweeping_adds_fraction():
    t = time(1, 2, 30, 500000)
    plain = hand_angle(HandType.SECOND, t, False)
    sweep = hand_angle(HandType.SECOND, t, True)
    assert plain == hand_angle(HandType.SECOND, time(1, 2, 30), True)
    assert sweep > plain
    assert sweep < hand_angle(HandType.SECOND, time(1, 2, 31))


def test_hour_afternoon_same_direction_as_morning():
    for hour in range(13, 24):
        pm = hand_angle(HandType.HOUR, time(hour, 20))
        am = hand_angle(HandType.HOUR, time(hour - 12, 20))
        assert _direction(pm) == _direction(am)


def test_hour_midnight_and_noon_agree():
    assert _direction(hand_angle(HandType.HOUR, time(0, 0))) == _direction(
        hand_angle(HandType.HOUR, time(12, 0))
    )


def test_hour_half_past_between_hours():
    half = hand_angle(HandType.HOUR, time(3, 30))
    assert hand_angle(HandType.HOUR, time(3, 0)) < half < hand_angle(HandType.HOUR, time(4, 0))


def test_accepts_datetime():
    now = datetime(2024, 5, 1, 8, 45, 10)
    assert ClockHand(HandType.MINUTE).angle(now) == hand_angle(HandType.MINUTE, time(8, 45))


@pytest.mark.parametrize(
    "hand_type, inset",
    [(HandType.SECOND, 10), (HandType.MINUTE, 30), (HandType.HOUR, 50)],
)
def test_endpoint_lengths(hand_type, inset):
    inner, outer = ClockHand(hand_type).endpoints(CENTER, RADIUS, time(4, 37, 12))
    out_len = math.hypot(outer[0] - CENTER[0], outer[1] - CENTER[1])
    in_len = math.hypot(inner[0] - CENTER[0], inner[1] - CENTER[1])
    assert out_len == pytest.approx(RADIUS - inset)
    assert in_len == pytest.approx(RADIUS / 6)


def test_endpoints_opposite_sides():
    inner, outer = ClockHand(HandType.HOUR).endpoints(CENTER, RADIUS, time(7, 5))
    dot = (inner[0] - CENTER[0]) * (outer[0] - CENTER[0]) + (
        inner[1] - CENTER[1]
    ) * (outer[1] - CENTER[1])
    assert dot < 0


def test_shape_goes_outer_to_inner():
    hand = ClockHand(HandType.MINUTE)
    inner, outer = hand.endpoints(CENTER, RADIUS, time(9, 10))
    line = hand.shape(CENTER, RADIUS, time(9, 10), rounded=True)
    assert line.start == outer
    assert line.end == inner
    assert line.thickness == 10
    assert line.rounded is True
    assert hand.shape(CENTER, RADIUS, time(9, 10)).rounded is False


def test_invalid_hand_type():
    with pytest.raises(ValueError):
        hand_angle(7, time(1, 1))