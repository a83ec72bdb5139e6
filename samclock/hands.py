"""Clock hands: their angle for a given time and their line on the face."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, time
from enum import IntEnum

from samclock.dial import Line, Point

HAND_THICKNESS = 10


class HandType(IntEnum):
    SECOND = 1
    MINUTE = 2
    HOUR = 3


_INSET = {HandType.SECOND: 10, HandType.MINUTE: 30, HandType.HOUR: 50}


def hand_angle(hand_type: HandType, now: datetime | time, sweeping: bool = False) -> float:
    """Return the angle in radians of a hand, zero pointing right, clockwise."""
    hand_type = HandType(hand_type)
    if hand_type is HandType.SECOND:
        seconds = now.second + (now.microsecond // 1000 / 1000.0 if sweeping else 0.0)
        return math.radians(seconds * 6.0 - 90.0)
    if hand_type is HandType.MINUTE:
        return math.radians(now.minute * 6 - 90)
    hour = now.hour + 12 if now.hour > 12 else now.hour
    return math.radians((hour + now.minute / 60.0) * 30.0 - 90.0)


@dataclass(frozen=True)
class ClockHand:
    """One hand of the clock."""

    hand_type: HandType = HandType.SECOND

    def angle(self, now: datetime | time, sweeping: bool = False) -> float:
        return hand_angle(self.hand_type, now, sweeping)

    def endpoints(
        self,
        center: Point,
        radius: float,
        now: datetime | time,
        sweeping: bool = False,
    ) -> tuple[Point, Point]:
        """Return the (inner, outer) ends of the hand."""
        angle = self.angle(now, sweeping)
        cx, cy = center
        reach = radius - _INSET[HandType(self.hand_type)]
        outer = (cx + reach * math.cos(angle), cy + reach * math.sin(angle))
        tail = radius / 6
        back = angle + math.pi
        inner = (cx + tail * math.cos(back), cy + tail * math.sin(back))
        return inner, outer

    def shape(
        self,
        center: Point,
        radius: float,
        now: datetime | time,
        sweeping: bool = False,
        rounded: bool = False,
    ) -> Line:
        inner, outer = self.endpoints(center, radius, now, sweeping)
        return Line(outer, inner, "gray", HAND_THICKNESS, rounded)