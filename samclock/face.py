"""The whole clock face: dial, hands and their options."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time

from samclock.dial import Circle, ClockDial, Line, Point
from samclock.hands import ClockHand, HandType
from samclock.settings import ClockSettings


@dataclass
class ClockFace:
    """A square clock of side ``width`` and everything drawn on it."""

    width: int = 400
    margin: float = 1
    has_sec_hand: bool = True
    has_dial: bool = True
    has_sweeping_second_hand: bool = False
    has_rounded_hand_edges: bool = False
    dial: ClockDial = field(default_factory=ClockDial)
    hour_hand: ClockHand = field(default_factory=lambda: ClockHand(HandType.HOUR))
    minute_hand: ClockHand = field(default_factory=lambda: ClockHand(HandType.MINUTE))
    second_hand: ClockHand = field(default_factory=lambda: ClockHand(HandType.SECOND))

    def center(self) -> Point:
        half = self.width / 2
        return (half, half)

    def radius(self) -> float:
        return self.width / 2 - self.margin

    def shapes(self, now: datetime | time | None = None) -> list[Line | Circle]:
        """Return every shape to draw, back to front, for the given time."""
        if now is None:
            now = datetime.now()
        center, radius = self.center(), self.radius()
        result: list[Line | Circle] = []
        if self.has_dial:
            result.extend(self.dial.shapes(center, radius))
        hands = [self.hour_hand, self.minute_hand]
        if self.has_sec_hand:
            hands.append(self.second_hand)
        result.extend(
            hand.shape(
                center,
                radius,
                now,
                self.has_sweeping_second_hand,
                self.has_rounded_hand_edges,
            )
            for hand in hands
        )
        return result

    @classmethod
    def from_settings(cls, settings: ClockSettings) -> ClockFace:
        dial = ClockDial(
            has_minute_marks=settings.has_minute_marks,
            has_five_minute_marks=settings.has_five_minute_marks,
            has_circle=settings.has_circle,
            has_points=settings.has_points,
        )
        return cls(
            width=settings.size[0],
            has_sec_hand=settings.has_sec_hand,
            has_sweeping_second_hand=settings.has_sweeping_second_hand,
            has_rounded_hand_edges=settings.has_rounded_hand_edges,
            dial=dial,
        )

    def to_settings(self, position: tuple[int, int]) -> ClockSettings:
        return ClockSettings(
            position=(position[0], position[1]),
            size=(self.width, self.width),
            has_sec_hand=self.has_sec_hand,
            has_circle=self.dial.has_circle,
            has_five_minute_marks=self.dial.has_five_minute_marks,
            has_minute_marks=self.dial.has_minute_marks,
            has_points=self.dial.has_points,
            has_sweeping_second_hand=self.has_sweeping_second_hand,
            has_rounded_hand_edges=self.has_rounded_hand_edges,
        )