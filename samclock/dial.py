"""Geometry of the clock dial: minute marks, five-minute marks and the rim."""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class Line:
    """A straight stroke from ``start`` to ``end``."""

    start: Point
    end: Point
    color: str
    thickness: float
    rounded: bool = False


@dataclass(frozen=True)
class Circle:
    """A circle outline, optionally filled with its colour."""

    center: Point
    radius: float
    color: str
    thickness: float
    filled: bool = False


@dataclass
class ClockDial:
    """Options for the dial, and the shapes they produce."""

    has_minute_marks: bool = True
    has_five_minute_marks: bool = True
    has_circle: bool = True
    has_numbers: bool = True
    has_points: bool = False
    line_minute_length: float = 10
    line_five_minute_length: float = 20
    line_minute_thickness: float = 0.5
    line_five_minute_thickness: float = 2
    circle_thickness: float = 1
    points_minute_radius: float = 3
    points_five_minute_radius: float = 5

    def marks_start_end(
        self, center: Point, radius: float, line_length: float, angle: float
    ) -> tuple[Point, Point]:
        """Return the outer and inner ends of a mark at ``angle`` (radians)."""
        cx, cy = center
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        start = (cx + radius * cos_a, cy + radius * sin_a)
        inner = radius - line_length
        end = (cx + inner * cos_a, cy + inner * sin_a)
        return start, end

    def _mark(
        self,
        center: Point,
        radius: float,
        angle: float,
        length: float,
        thickness: float,
        point_radius: float,
        color: str,
        filled: bool,
    ) -> Line | Circle:
        start, end = self.marks_start_end(center, radius, length, angle)
        if self.has_points:
            return Circle(start, point_radius, color, thickness, filled)
        return Line(start, end, color, thickness)

    def shapes(self, center: Point, radius: float) -> list[Line | Circle]:
        """Return the shapes making up the dial for a clock of this size."""
        result: list[Line | Circle] = []
        if self.has_minute_marks or self.has_five_minute_marks:
            for degrees in range(0, 360, 6):
                angle = math.radians(degrees)
                if degrees % 30 == 0:
                    if self.has_five_minute_marks:
                        length = self.line_five_minute_length
                        thickness = self.line_five_minute_thickness
                    else:
                        length = self.line_minute_length
                        thickness = self.line_minute_thickness
                    result.append(
                        self._mark(
                            center,
                            radius,
                            angle,
                            length,
                            thickness,
                            self.points_five_minute_radius,
                            "gray",
                            False,
                        )
                    )
                elif self.has_minute_marks:
                    result.append(
                        self._mark(
                            center,
                            radius,
                            angle,
                            self.line_minute_length,
                            self.line_minute_thickness,
                            self.points_minute_radius,
                            "white",
                            True,
                        )
                    )
        if self.has_circle:
            result.append(Circle(center, radius, "gray", self.circle_thickness))
        return result