"""Geometry, colours and screen definitions shared across the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

WINDOW_WIDTH = 1500
WINDOW_HEIGHT = 900


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Return a unit vector in the same direction, or self if zero length."""
        magnitude = self.length()
        if magnitude == 0:
            return self
        return Vec2(self.x / magnitude, self.y / magnitude)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner and size."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """True when the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains(self, point: Vec2) -> bool:
        """True when the point lies inside; left and top edges are inclusive."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


class Color(NamedTuple):
    """An RGBA colour usable wherever pygame expects a colour tuple."""

    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.r, self.g, self.b, alpha)


@dataclass(frozen=True)
class Screen:
    """Size of the playing area."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT

    @property
    def corner(self) -> Vec2:
        """The bottom-right corner, used as a 'no target' marker."""
        return Vec2(float(self.width), float(self.height))


GREY = Color(29, 29, 27)
GREEN = Color(57, 255, 20)
WHITE = Color(255, 255, 255)
RED = Color(230, 41, 55)
YELLOW = Color(253, 249, 0)


def point_in_circle(point: Vec2, center: Vec2, radius: float) -> bool:
    """True when the point lies inside or on the circle."""
    return (point - center).length() <= radius


def clamp(value, low, high):
    """Limit value to the range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value