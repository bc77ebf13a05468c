# gfxhelper/vector.py
"""
Petit type vecteur 2D immuable et utilitaires d'angle.
"""

import math
from dataclasses import dataclass


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class Vec2:
    """An immutable 2-dimensional vector (or point) in pixels."""

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"({_fmt(self.x)}, {_fmt(self.y)})"

    def add(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def negate(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def normalize(self) -> "Vec2":
        """Return the unit vector pointing the same way.

        The zero vector has no direction: its normalized form is
        ``Vec2(nan, nan)``, exactly like an unguarded 0/0 division. No
        exception is raised.
        """
        mag = self.magnitude()
        if mag == 0:
            return Vec2(math.nan, math.nan)
        return Vec2(self.x / mag, self.y / mag)

    def scale(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle to the positive x-axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    __add__ = add
    __neg__ = negate

    def __sub__(self, other: "Vec2") -> "Vec2":
        return self.add(other.negate())

    def __mul__(self, scalar: float) -> "Vec2":
        return self.scale(scalar)

    __rmul__ = __mul__


def offset_by_angle(point: Vec2, theta: float, r: float) -> Vec2:
    """Return the point ``r`` pixels away from ``point`` at angle ``theta`` (radians)."""
    return Vec2(point.x + r * math.cos(theta), point.y + r * math.sin(theta))


def offset_by_angle_xy(x: float, y: float, theta: float, r: float) -> Vec2:
    """Same as :func:`offset_by_angle` with explicit coordinates."""
    return Vec2(x + r * math.cos(theta), y + r * math.sin(theta))
