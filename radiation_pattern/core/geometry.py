"""
Planar geometry primitives used by the dose grid and the beam models.

Coordinates are in centimetres. ``Rect`` is described by its top-left and
bottom-right corners; ``Circle.contains`` excludes the boundary.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D coordinate (cm)."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Point:
        return Point(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Point:
        return self * (1 / s)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle spanning ``tl`` (top-left) to ``br`` (bottom-right)."""

    tl: Point
    br: Point

    @property
    def width(self) -> float:
        return self.br.x - self.tl.x

    @property
    def height(self) -> float:
        return self.br.y - self.tl.y

    @property
    def center(self) -> Point:
        """Geometric midpoint ``(tl + br) / 2``.

        The reference model computed ``(tl - br) / 2``, which is the negated
        half-extent rather than a centre. Only ``outer_circle`` and
        ``inner_circle`` read this value; the detector grid does not.
        """
        return (self.tl + self.br) / 2


@dataclass(frozen=True)
class Circle:
    """Circle with strict interior containment."""

    center: Point
    radius: float

    @classmethod
    def at(cls, x: float, y: float, radius: float) -> Circle:
        return cls(Point(x, y), radius)

    def contains(self, x, y):
        """Return True where ``dx² + dy² < r²``.

        Works on scalars and, element-wise, on numpy arrays.
        """
        dx = self.center.x - x
        dy = self.center.y - y
        return dx * dx + dy * dy < self.radius * self.radius

    def contains_point(self, p: Point) -> bool:
        return bool(self.contains(p.x, p.y))


def outer_square(circle: Circle) -> Rect:
    """Smallest axis-aligned square enclosing ``circle``."""
    r = Point(circle.radius, circle.radius)
    return Rect(circle.center - r, circle.center + r)


def inner_square(circle: Circle) -> Rect:
    """Square built from the half-diagonal ``sqrt(2) * r`` around the centre."""
    diag = math.sqrt(2) * circle.radius
    r = Point(diag, diag)
    return Rect(circle.center - r, circle.center + r)


def outer_circle(rect: Rect) -> Circle:
    """Circumscribed circle of ``rect``."""
    w2 = rect.width / 2
    h2 = rect.height / 2
    return Circle(rect.center, math.sqrt(w2 * w2 + h2 * h2))


def inner_circle(rect: Rect) -> Circle:
    """Largest circle centred in ``rect``."""
    w2 = rect.width / 2
    h2 = rect.height / 2
    return Circle(rect.center, min(w2, h2))

