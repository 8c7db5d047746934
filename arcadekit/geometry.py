"""Vectors, rectangles, overlap tests and random helpers for the arcade framework."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

EPSILON = 1e-6
PI = 3.14159265358979


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class Vector2:
    """A 2D vector in screen coordinates, where y grows downwards."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector2:
        """Return a unit vector; vectors shorter than EPSILON are returned unchanged."""
        length = self.length()
        if length > EPSILON:
            return Vector2(self.x / length, self.y / length)
        return self

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def reflect(self, normal: Vector2) -> Vector2:
        """Reflect the direction of this vector about a surface normal."""
        unit_normal = normal.normalized()
        original = self.normalized()
        return original - unit_normal * 2 * self.dot(unit_normal)

    def signed_angle(self, other: Vector2) -> float:
        """Angle in radians from this vector to another, negative when turning the other way."""
        target = other.normalized()
        original = self.normalized()
        dot_value = original.dot(target)
        if abs(dot_value - 1.0) < EPSILON:
            return 0.0
        angle = math.acos(max(-1.0, min(1.0, dot_value)))
        sign = original.x * target.y - original.y * target.x
        return -angle if sign < 0 else angle

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0, 0)

    @staticmethod
    def up() -> Vector2:
        return Vector2(0, -1)

    @staticmethod
    def down() -> Vector2:
        return Vector2(0, 1)

    @staticmethod
    def right() -> Vector2:
        return Vector2(1, 0)

    @staticmethod
    def left() -> Vector2:
        return Vector2(-1, 0)


@dataclass(frozen=True)
class Rect:
    """An integer rectangle given by its edges."""

    left: int
    top: int
    right: int
    bottom: int


def make_rect(x: int, y: int, width: int, height: int) -> Rect:
    """Build a rectangle whose top-left corner is (x, y)."""
    return Rect(x, y, x + width, y + height)


@dataclass(frozen=True)
class CenterRect:
    """A rectangle described by its centre and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def to_rect(self) -> Rect:
        return make_rect(
            int(self.x - self.width / 2),
            int(self.y - self.height / 2),
            int(self.width),
            int(self.height),
        )

    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    @staticmethod
    def from_rect(rect: Rect) -> CenterRect:
        return CenterRect(
            float(_trunc_div(rect.left + rect.right, 2)),
            float(_trunc_div(rect.top + rect.bottom, 2)),
            float(rect.right - rect.left),
            float(rect.bottom - rect.top),
        )


def pt_in_rect(rect: CenterRect, pt: Vector2) -> bool:
    """True when the point lies inside the rectangle or on its border."""
    half_width = rect.width / 2
    half_height = rect.height / 2
    return (
        rect.x - half_width <= pt.x <= rect.x + half_width
        and rect.y - half_height <= pt.y <= rect.y + half_height
    )


def rect_in_rect(rect1: CenterRect, rect2: CenterRect) -> bool:
    """True when any corner of rect2, truncated to whole pixels, lies in rect1."""
    left = int(rect2.x - rect2.width / 2)
    right = int(rect2.x + rect2.width / 2)
    top = int(rect2.y - rect2.height / 2)
    bottom = int(rect2.y + rect2.height / 2)
    corners = (
        Vector2(left, top),
        Vector2(right, top),
        Vector2(left, bottom),
        Vector2(right, bottom),
    )
    return any(pt_in_rect(rect1, corner) for corner in corners)


def random_int(
    from_include: int, to_exclude: int, rng: random.Random | None = None
) -> int:
    """A random integer in [from_include, to_exclude)."""
    return (rng or random).randrange(from_include, to_exclude)


def random_float(
    from_include: float, to_exclude: float, rng: random.Random | None = None
) -> float:
    """A random float between the two bounds."""
    return from_include + (rng or random).random() * (to_exclude - from_include)


def deg_to_rad(deg: float) -> float:
    return 0.0174533 * deg


def rad_to_deg(rad: float) -> float:
    return 57.2958 * rad