"""Floating point two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from mobagen import rng

_DEG2RAD = (math.pi * 2) / 360
_EQUALITY_TOLERANCE = 1.0e-6

Number = Union[int, float]


@dataclass(frozen=True, eq=False)
class Vector2:
    """An immutable 2D vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, -1.0)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def identity(cls) -> Vector2:
        return cls(1.0, 1.0)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: Union[Vector2, Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() < _EQUALITY_TOLERANCE

    __hash__ = None  # approximate equality cannot be hashed consistently

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Vector2 index out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def rotate(self, degrees: float) -> Vector2:
        """Rotate by ``degrees`` (clockwise on a y-down screen)."""
        sin = math.sin(degrees * _DEG2RAD)
        cos = math.cos(degrees * _DEG2RAD)
        return Vector2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def rotate_towards(self, up: Vector2) -> Vector2:
        """Rotate by the angle that ``up`` makes with the up direction."""
        return self.rotate(up.angle_degree())

    def angle_degree(self) -> float:
        return self.angle_radian() * 180 / math.pi

    def angle_radian(self) -> float:
        return math.atan2(self.x, -self.y)

    @classmethod
    def random(cls, start: float, end: float) -> Vector2:
        """A vector whose components are drawn from ``[start, end]``."""
        return cls(rng.range_float(start, end), rng.range_float(start, end))

    @classmethod
    def from_radian(cls, radian: float) -> Vector2:
        return cls(math.cos(radian), math.sin(radian))

    @classmethod
    def from_degree(cls, degree: float) -> Vector2:
        return cls.from_radian(degree * (math.pi / 180))

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def distance(self, other: Vector2) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Vector2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays as it is."""
        magnitude = self.magnitude()
        if magnitude > 0.0:
            return self / magnitude
        return Vector2(self.x, self.y)