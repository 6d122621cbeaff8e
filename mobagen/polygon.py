"""Simple polygons described by their points around the origin."""

from __future__ import annotations

from dataclasses import dataclass, field

from mobagen.point2d import Point2D
from mobagen.transform import Transform
from mobagen.vector2 import Vector2


@dataclass
class Polygon:
    """A closed outline; the last point connects back to the first."""

    points: list[Vector2] = field(default_factory=list)

    def drawable_points(self, transform: Transform) -> list[Vector2]:
        """Points after scaling, rotating and moving them by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle)
            + transform.position
            for p in self.points
        ]

    def edges(self, transform: Transform) -> list[tuple[Point2D, Point2D]]:
        """Integer line segments that outline the transformed polygon."""
        pixels = [Point2D(int(p.x), int(p.y)) for p in self.drawable_points(transform)]
        return list(zip(pixels, pixels[1:] + pixels[:1]))


def circle(sample: int) -> Polygon:
    """A regular polygon with ``sample`` points on the unit circle."""
    return Polygon([Vector2.up().rotate(360.0 * i / sample) for i in range(sample)])


def square() -> Polygon:
    """A unit square standing on its side."""
    return Polygon([Vector2.up().rotate(angle) for angle in (45, 135, 225, 315)])


def hexagon() -> Polygon:
    """A unit hexagon with a point facing up."""
    return Polygon([Vector2.up().rotate(angle) for angle in range(0, 360, 60)])