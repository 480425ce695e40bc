"""Geometric primitives a tile design is built from.

This module defines the fundamental geometric types of a tile:
- DotPrimitive: A single point, drawn as a filled disc
- QuadCurve: A quadratic Bezier curve (start, control, end)
- CubicCurve: A cubic Bezier curve (start, control1, control2, end)

Every primitive knows which segment kind it becomes and produces the points
of that segment, so downstream code never branches on primitive names.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from tilestitch.domain.point import Point
from tilestitch.domain.segment import SegmentKind
from tilestitch.exceptions import MalformedPrimitiveError


class PrimitiveKind(Enum):
    """Kind of a tile primitive."""

    POINT = "point"
    QUAD = "quad"
    CUBIC = "bezier"


def _checked(kind: PrimitiveKind, points: tuple[Point, ...], expected: int) -> tuple[Point, ...]:
    if len(points) != expected:
        raise MalformedPrimitiveError(kind.value, expected, len(points))
    return points


@dataclass(frozen=True, slots=True)
class DotPrimitive:
    """A single point, rendered as a filled disc."""

    points: tuple[Point, ...]

    kind = PrimitiveKind.POINT
    segment_kind = SegmentKind.POINT

    def segment_points(self) -> tuple[Point, ...]:
        """Get the single point of this dot.

        Raises:
            MalformedPrimitiveError: If the dot does not hold exactly one point
        """
        return _checked(self.kind, self.points, 1)


@dataclass(frozen=True, slots=True)
class QuadCurve:
    """A quadratic Bezier curve: start, control, end."""

    points: tuple[Point, ...]

    kind = PrimitiveKind.QUAD
    segment_kind = SegmentKind.BEZIER

    def to_cubic(self) -> tuple[Point, Point, Point, Point]:
        """Elevate the curve to the equivalent cubic Bezier.

        c1 = p0 + 2/3 * (p1 - p0)
        c2 = p2 + 2/3 * (p1 - p2)

        Returns:
            The four cubic control points (start, c1, c2, end)

        Raises:
            MalformedPrimitiveError: If the curve does not hold exactly three points
        """
        p0, p1, p2 = _checked(self.kind, self.points, 3)
        c1 = Point(p0.x + (2 / 3) * (p1.x - p0.x), p0.y + (2 / 3) * (p1.y - p0.y))
        c2 = Point(p2.x + (2 / 3) * (p1.x - p2.x), p2.y + (2 / 3) * (p1.y - p2.y))
        return (p0, c1, c2, p2)

    def segment_points(self) -> tuple[Point, ...]:
        """Get the cubic control points this curve is emitted as."""
        return self.to_cubic()


@dataclass(frozen=True, slots=True)
class CubicCurve:
    """A cubic Bezier curve: start, control1, control2, end."""

    points: tuple[Point, ...]

    kind = PrimitiveKind.CUBIC
    segment_kind = SegmentKind.BEZIER

    def segment_points(self) -> tuple[Point, ...]:
        """Get the four control points.

        Raises:
            MalformedPrimitiveError: If the curve does not hold exactly four points
        """
        return _checked(self.kind, self.points, 4)


Primitive = DotPrimitive | QuadCurve | CubicCurve


def points_from_dicts(data: list[dict[str, Any]]) -> tuple[Point, ...]:
    """Deserialize a list of point dictionaries."""
    return tuple(Point.from_dict(p) for p in data)
