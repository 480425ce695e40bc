"""Tile design representation and the built-in tile set.

This module defines the tile domain model: a square design unit, 600 units on
a side, holding point and curve primitives together with the colors and
weights they are drawn with.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from tilestitch.domain.point import Point
from tilestitch.domain.primitive import (
    CubicCurve,
    DotPrimitive,
    Primitive,
    QuadCurve,
    points_from_dicts,
)
from tilestitch.domain.segment import StyleKey

# Side length of the tile design space
TILE_DESIGN_SIZE = 600.0
TILE_CENTER = Point(TILE_DESIGN_SIZE / 2, TILE_DESIGN_SIZE / 2)


@dataclass
class TileDesign:
    """A named tile design with its primitives and style.

    Attributes:
        name: Display name of the tile
        points: Dots, drawn as filled discs
        quads: Quadratic Bezier curves
        beziers: Cubic Bezier curves
        background_color: Fill of the tile square
        primary_color: Foreground stroke color
        stroke_weight: Foreground stroke weight
        secondary_color: Background stroke color
        secondary_stroke_width: Extra width of the background stroke
        layered_rendering: Draw secondary+primary per primitive instead of all
            secondaries first (only affects tile-by-tile output)
        probability: Weight used when tiles are picked by probability
    """

    name: str = "Tile"
    points: list[DotPrimitive] = field(default_factory=list)
    quads: list[QuadCurve] = field(default_factory=list)
    beziers: list[CubicCurve] = field(default_factory=list)
    background_color: str = "#FFFFFF"
    primary_color: str = "#2E86C1"
    stroke_weight: float = 5.0
    secondary_color: str = "#E74C3C"
    secondary_stroke_width: float = 10.0
    layered_rendering: bool = False
    probability: float = 1.0

    @property
    def style_key(self) -> StyleKey:
        """Get the stitching style of this tile's strokes."""
        return StyleKey(
            primary_color=self.primary_color,
            primary_weight=self.stroke_weight,
            secondary_color=self.secondary_color,
            secondary_width=self.secondary_stroke_width,
        )

    def primitives(self) -> Iterator[Primitive]:
        """Iterate all primitives: points, then quads, then beziers."""
        yield from self.points
        yield from self.quads
        yield from self.beziers

    def is_empty(self) -> bool:
        """Check if the tile has no primitives."""
        return not (self.points or self.quads or self.beziers)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the tile
        """
        return {
            "name": self.name,
            "shapes": {
                "points": [p.points[0].to_dict() for p in self.points if p.points],
                "quads": [[pt.to_dict() for pt in q.points] for q in self.quads],
                "beziers": [[pt.to_dict() for pt in b.points] for b in self.beziers],
            },
            "backgroundColor": self.background_color,
            "primaryColor": self.primary_color,
            "strokeWeight": self.stroke_weight,
            "secondaryColor": self.secondary_color,
            "secondaryStrokeWidth": self.secondary_stroke_width,
            "layeredRendering": self.layered_rendering,
            "probability": self.probability,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TileDesign":
        """Deserialize from dictionary.

        Missing fields fall back to the tile defaults.

        Args:
            data: Dictionary representation of a tile

        Returns:
            TileDesign instance
        """
        shapes = data.get("shapes") or {}
        defaults = cls()
        return cls(
            name=data.get("name") or defaults.name,
            points=[DotPrimitive((Point.from_dict(p),)) for p in shapes.get("points", [])],
            quads=[QuadCurve(points_from_dicts(q)) for q in shapes.get("quads", [])],
            beziers=[CubicCurve(points_from_dicts(b)) for b in shapes.get("beziers", [])],
            background_color=data.get("backgroundColor") or defaults.background_color,
            primary_color=data.get("primaryColor") or defaults.primary_color,
            stroke_weight=data.get("strokeWeight", defaults.stroke_weight),
            secondary_color=data.get("secondaryColor") or defaults.secondary_color,
            secondary_stroke_width=data.get(
                "secondaryStrokeWidth", defaults.secondary_stroke_width
            ),
            layered_rendering=bool(data.get("layeredRendering", False)),
            probability=data.get("probability", defaults.probability),
        )


def _quad(*coords: tuple[float, float]) -> QuadCurve:
    return QuadCurve(tuple(Point(float(x), float(y)) for x, y in coords))


# "Teal & Coral" preset shared by the built-in tiles
_PRESET = {
    "background_color": "#FEF3C7",
    "primary_color": "#14B8A6",
    "stroke_weight": 50.0,
    "secondary_color": "#F97316",
    "secondary_stroke_width": 30.0,
}


def classic_tile() -> TileDesign:
    """Create the classic Truchet tile.

    Two quarter arcs: left-middle to top-middle and bottom-middle to
    right-middle, both bending through the tile centre.
    """
    return TileDesign(
        name="Classic",
        quads=[
            _quad((0, 300), (300, 300), (300, 0)),
            _quad((300, 600), (300, 300), (600, 300)),
        ],
        **_PRESET,
    )


def cross_tile() -> TileDesign:
    """Create the cross tile: four quarter arcs joining each pair of adjacent edge midpoints."""
    return TileDesign(
        name="Cross",
        quads=[
            _quad((300, 0), (300, 300), (600, 300)),
            _quad((600, 300), (300, 300), (300, 600)),
            _quad((300, 600), (300, 300), (0, 300)),
            _quad((0, 300), (300, 300), (300, 0)),
        ],
        **_PRESET,
    )


def default_tiles() -> list[TileDesign]:
    """Get the built-in tile set."""
    return [classic_tile(), cross_tile()]
