"""Domain models for tilestitch.

This module contains the core domain models representing tile designs, the
mosaic grid, and the segments and paths derived from them. All models are
designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of any drawing target

Key classes:
- Point: A 2D point in design space
- DotPrimitive, QuadCurve, CubicCurve: Tile primitives
- TileDesign: A tile with its primitives and style
- GridCell, MosaicGrid: The mosaic arrangement
- Segment, StitchedPath, StyleKey: Extraction and stitching results
"""

from tilestitch.domain.grid import VALID_ROTATIONS, GridCell, MosaicGrid
from tilestitch.domain.point import Point
from tilestitch.domain.primitive import (
    CubicCurve,
    DotPrimitive,
    Primitive,
    PrimitiveKind,
    QuadCurve,
)
from tilestitch.domain.segment import CellRef, Segment, SegmentKind, StitchedPath, StyleKey
from tilestitch.domain.tile import (
    TILE_CENTER,
    TILE_DESIGN_SIZE,
    TileDesign,
    classic_tile,
    cross_tile,
    default_tiles,
)

__all__: list[str] = [
    # Constants
    "TILE_CENTER",
    "TILE_DESIGN_SIZE",
    "VALID_ROTATIONS",
    # Enums
    "PrimitiveKind",
    "SegmentKind",
    # Core types
    "CellRef",
    "CubicCurve",
    "DotPrimitive",
    "GridCell",
    "MosaicGrid",
    "Point",
    "Primitive",
    "QuadCurve",
    "Segment",
    "StitchedPath",
    "StyleKey",
    "TileDesign",
    # Built-in tiles
    "classic_tile",
    "cross_tile",
    "default_tiles",
]
