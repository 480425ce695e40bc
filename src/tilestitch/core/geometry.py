"""Geometric operations for placing tiles in the mosaic.

This module provides the small set of pure helpers the pipeline needs:
- Squared distance between points (stitching compares squared distances)
- The affine transform that carries a tile into its grid cell
- Point transformation through that transform

Cell transforms are built with fontTools' Transform, which snaps the sine
and cosine of quarter turns to exact 0/1 values so rotated tile edges land
on exact coordinates.
"""

import math

from fontTools.misc.transform import Transform

from tilestitch.domain import TILE_CENTER, TILE_DESIGN_SIZE, Point


def squared_distance(a: Point, b: Point) -> float:
    """Calculate squared Euclidean distance between two points.

    Examples:
        >>> squared_distance(Point(0.0, 0.0), Point(3.0, 4.0))
        25.0
    """
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def cell_transform(col: int, row: int, rotation: float) -> Transform:
    """Build the tile-to-world transform of a grid cell.

    Points are moved so the tile centre is the origin, rotated by
    ``rotation`` degrees (x' = x*cos - y*sin, y' = x*sin + y*cos), moved
    back, and finally offset by the cell position.

    Args:
        col: Column of the cell
        row: Row of the cell
        rotation: Rotation in degrees

    Returns:
        Transform mapping tile design space to world space
    """
    offset_x = col * TILE_DESIGN_SIZE
    offset_y = row * TILE_DESIGN_SIZE
    return (
        Transform()
        .translate(TILE_CENTER.x + offset_x, TILE_CENTER.y + offset_y)
        .rotate(math.radians(rotation))
        .translate(-TILE_CENTER.x, -TILE_CENTER.y)
    )


def transform_point(transform: Transform, point: Point) -> Point:
    """Apply an affine transform to a point."""
    x, y = transform.transformPoint((point.x, point.y))
    return Point(float(x), float(y))
