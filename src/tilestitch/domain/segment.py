"""Segments extracted from a mosaic and the paths stitched from them.

A Segment is one tile primitive placed in world space: rotated with its cell,
offset by the cell position, and tagged with the style it is drawn in and the
cell it came from. A StitchedPath is a chain of one or more segments of the
same style whose endpoints meet.
"""

from dataclasses import dataclass, field
from enum import Enum

from tilestitch.domain.point import Point

# (col, row) of the grid cell a segment was extracted from
CellRef = tuple[int, int]


class SegmentKind(Enum):
    """Kind of an extracted segment or stitched path.

    - POINT: A single point, drawn as a disc
    - BEZIER: One or more chained cubic Bezier arcs (4 + 3k points)
    """

    POINT = "point"
    BEZIER = "bezier"


@dataclass(frozen=True, slots=True)
class StyleKey:
    """Visual style a segment is drawn with.

    Segments only stitch together when their style keys are equal, so a
    stitched path is uniform in color and weight along its whole length.

    Attributes:
        primary_color: Foreground stroke color (e.g. "#14B8A6")
        primary_weight: Foreground stroke weight in design units
        secondary_color: Background stroke color
        secondary_width: Extra width of the background stroke around the primary
    """

    primary_color: str
    primary_weight: float
    secondary_color: str
    secondary_width: float

    @property
    def secondary_total_weight(self) -> float:
        """Full width of the background stroke."""
        return self.primary_weight + self.secondary_width


@dataclass(frozen=True, slots=True)
class Segment:
    """A world-space primitive extracted from one grid cell.

    Attributes:
        kind: POINT (one point) or BEZIER (four control points)
        points: World-space points
        style: Style the segment is drawn with
        origin: (col, row) of the cell the segment came from
    """

    kind: SegmentKind
    points: tuple[Point, ...]
    style: StyleKey
    origin: CellRef

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]


@dataclass
class StitchedPath:
    """A continuous chain of same-style segments.

    Bezier paths hold 4 + 3k points: the first cubic arc followed by k arcs
    that each reuse the previous end point as their start.

    Attributes:
        kind: POINT or BEZIER
        points: Ordered points along the path
        style: Shared style of every segment in the path
        first_origin: Cell of the segment at the start of the path
        last_origin: Cell of the segment at the end of the path
    """

    kind: SegmentKind
    points: list[Point]
    style: StyleKey
    first_origin: CellRef
    last_origin: CellRef
    segment_count: int = field(default=1)

    @classmethod
    def from_segment(cls, segment: Segment) -> "StitchedPath":
        """Start a new path from a single segment."""
        return cls(
            kind=segment.kind,
            points=list(segment.points),
            style=segment.style,
            first_origin=segment.origin,
            last_origin=segment.origin,
        )

    @property
    def primary_weight(self) -> float:
        return self.style.primary_weight

    @property
    def secondary_width(self) -> float:
        return self.style.secondary_width

    @property
    def secondary_total_weight(self) -> float:
        return self.style.secondary_total_weight

    @property
    def is_closed(self) -> bool:
        """Check if the path ends exactly where it starts.

        Only meaningful for paths made of more than one point; markup
        generation draws closed and open paths the same way.
        """
        return len(self.points) > 1 and self.points[0] == self.points[-1]
