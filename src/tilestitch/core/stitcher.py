"""Segment stitching into continuous paths.

This module implements the core path compositing algorithm:
- Partition segments by style, so visually distinct strokes never merge
- Greedily grow each path from a seed segment by joining the best unused
  segment whose endpoint lies within tolerance of either path end
- Prefer joins that cross into a different grid cell over joins within the
  same cell, then prefer the shortest gap

Growing a path costs a scan of every unused segment in its style group per
join, so stitching is quadratic (cubic in the worst case) in the number of
segments sharing a style. Large grids with a single style are the slow case.

Key classes:
- SegmentStitcher: Stitches segments and caches the last result
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from tilestitch.core.geometry import squared_distance
from tilestitch.domain import Segment, SegmentKind, StitchedPath, StyleKey
from tilestitch.exceptions import InvalidToleranceError

logger = logging.getLogger(__name__)


class JoinAction(Enum):
    """How a candidate segment is attached to a growing path."""

    APPEND = auto()  # path end -> candidate start
    APPEND_REVERSED = auto()  # path end -> candidate end
    PREPEND = auto()  # path start -> candidate end
    PREPEND_REVERSED = auto()  # path start -> candidate start


@dataclass(frozen=True, slots=True)
class Join:
    """A qualifying connection between a path and an unused segment.

    Attributes:
        index: Index of the candidate within its style group
        action: Which ends are connected
        crosses_cell: True if the candidate comes from a different cell than
            the path end it attaches to
        distance_sq: Squared gap between the connected endpoints
    """

    index: int
    action: JoinAction
    crosses_cell: bool
    distance_sq: float

    @property
    def score(self) -> tuple[bool, float]:
        """Ranking key: any cross-cell join beats any same-cell join, then shorter gaps win."""
        return (self.crosses_cell, -self.distance_sq)


def find_best_join(
    path: StitchedPath, group: list[Segment], used: list[bool], tolerance_sq: float
) -> Join | None:
    """Find the best connection between a path and the unused segments of its group.

    Candidates are checked in group order and, per candidate, in the order
    append, append reversed, prepend, prepend reversed. A later connection
    only replaces the current best when it scores strictly higher.

    Args:
        path: Path being grown
        group: Segments sharing the path's style
        used: Flags marking segments already placed in a path
        tolerance_sq: Squared stitch tolerance

    Returns:
        Best qualifying join, or None if no endpoint is within tolerance
    """
    best: Join | None = None
    path_start = path.points[0]
    path_end = path.points[-1]

    for index, candidate in enumerate(group):
        if used[index]:
            continue

        connections = (
            (JoinAction.APPEND, path_end, candidate.start, path.last_origin),
            (JoinAction.APPEND_REVERSED, path_end, candidate.end, path.last_origin),
            (JoinAction.PREPEND, path_start, candidate.end, path.first_origin),
            (JoinAction.PREPEND_REVERSED, path_start, candidate.start, path.first_origin),
        )
        for action, path_point, candidate_point, path_origin in connections:
            distance_sq = squared_distance(path_point, candidate_point)
            if distance_sq > tolerance_sq:
                continue

            join = Join(
                index=index,
                action=action,
                crosses_cell=candidate.origin != path_origin,
                distance_sq=distance_sq,
            )
            if best is None or join.score > best.score:
                best = join

    return best


def apply_join(path: StitchedPath, segment: Segment, action: JoinAction) -> None:
    """Splice a segment onto a path end, dropping the shared endpoint.

    A path that is still a bare point takes on the kind of the first curve
    joined to it.
    """
    if path.kind == SegmentKind.POINT and segment.kind != SegmentKind.POINT:
        path.kind = segment.kind

    points = segment.points
    if action == JoinAction.APPEND:
        path.points.extend(points[1:])
        path.last_origin = segment.origin
    elif action == JoinAction.APPEND_REVERSED:
        path.points.extend(reversed(points[:-1]))
        path.last_origin = segment.origin
    elif action == JoinAction.PREPEND:
        path.points[:0] = points[:-1]
        path.first_origin = segment.origin
    else:
        path.points[:0] = reversed(points[1:])
        path.first_origin = segment.origin

    path.segment_count += 1


def _stitch_group(group: list[Segment], tolerance_sq: float) -> list[StitchedPath]:
    used = [False] * len(group)
    paths: list[StitchedPath] = []

    for index, segment in enumerate(group):
        if used[index]:
            continue

        used[index] = True
        path = StitchedPath.from_segment(segment)

        while True:
            join = find_best_join(path, group, used, tolerance_sq)
            if join is None:
                break
            used[join.index] = True
            apply_join(path, group[join.index], join.action)

        paths.append(path)

    return paths


def stitch_segments(segments: list[Segment], tolerance: float) -> list[StitchedPath]:
    """Stitch segments whose endpoints meet into continuous paths.

    Args:
        segments: Segments in extraction order
        tolerance: Maximum endpoint gap that still joins two segments

    Returns:
        Stitched paths, thickest combined stroke first

    Raises:
        InvalidToleranceError: If tolerance is negative
    """
    if tolerance < 0:
        raise InvalidToleranceError(tolerance)

    tolerance_sq = tolerance * tolerance

    groups: dict[StyleKey, list[Segment]] = {}
    for segment in segments:
        groups.setdefault(segment.style, []).append(segment)

    stitched: list[StitchedPath] = []
    for group in groups.values():
        stitched.extend(_stitch_group(group, tolerance_sq))

    # Stable sort keeps extraction order within equal weights
    stitched.sort(key=lambda p: p.secondary_total_weight, reverse=True)

    logger.debug(
        "Stitched %d segments into %d paths across %d styles (tolerance %s)",
        len(segments),
        len(stitched),
        len(groups),
        tolerance,
    )
    return stitched


class SegmentStitcher:
    """Stitches segments and caches the result.

    The cache holds one result keyed by the identity of the segment list and
    the tolerance. Stitching the same list object with the same tolerance
    returns the cached list itself; any other input recomputes. Call
    ``clear()`` whenever the grid or tiles the segments came from change.

    Example:
        stitcher = SegmentStitcher()
        paths = stitcher.stitch(segments, tolerance=5.0)
        assert stitcher.stitch(segments, tolerance=5.0) is paths
    """

    def __init__(self) -> None:
        self._segments: list[Segment] | None = None
        self._tolerance: float | None = None
        self._paths: list[StitchedPath] | None = None

    def stitch(self, segments: list[Segment], tolerance: float) -> list[StitchedPath]:
        """Stitch segments, reusing the cached result when inputs are unchanged.

        Args:
            segments: Segments in extraction order
            tolerance: Maximum endpoint gap that still joins two segments

        Returns:
            Stitched paths, thickest combined stroke first
        """
        if (
            self._paths is not None
            and self._segments is segments
            and self._tolerance == tolerance
        ):
            return self._paths

        paths = stitch_segments(segments, tolerance)
        self._segments = segments
        self._tolerance = tolerance
        self._paths = paths
        return paths

    def clear(self) -> None:
        """Drop the cached result."""
        self._segments = None
        self._tolerance = None
        self._paths = None

    @property
    def is_cached(self) -> bool:
        return self._paths is not None
