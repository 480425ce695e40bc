"""Unit tests for segment stitching.

Tests cover:
- Joining in all four directions with shared-endpoint removal
- Cross-cell preference and nearest-gap tie-breaking
- Style isolation
- Point-to-curve type promotion
- Tolerance handling and result ordering
- Result caching in SegmentStitcher
"""

import pytest

from tilestitch.core.extractor import extract_segments
from tilestitch.core.generator import MosaicGenerator
from tilestitch.core.stitcher import (
    JoinAction,
    SegmentStitcher,
    apply_join,
    find_best_join,
    stitch_segments,
)
from tilestitch.domain import (
    GridCell,
    MosaicGrid,
    Point,
    Segment,
    SegmentKind,
    StitchedPath,
    StyleKey,
    classic_tile,
    default_tiles,
)
from tilestitch.exceptions import InvalidToleranceError

STYLE = StyleKey("#14B8A6", 50.0, "#F97316", 30.0)
OTHER_STYLE = StyleKey("#000000", 10.0, "#FFFFFF", 5.0)


def curve(
    start: tuple[float, float],
    end: tuple[float, float],
    origin: tuple[int, int] = (0, 0),
    style: StyleKey = STYLE,
) -> Segment:
    """Build a straight cubic segment from start to end."""
    (x0, y0), (x3, y3) = start, end
    points = (
        Point(x0, y0),
        Point(x0 + (x3 - x0) / 3, y0 + (y3 - y0) / 3),
        Point(x0 + 2 * (x3 - x0) / 3, y0 + 2 * (y3 - y0) / 3),
        Point(x3, y3),
    )
    return Segment(kind=SegmentKind.BEZIER, points=points, style=style, origin=origin)


def dot(at: tuple[float, float], origin: tuple[int, int] = (0, 0)) -> Segment:
    return Segment(kind=SegmentKind.POINT, points=(Point(*at),), style=STYLE, origin=origin)


class TestApplyJoin:
    """Tests for splicing a segment onto a path."""

    def test_append(self) -> None:
        path = StitchedPath.from_segment(curve((0, 0), (30, 0)))
        apply_join(path, curve((30, 0), (60, 0), origin=(1, 0)), JoinAction.APPEND)

        assert len(path.points) == 7
        assert path.points[0] == Point(0.0, 0.0)
        assert path.points[3] == Point(30.0, 0.0)
        assert path.points[-1] == Point(60.0, 0.0)
        assert path.first_origin == (0, 0)
        assert path.last_origin == (1, 0)
        assert path.segment_count == 2

    def test_append_reversed(self) -> None:
        path = StitchedPath.from_segment(curve((0, 0), (30, 0)))
        apply_join(path, curve((60, 0), (30, 0), origin=(1, 0)), JoinAction.APPEND_REVERSED)

        assert len(path.points) == 7
        assert path.points[-1] == Point(60.0, 0.0)
        assert path.points[4] == Point(40.0, 0.0)

    def test_prepend(self) -> None:
        path = StitchedPath.from_segment(curve((30, 0), (60, 0)))
        apply_join(path, curve((0, 0), (30, 0), origin=(0, 1)), JoinAction.PREPEND)

        assert len(path.points) == 7
        assert path.points[0] == Point(0.0, 0.0)
        assert path.points[3] == Point(30.0, 0.0)
        assert path.first_origin == (0, 1)
        assert path.last_origin == (0, 0)

    def test_prepend_reversed(self) -> None:
        path = StitchedPath.from_segment(curve((30, 0), (60, 0)))
        apply_join(path, curve((30, 0), (0, 0), origin=(0, 1)), JoinAction.PREPEND_REVERSED)

        assert len(path.points) == 7
        assert path.points[0] == Point(0.0, 0.0)
        assert path.points[1] == Point(10.0, 0.0)
        assert path.points[3] == Point(30.0, 0.0)

    def test_join_keeps_path_end_point(self) -> None:
        """The path's own endpoint survives a within-tolerance join."""
        path = StitchedPath.from_segment(curve((0, 0), (30, 0)))
        apply_join(path, curve((31, 0), (60, 0)), JoinAction.APPEND)
        assert path.points[3] == Point(30.0, 0.0)
        assert Point(31.0, 0.0) not in path.points

    def test_point_promoted_to_bezier(self) -> None:
        path = StitchedPath.from_segment(dot((0, 0)))
        apply_join(path, curve((0, 0), (30, 0)), JoinAction.APPEND)
        assert path.kind == SegmentKind.BEZIER
        assert len(path.points) == 4


class TestFindBestJoin:
    """Tests for join selection."""

    def test_no_join_outside_tolerance(self) -> None:
        path = StitchedPath.from_segment(curve((0, 0), (30, 0)))
        group = [curve((40, 0), (60, 0))]
        assert find_best_join(path, group, [False], tolerance_sq=25.0) is None

    def test_used_segments_ignored(self) -> None:
        path = StitchedPath.from_segment(curve((0, 0), (30, 0)))
        group = [curve((30, 0), (60, 0), origin=(1, 0))]
        assert find_best_join(path, group, [True], tolerance_sq=25.0) is None

    def test_cross_cell_beats_nearer_same_cell(self) -> None:
        path = StitchedPath.from_segment(curve((0, 0), (30, 0), origin=(0, 0)))
        group = [
            curve((31, 0), (60, 0), origin=(0, 0)),
            curve((34, 0), (60, 10), origin=(1, 0)),
        ]
        join = find_best_join(path, group, [False, False], tolerance_sq=25.0)

        assert join is not None
        assert join.index == 1
        assert join.crosses_cell
        assert join.distance_sq == 16.0

    def test_cross_cell_preference_with_huge_tolerance(self) -> None:
        """A cross-cell join wins however large the tolerance."""
        path = StitchedPath.from_segment(curve((0, 0), (30, 0), origin=(0, 0)))
        group = [
            curve((30, 0), (60, 0), origin=(0, 0)),
            curve((1530, 0), (1560, 0), origin=(2, 0)),
        ]
        join = find_best_join(path, group, [False, False], tolerance_sq=1600.0**2)

        assert join is not None
        assert join.index == 1

    def test_nearest_wins_within_category(self) -> None:
        path = StitchedPath.from_segment(curve((0, 0), (30, 0), origin=(0, 0)))
        group = [
            curve((33, 0), (60, 0), origin=(1, 0)),
            curve((31, 0), (60, 5), origin=(1, 0)),
        ]
        join = find_best_join(path, group, [False, False], tolerance_sq=25.0)
        assert join is not None
        assert join.index == 1

    def test_exact_tie_keeps_first_candidate(self) -> None:
        path = StitchedPath.from_segment(curve((0, 0), (30, 0), origin=(0, 0)))
        group = [
            curve((30, 0), (60, 0), origin=(1, 0)),
            curve((30, 0), (60, 9), origin=(1, 0)),
        ]
        join = find_best_join(path, group, [False, False], tolerance_sq=25.0)
        assert join is not None
        assert join.index == 0
        assert join.action == JoinAction.APPEND

    def test_prepend_compares_against_first_origin(self) -> None:
        """Prepending checks the origin of the path's first segment."""
        path = StitchedPath.from_segment(curve((0, 0), (30, 0), origin=(0, 0)))
        path.last_origin = (5, 5)
        group = [curve((-30, 0), (0, 0), origin=(0, 0))]
        join = find_best_join(path, group, [False], tolerance_sq=1.0)

        assert join is not None
        assert join.action == JoinAction.PREPEND
        assert not join.crosses_cell


class TestStitchSegments:
    """Tests for stitch_segments."""

    def test_empty_input(self) -> None:
        assert stitch_segments([], 5.0) == []

    def test_negative_tolerance(self) -> None:
        with pytest.raises(InvalidToleranceError):
            stitch_segments([curve((0, 0), (30, 0))], -1.0)

    def test_single_segment(self) -> None:
        paths = stitch_segments([curve((0, 0), (30, 0))], 5.0)
        assert len(paths) == 1
        assert paths[0].segment_count == 1

    def test_chain_grows_both_ways(self) -> None:
        segments = [
            curve((30, 0), (60, 0), origin=(1, 0)),
            curve((0, 0), (30, 0), origin=(0, 0)),
            curve((60, 0), (90, 0), origin=(2, 0)),
        ]
        paths = stitch_segments(segments, 0.0)

        assert len(paths) == 1
        assert paths[0].points[0] == Point(0.0, 0.0)
        assert paths[0].points[-1] == Point(90.0, 0.0)
        assert len(paths[0].points) == 10
        assert paths[0].first_origin == (0, 0)
        assert paths[0].last_origin == (2, 0)

    def test_cross_cell_preference(self) -> None:
        """A joins C (other cell, distance 4) rather than B (same cell, distance 1)."""
        a = curve((0, 0), (30, 0), origin=(0, 0))
        b = curve((31, 0), (60, 0), origin=(0, 0))
        c = curve((34, 0), (60, 30), origin=(1, 0))
        paths = stitch_segments([a, b, c], 5.0)

        first = paths[0]
        assert first.segment_count == 2
        assert first.points[-1] == Point(60.0, 30.0)
        assert first.last_origin == (1, 0)

    def test_style_isolation(self) -> None:
        segments = [
            curve((0, 0), (30, 0)),
            curve((30, 0), (60, 0), origin=(1, 0), style=OTHER_STYLE),
        ]
        paths = stitch_segments(segments, 5.0)

        assert len(paths) == 2
        for path in paths:
            assert path.segment_count == 1

    def test_touching_tiles_of_different_style_stay_apart(self) -> None:
        recolored = classic_tile()
        recolored.secondary_color = "#1E3A8A"
        grid = MosaicGrid.from_columns([[GridCell(0)], [GridCell(1)]])
        segments = extract_segments(grid, [classic_tile(), recolored])

        paths = stitch_segments(segments, 5.0)
        assert len(paths) == 4
        assert all(p.segment_count == 1 for p in paths)

    def test_style_isolation_on_generated_mosaic(self) -> None:
        tiles = default_tiles()
        tiles[1].primary_color = "#123456"
        grid = MosaicGenerator().generate(6, 6, tiles, seed=7)
        segments = extract_segments(grid, tiles)

        counts: dict[StyleKey, int] = {}
        for path in stitch_segments(segments, 50.0):
            counts[path.style] = counts.get(path.style, 0) + path.segment_count
        for style, count in counts.items():
            assert count == sum(1 for s in segments if s.style == style)

    def test_type_promotion(self) -> None:
        paths = stitch_segments([dot((0, 0)), curve((1, 0), (30, 0), origin=(1, 0))], 5.0)

        assert len(paths) == 1
        assert paths[0].kind == SegmentKind.BEZIER
        assert paths[0].points[0] == Point(0.0, 0.0)
        assert paths[0].segment_count == 2

    def test_lone_point_stays_point(self) -> None:
        paths = stitch_segments([dot((0, 0)), curve((100, 0), (130, 0))], 5.0)
        kinds = sorted(p.kind.value for p in paths)
        assert kinds == ["bezier", "point"]

    def test_tolerance_monotonicity(self) -> None:
        segments = [
            curve((0, 0), (30, 0), origin=(0, 0)),
            curve((32, 0), (60, 0), origin=(1, 0)),
            curve((70, 0), (100, 0), origin=(2, 0)),
        ]
        counts = [len(stitch_segments(segments, t)) for t in (0.0, 1.0, 5.0, 20.0)]
        assert counts == [3, 3, 2, 1]
        assert counts == sorted(counts, reverse=True)

    def test_tolerance_monotonicity_on_generated_mosaic(self) -> None:
        grid = MosaicGenerator().generate(5, 5, default_tiles(), seed=12345)
        segments = extract_segments(grid, default_tiles())
        counts = [len(stitch_segments(segments, t)) for t in (0.0, 1.0, 5.0, 100.0)]
        assert counts == sorted(counts, reverse=True)

    def test_every_segment_used_once(self) -> None:
        grid = MosaicGenerator().generate(4, 3, default_tiles(), seed=99)
        segments = extract_segments(grid, default_tiles())
        paths = stitch_segments(segments, 5.0)
        assert sum(p.segment_count for p in paths) == len(segments)

    def test_sorted_by_total_weight(self) -> None:
        thin = StyleKey("#000000", 5.0, "#FFFFFF", 0.0)
        segments = [
            curve((0, 0), (30, 0), style=thin),
            curve((100, 0), (130, 0)),
            curve((200, 0), (230, 0), style=thin),
        ]
        paths = stitch_segments(segments, 5.0)

        assert [p.secondary_total_weight for p in paths] == [80.0, 5.0, 5.0]
        # Equal weights keep extraction order
        assert paths[1].points[0] == Point(0.0, 0.0)
        assert paths[2].points[0] == Point(200.0, 0.0)

    def test_classic_2x2_round_trip(self) -> None:
        """Eight arcs of a 2x2 Classic mosaic stitch into four paths."""
        grid = MosaicGrid.from_columns(
            [[GridCell(0), GridCell(0)], [GridCell(0), GridCell(0)]]
        )
        segments = extract_segments(grid, [classic_tile()])
        paths = stitch_segments(segments, 5.0)

        assert len(segments) == 8
        assert len(paths) == 4
        assert sorted(p.segment_count for p in paths) == [1, 1, 3, 3]

        long_path = paths[1]
        assert long_path.points[0] == Point(0.0, 900.0)
        assert long_path.points[-1] == Point(900.0, 0.0)
        assert len(long_path.points) == 10

    def test_mixed_2x2_merges(self) -> None:
        grid = MosaicGrid.from_columns(
            [[GridCell(0), GridCell(1)], [GridCell(1), GridCell(0)]]
        )
        segments = extract_segments(grid, default_tiles())
        paths = stitch_segments(segments, 5.0)

        assert len(paths) < len(segments)
        assert sum(p.segment_count for p in paths) == len(segments)


class TestSegmentStitcher:
    """Tests for the caching stitcher."""

    def test_cached_result_identity(self) -> None:
        segments = [curve((0, 0), (30, 0)), curve((30, 0), (60, 0), origin=(1, 0))]
        stitcher = SegmentStitcher()

        first = stitcher.stitch(segments, 5.0)
        assert stitcher.is_cached
        assert stitcher.stitch(segments, 5.0) is first

    def test_new_tolerance_recomputes(self) -> None:
        segments = [curve((0, 0), (30, 0)), curve((33, 0), (60, 0), origin=(1, 0))]
        stitcher = SegmentStitcher()

        loose = stitcher.stitch(segments, 5.0)
        tight = stitcher.stitch(segments, 1.0)
        assert tight is not loose
        assert len(loose) == 1
        assert len(tight) == 2

    def test_equal_but_distinct_list_recomputes(self) -> None:
        segments = [curve((0, 0), (30, 0))]
        stitcher = SegmentStitcher()
        first = stitcher.stitch(segments, 5.0)
        assert stitcher.stitch(list(segments), 5.0) is not first

    def test_clear(self) -> None:
        segments = [curve((0, 0), (30, 0))]
        stitcher = SegmentStitcher()
        first = stitcher.stitch(segments, 5.0)
        stitcher.clear()

        assert not stitcher.is_cached
        assert stitcher.stitch(segments, 5.0) is not first
