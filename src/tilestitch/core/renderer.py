"""Rendering of stitched paths as SVG markup or surface draw calls.

Paths are drawn in two passes. The background pass strokes every path that
has a secondary width with the secondary color at the combined width; the
foreground pass then strokes every path with the primary color at the primary
weight, so every background lies beneath every foreground stroke and the
outline runs unbroken across tile seams. Point paths are drawn as discs
whose diameter is the stroke width.

A Bezier path with 4 + 3k points is drawn as one move followed by 1 + k
cubic arcs. A Bezier path with too few points for a single arc is drawn as a
polyline through the points it has.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from tilestitch.core.surface import DrawingSurface
from tilestitch.domain import Point, SegmentKind, StitchedPath
from tilestitch.io.markup import escape_attr, format_number


@dataclass(frozen=True, slots=True)
class DrawOp:
    """One drawing operation in output space.

    Attributes:
        kind: POINT draws a disc, BEZIER strokes a path
        points: Output-space points
        color: Stroke color, or fill color for discs
        width: Stroke width, or disc diameter
    """

    kind: SegmentKind
    points: tuple[Point, ...]
    color: str
    width: float

    @property
    def is_disc(self) -> bool:
        return self.kind == SegmentKind.POINT


@dataclass
class RenderPasses:
    """The two ordered drawing passes of a render.

    Attributes:
        background: Secondary strokes, drawn first
        foreground: Primary strokes, drawn on top
    """

    background: list[DrawOp] = field(default_factory=list)
    foreground: list[DrawOp] = field(default_factory=list)

    def ops(self) -> Iterator[DrawOp]:
        """Iterate all operations in drawing order."""
        yield from self.background
        yield from self.foreground

    def __len__(self) -> int:
        return len(self.background) + len(self.foreground)


def path_commands(kind: SegmentKind, points: tuple[Point, ...]) -> list[tuple[str, tuple[Point, ...]]]:
    """Break a path into move, line and cubic commands.

    Args:
        kind: Path kind; only BEZIER paths with at least 4 points get arcs
        points: Path points

    Returns:
        List of (command, points) with command one of "M", "L", "C"
    """
    if not points:
        return []

    commands: list[tuple[str, tuple[Point, ...]]] = [("M", (points[0],))]
    if kind == SegmentKind.BEZIER and len(points) >= 4:
        for i in range(1, len(points) - 2, 3):
            commands.append(("C", points[i : i + 3]))
    else:
        # Polyline fallback for paths too short to hold an arc
        commands.extend(("L", (p,)) for p in points[1:])
    return commands


def path_data(kind: SegmentKind, points: tuple[Point, ...]) -> str:
    """Build SVG path data, e.g. ``M 0 50 C 0 50 33.333 0 50 0``."""
    parts: list[str] = []
    for command, command_points in path_commands(kind, points):
        parts.append(command)
        for point in command_points:
            parts.append(format_number(point.x))
            parts.append(format_number(point.y))
    return " ".join(parts)


class PathRenderer:
    """Renders stitched paths in background and foreground passes.

    Example:
        renderer = PathRenderer(scale=100 / 600)
        passes = renderer.render(paths)
        markup = renderer.to_markup(passes)
    """

    def __init__(self, scale: float = 1.0) -> None:
        """Initialize renderer.

        Args:
            scale: Factor from design units to output units
        """
        self.scale = scale

    def _op(self, path: StitchedPath, color: str, width: float) -> DrawOp:
        return DrawOp(
            kind=path.kind,
            points=tuple(Point(p.x * self.scale, p.y * self.scale) for p in path.points),
            color=color,
            width=width * self.scale,
        )

    def render(self, paths: list[StitchedPath]) -> RenderPasses:
        """Build the two drawing passes for a list of paths.

        Args:
            paths: Stitched paths in drawing order

        Returns:
            RenderPasses with background and foreground operations
        """
        passes = RenderPasses()
        drawable = [path for path in paths if path.points]

        for path in drawable:
            if path.secondary_width > 0:
                passes.background.append(
                    self._op(path, path.style.secondary_color, path.secondary_total_weight)
                )

        for path in drawable:
            passes.foreground.append(
                self._op(path, path.style.primary_color, path.primary_weight)
            )

        return passes

    def to_markup(self, passes: RenderPasses) -> str:
        """Convert drawing passes to SVG elements (no document wrapper).

        Returns:
            One ``<path>`` or ``<circle>`` element per line
        """
        lines: list[str] = []
        for op in passes.ops():
            color = escape_attr(op.color)
            if op.is_disc:
                center = op.points[0]
                lines.append(
                    f'    <circle cx="{format_number(center.x)}" cy="{format_number(center.y)}" '
                    f'r="{format_number(op.width / 2)}" fill="{color}"/>\n'
                )
            else:
                lines.append(
                    f'    <path d="{path_data(op.kind, op.points)}" stroke="{color}" '
                    f'stroke-width="{format_number(op.width)}" stroke-linecap="round" '
                    f'stroke-linejoin="round" fill="none"/>\n'
                )
        return "".join(lines)

    def draw(self, surface: DrawingSurface, passes: RenderPasses) -> None:
        """Replay drawing passes as immediate-mode calls on a surface."""
        surface.push()
        for op in passes.ops():
            if op.is_disc:
                center = op.points[0]
                surface.set_fill(op.color)
                surface.circle(center.x, center.y, op.width)
                continue

            surface.set_stroke(op.color, op.width)
            for command, command_points in path_commands(op.kind, op.points):
                if command == "M":
                    surface.begin_path(command_points[0].x, command_points[0].y)
                elif command == "L":
                    surface.line_to(command_points[0].x, command_points[0].y)
                else:
                    c1, c2, end = command_points
                    surface.curve_to(c1.x, c1.y, c2.x, c2.y, end.x, end.y)
            surface.end_path()
        surface.pop()
