"""Immediate-mode drawing surface interface.

The renderer can draw stitched paths onto any object implementing
DrawingSurface, such as a canvas wrapper in a GUI application. Strokes are
expected to use round caps and joins.
"""

from typing import Any, Protocol


class DrawingSurface(Protocol):
    """A 2D drawing target with stroke, fill and path primitives."""

    def push(self) -> None:
        """Save the current drawing state."""
        ...

    def pop(self) -> None:
        """Restore the last saved drawing state."""
        ...

    def set_stroke(self, color: str, width: float) -> None:
        """Stroke subsequent paths with a round-capped line and no fill."""
        ...

    def set_fill(self, color: str) -> None:
        """Fill subsequent shapes with a solid color and no stroke."""
        ...

    def circle(self, x: float, y: float, diameter: float) -> None:
        """Draw a circle centred on (x, y)."""
        ...

    def begin_path(self, x: float, y: float) -> None:
        """Start a new path at (x, y)."""
        ...

    def line_to(self, x: float, y: float) -> None:
        """Add a straight line to (x, y)."""
        ...

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        """Add a cubic Bezier arc with controls (x1, y1), (x2, y2) ending at (x, y)."""
        ...

    def end_path(self) -> None:
        """Finish and draw the current path."""
        ...


class RecordingSurface:
    """DrawingSurface that records every call instead of drawing.

    Useful for inspecting what a render would draw, and for replaying a
    render onto another surface later.

    Example:
        surface = RecordingSurface()
        tracer.render_to_surface(surface)
        print(surface.calls[:3])
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def push(self) -> None:
        self._record("push")

    def pop(self) -> None:
        self._record("pop")

    def set_stroke(self, color: str, width: float) -> None:
        self._record("set_stroke", color, width)

    def set_fill(self, color: str) -> None:
        self._record("set_fill", color)

    def circle(self, x: float, y: float, diameter: float) -> None:
        self._record("circle", x, y, diameter)

    def begin_path(self, x: float, y: float) -> None:
        self._record("begin_path", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._record("curve_to", x1, y1, x2, y2, x, y)

    def end_path(self) -> None:
        self._record("end_path")

    def names(self) -> list[str]:
        """Get the recorded call names in order."""
        return [name for name, _ in self.calls]

    def replay(self, surface: DrawingSurface) -> None:
        """Replay the recorded calls onto another surface."""
        for name, args in self.calls:
            getattr(surface, name)(*args)
