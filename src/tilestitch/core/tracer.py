"""Path tracing service tying extraction, stitching and rendering together.

PathTracer is the entry point a drawing or export front end talks to. It
holds the current grid and tile list, keeps the extracted segments and the
stitched paths between calls, and renders them as SVG markup or onto a
drawing surface.
"""

from tilestitch.core.extractor import SegmentExtractor
from tilestitch.core.renderer import PathRenderer
from tilestitch.core.stitcher import SegmentStitcher
from tilestitch.core.surface import DrawingSurface
from tilestitch.domain import TILE_DESIGN_SIZE, MosaicGrid, Segment, StitchedPath, TileDesign

DEFAULT_TOLERANCE = 5.0


class PathTracer:
    """Extracts, stitches and renders the paths of a mosaic.

    Segments and stitched paths are cached. The cache does not notice changes
    made inside the grid or tile objects: call ``clear_cache()`` after editing
    a tile in place. Assigning a new ``grid`` or ``tiles`` clears it.

    Example:
        tracer = PathTracer(grid, tiles, tile_size=100)
        markup = tracer.generate_vector_markup(tolerance=5)
    """

    def __init__(
        self,
        grid: MosaicGrid,
        tiles: list[TileDesign],
        tile_size: float = 100.0,
    ) -> None:
        """Initialize the tracer.

        Args:
            grid: Mosaic grid to trace
            tiles: Tile designs referenced by the grid
            tile_size: Size of one tile in the output
        """
        self._grid = grid
        self._tiles = tiles
        self.tile_size = tile_size
        self.extractor = SegmentExtractor()
        self.stitcher = SegmentStitcher()
        self._segments: list[Segment] | None = None

    @property
    def grid(self) -> MosaicGrid:
        return self._grid

    @grid.setter
    def grid(self, grid: MosaicGrid) -> None:
        self._grid = grid
        self.clear_cache()

    @property
    def tiles(self) -> list[TileDesign]:
        return self._tiles

    @tiles.setter
    def tiles(self, tiles: list[TileDesign]) -> None:
        self._tiles = tiles
        self.clear_cache()

    @property
    def scale(self) -> float:
        """Factor from design units to output units."""
        return self.tile_size / TILE_DESIGN_SIZE

    @property
    def segments(self) -> list[Segment]:
        """Segments from the last extraction (empty until extracted)."""
        return self._segments if self._segments is not None else []

    def clear_cache(self) -> None:
        """Drop extracted segments and stitched paths."""
        self._segments = None
        self.stitcher.clear()

    def extract_segments(self) -> list[Segment]:
        """Extract world-space segments from the current grid and tiles.

        Re-extracting replaces the held segment list, so the next stitch
        call recomputes.

        Returns:
            Segments in column-major cell order
        """
        segments = self.extractor.extract(self._grid, self._tiles)
        self._segments = segments
        return segments

    def stitch_segments(self, tolerance: float = DEFAULT_TOLERANCE) -> list[StitchedPath]:
        """Stitch the current segments, extracting them first if needed.

        Returns the cached list when called again with the same tolerance.

        Args:
            tolerance: Maximum endpoint gap in design units

        Returns:
            Stitched paths, thickest combined stroke first
        """
        segments = self._segments
        if segments is None:
            segments = self.extract_segments()
        return self.stitcher.stitch(segments, tolerance)

    def generate_vector_markup(self, tolerance: float = DEFAULT_TOLERANCE) -> str:
        """Render the stitched paths as SVG elements (no document wrapper).

        Args:
            tolerance: Maximum endpoint gap in design units

        Returns:
            Markup with background strokes first, then foreground strokes
        """
        renderer = PathRenderer(self.scale)
        return renderer.to_markup(renderer.render(self.stitch_segments(tolerance)))

    def render_to_surface(
        self, surface: DrawingSurface, tolerance: float = DEFAULT_TOLERANCE
    ) -> None:
        """Draw the stitched paths onto a drawing surface.

        Args:
            surface: Target surface
            tolerance: Maximum endpoint gap in design units
        """
        renderer = PathRenderer(self.scale)
        renderer.draw(surface, renderer.render(self.stitch_segments(tolerance)))
