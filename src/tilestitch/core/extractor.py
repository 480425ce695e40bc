"""Segment extraction from a mosaic grid.

Walks the grid column by column, places every primitive of each cell's tile
into world space, and emits one Segment per primitive tagged with the tile's
style and the cell it came from.

Bad input is skipped rather than raised: cells without a valid tile (for
example after a tile was deleted and before the mosaic is regenerated) and
primitives with the wrong number of points are left out, and the rest of the
grid is still extracted.
"""

import logging

from tilestitch.core.geometry import cell_transform, transform_point
from tilestitch.domain import MosaicGrid, Segment, TileDesign
from tilestitch.exceptions import MalformedPrimitiveError

logger = logging.getLogger(__name__)


class SegmentExtractor:
    """Turns a mosaic grid into world-space segments.

    Output order is column-major (all rows of column 0, then column 1, ...),
    and within a cell follows the tile's primitive order, so the same grid and
    tiles always produce the same list.

    Example:
        extractor = SegmentExtractor()
        segments = extractor.extract(grid, tiles)
    """

    def __init__(self) -> None:
        self.skipped_cells = 0
        self.skipped_primitives = 0

    def extract(self, grid: MosaicGrid, tiles: list[TileDesign]) -> list[Segment]:
        """Extract every primitive of every cell as a world-space segment.

        Args:
            grid: Mosaic grid to walk
            tiles: Tile designs referenced by the grid cells

        Returns:
            List of segments in column-major cell order
        """
        self.skipped_cells = 0
        self.skipped_primitives = 0
        segments: list[Segment] = []

        for col, row, cell in grid.iter_cells():
            if cell is None or not 0 <= cell.tile_index < len(tiles):
                self.skipped_cells += 1
                logger.debug(
                    "Skipping cell (%d, %d): %s",
                    col,
                    row,
                    "undefined" if cell is None else f"stale tile index {cell.tile_index}",
                )
                continue

            tile = tiles[cell.tile_index]
            style = tile.style_key
            transform = cell_transform(col, row, cell.rotation)

            for primitive in tile.primitives():
                try:
                    local_points = primitive.segment_points()
                except MalformedPrimitiveError as e:
                    self.skipped_primitives += 1
                    logger.debug("Skipping primitive in '%s' at (%d, %d): %s", tile.name, col, row, e)
                    continue

                segments.append(
                    Segment(
                        kind=primitive.segment_kind,
                        points=tuple(transform_point(transform, p) for p in local_points),
                        style=style,
                        origin=(col, row),
                    )
                )

        logger.debug(
            "Extracted %d segments (%d cells skipped, %d primitives skipped)",
            len(segments),
            self.skipped_cells,
            self.skipped_primitives,
        )
        return segments


def extract_segments(grid: MosaicGrid, tiles: list[TileDesign]) -> list[Segment]:
    """Extract world-space segments from a grid (see SegmentExtractor.extract)."""
    return SegmentExtractor().extract(grid, tiles)
