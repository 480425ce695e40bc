"""SVG document writer for mosaic exports.

This module provides the SvgDocumentWriter class, which wraps stitched path
markup in a complete SVG document and also produces the plain tile-by-tile
export used when composite rendering is disabled or fails.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from tilestitch.domain import (
    TILE_DESIGN_SIZE,
    GridCell,
    MosaicGrid,
    Primitive,
    QuadCurve,
    TileDesign,
)
from tilestitch.exceptions import DocumentSaveError, MalformedPrimitiveError
from tilestitch.io.markup import escape_attr, format_number

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SvgDocumentWriter:
    """Builds and saves SVG documents for a mosaic.

    Example:
        writer = SvgDocumentWriter(grid, tiles, tile_size=100)
        content = writer.composite_document(tracer.generate_vector_markup())
        writer.save(Path("mosaic.svg"), content)
    """

    def __init__(self, grid: MosaicGrid, tiles: list[TileDesign], tile_size: float = 100.0) -> None:
        """Initialize the document writer.

        Args:
            grid: Mosaic grid being exported
            tiles: Tile designs referenced by the grid
            tile_size: Output side length of one cell
        """
        self._grid = grid
        self._tiles = tiles
        self._tile_size = tile_size
        self._scale = tile_size / TILE_DESIGN_SIZE

    @property
    def width(self) -> float:
        return self._grid.cols * self._tile_size

    @property
    def height(self) -> float:
        return self._grid.rows * self._tile_size

    def build(self, body: str) -> str:
        """Wrap element markup in an SVG document.

        Args:
            body: Newline-terminated element markup

        Returns:
            Complete SVG document text
        """
        width = format_number(self.width)
        height = format_number(self.height)
        return (
            f"{XML_DECLARATION}\n"
            f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">\n'
            f"{body}"
            "</svg>\n"
        )

    def _valid_cells(self) -> Iterator[tuple[int, int, GridCell, TileDesign]]:
        for col, row, cell in self._grid.iter_cells():
            if cell is None or not 0 <= cell.tile_index < len(self._tiles):
                continue
            yield col, row, cell, self._tiles[cell.tile_index]

    def _background_rects(self) -> list[str]:
        size = format_number(self._tile_size)
        return [
            f'    <rect x="{format_number(col * self._tile_size)}" '
            f'y="{format_number(row * self._tile_size)}" width="{size}" height="{size}" '
            f'fill="{escape_attr(tile.background_color)}"/>\n'
            for col, row, _cell, tile in self._valid_cells()
        ]

    def composite_document(self, markup: str) -> str:
        """Build a document from stitched path markup.

        Each valid cell gets its tile's background square, and the stitched
        markup is drawn over all of them.
        """
        return self.build("".join(self._background_rects()) + markup)

    def tile_document(self) -> str:
        """Build a document that draws each cell's tile on its own.

        This is the export used without stitching: every cell is a group
        rotated about its centre, holding the tile's background square and
        its primitives. Strokes end flat at the tile edge.
        """
        half = format_number(self._tile_size / 2)
        size = format_number(self._tile_size)
        body: list[str] = []

        for col, row, cell, tile in self._valid_cells():
            cx = format_number(col * self._tile_size + self._tile_size / 2)
            cy = format_number(row * self._tile_size + self._tile_size / 2)
            body.append(
                f'    <g transform="translate({cx}, {cy}) rotate({cell.rotation}) '
                f'translate(-{half}, -{half})">\n'
            )
            body.append(
                f'      <rect x="0" y="0" width="{size}" height="{size}" '
                f'fill="{escape_attr(tile.background_color)}"/>\n'
            )
            body.extend(self._tile_elements(tile, col, row))
            body.append("    </g>\n")

        return self.build("".join(body))

    def _tile_elements(self, tile: TileDesign, col: int, row: int) -> list[str]:
        primary_width = tile.stroke_weight * self._scale
        secondary_width = (tile.stroke_weight + tile.secondary_stroke_width) * self._scale
        has_secondary = tile.secondary_stroke_width > 0

        curves: list[str] = []
        for primitive in [*tile.quads, *tile.beziers]:
            try:
                primitive.segment_points()
            except MalformedPrimitiveError as e:
                logger.debug("Skipping primitive in '%s' at (%d, %d): %s", tile.name, col, row, e)
                continue
            curves.append(self._curve_data(primitive))

        secondary: list[str] = []
        if has_secondary:
            secondary = [self._stroke(d, tile.secondary_color, secondary_width) for d in curves]
        primary = [self._stroke(d, tile.primary_color, primary_width) for d in curves]

        if tile.layered_rendering and has_secondary:
            elements = [e for pair in zip(secondary, primary) for e in pair]
        else:
            elements = secondary + primary

        for dot in tile.points:
            if len(dot.points) != 1:
                logger.debug("Skipping point in '%s' at (%d, %d)", tile.name, col, row)
                continue
            center = dot.points[0]
            elements.append(
                f'      <circle cx="{format_number(center.x * self._scale)}" '
                f'cy="{format_number(center.y * self._scale)}" '
                f'r="{format_number(primary_width / 2)}" fill="{escape_attr(tile.primary_color)}"/>\n'
            )
        return elements

    def _curve_data(self, primitive: Primitive) -> str:
        command = "Q" if isinstance(primitive, QuadCurve) else "C"
        coords = [
            f"{format_number(p.x * self._scale)} {format_number(p.y * self._scale)}"
            for p in primitive.points
        ]
        return f"M {coords[0]} {command} {' '.join(coords[1:])}"

    @staticmethod
    def _stroke(d: str, color: str, width: float) -> str:
        return (
            f'      <path d="{d}" stroke="{escape_attr(color)}" stroke-width="{format_number(width)}" '
            f'stroke-linecap="butt" fill="none"/>\n'
        )

    def save(self, path: Path, content: str) -> None:
        """Write document text to disk as UTF-8.

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise DocumentSaveError(str(path), str(e)) from e
        logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), path)

    @staticmethod
    def default_output_path(cols: int, rows: int, directory: Path | None = None) -> Path:
        """Generate the default export file name.

        Args:
            cols: Grid columns
            rows: Grid rows
            directory: Target directory (current directory if None)

        Returns:
            Path like ``truchet_mosaic_8x5.svg``
        """
        name = f"truchet_mosaic_{cols}x{rows}.svg"
        return (directory or Path(".")) / name
