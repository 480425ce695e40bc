"""Export orchestration for mosaic documents.

This module coordinates a full export: generating (or taking) a grid,
tracing and stitching its paths, assembling the SVG document and writing it
to disk. When composite rendering fails, the export falls back to drawing
each tile on its own so a document is still produced.

Key components:
- MosaicExporter: Main orchestrator class for mosaic export
"""

import time
import traceback
from pathlib import Path

from tilestitch.config import TileStitchSettings
from tilestitch.core.generator import MosaicGenerator
from tilestitch.core.tracer import PathTracer
from tilestitch.domain import MosaicGrid, TileDesign
from tilestitch.io import SvgDocumentWriter
from tilestitch.utils import ExportLogger, ExportStats, configure_logging


class MosaicExporter:
    """Orchestrates mosaic export.

    Manages the complete workflow:
    1. Generate a grid from the mosaic settings (unless one is given)
    2. Extract and stitch the grid's segments
    3. Render stitched markup, or tile-by-tile markup on failure
    4. Save the SVG document

    Example:
        settings = TileStitchSettings()
        exporter = MosaicExporter(settings)
        stats = exporter.export(default_tiles(), output_path=Path("mosaic.svg"))
    """

    def __init__(self, config: TileStitchSettings, quiet: bool = False) -> None:
        """Initialize exporter with configuration.

        Args:
            config: Application settings
            quiet: Suppress console log output except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.generator = MosaicGenerator()

    def export(
        self,
        tiles: list[TileDesign],
        output_path: Path | None = None,
        grid: MosaicGrid | None = None,
    ) -> ExportStats:
        """Export a mosaic as an SVG document.

        Args:
            tiles: Tile designs to build the mosaic from
            output_path: Path for the document (auto-generated if None)
            grid: Grid to export (generated from settings if None)

        Returns:
            ExportStats with counts, seed, and timing

        Raises:
            EmptyTileSetError: If a grid must be generated and tiles is empty
            DocumentSaveError: If the document cannot be written
        """
        export_logger = ExportLogger(self.logger)
        stats = export_logger.stats
        stats.start_time = time.time()

        generated = grid is None
        if grid is None:
            mosaic = self.config.mosaic
            cols, rows = mosaic.dimensions()
            grid = self.generator.generate(
                cols,
                rows,
                tiles,
                equiprobable=mosaic.equiprobable,
                seed=mosaic.seed,
            )
        export_logger.log_grid(grid.cols, grid.rows, grid.seed, generated)

        if output_path is None:
            output_path = SvgDocumentWriter.default_output_path(grid.cols, grid.rows)

        writer = SvgDocumentWriter(grid, tiles, tile_size=self.config.render.tile_size)
        stats.composite = self.config.render.composite_paths

        if stats.composite:
            try:
                content = self._composite_document(grid, tiles, writer, export_logger)
            except Exception as e:
                export_logger.log_fallback(e, traceback.format_exc())
                content = writer.tile_document()
        else:
            content = writer.tile_document()

        writer.save(output_path, content)
        stats.output_path = output_path
        stats.end_time = time.time()

        self.logger.info(
            "Export complete",
            output=str(output_path),
            composite=stats.composite,
            fallback=stats.fallback_used,
            segments=stats.segment_count,
            paths=stats.path_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _composite_document(
        self,
        grid: MosaicGrid,
        tiles: list[TileDesign],
        writer: SvgDocumentWriter,
        export_logger: ExportLogger,
    ) -> str:
        """Trace, stitch and render the grid into a composite document."""
        tolerance = self.config.stitch.tolerance
        tracer = PathTracer(grid, tiles, tile_size=self.config.render.tile_size)

        segments = tracer.extract_segments()
        export_logger.log_extraction(
            len(segments),
            tracer.extractor.skipped_cells,
            tracer.extractor.skipped_primitives,
        )

        start = time.time()
        paths = tracer.stitch_segments(tolerance)
        export_logger.log_stitch(len(paths), tolerance, (time.time() - start) * 1000)

        return writer.composite_document(tracer.generate_vector_markup(tolerance))
