"""Logging utilities for Tilestitch."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class ExportStats:
    """Statistics from an export run."""

    cols: int = 0
    rows: int = 0
    seed: int | None = None
    segment_count: int = 0
    path_count: int = 0
    skipped_cells: int = 0
    skipped_primitives: int = 0
    composite: bool = True
    fallback_used: bool = False
    output_path: Path | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate export duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def merged_count(self) -> int:
        """Number of segments absorbed into another segment's path."""
        if not self.composite or self.fallback_used:
            return 0
        return max(self.segment_count - self.path_count, 0)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("tilestitch")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ExportLogger:
    """Logger for tracking export progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ExportStats()

    def log_grid(self, cols: int, rows: int, seed: int, generated: bool) -> None:
        """Log the grid being exported."""
        self._logger.info(
            "Mosaic grid generated" if generated else "Using provided mosaic grid",
            cols=cols,
            rows=rows,
            seed=seed,
        )
        self._stats.cols = cols
        self._stats.rows = rows
        self._stats.seed = seed

    def log_extraction(
        self, segment_count: int, skipped_cells: int, skipped_primitives: int
    ) -> None:
        """Log segment extraction results."""
        self._logger.debug(
            "Segments extracted",
            segments=segment_count,
            skipped_cells=skipped_cells,
            skipped_primitives=skipped_primitives,
        )
        if skipped_cells or skipped_primitives:
            self._logger.warning(
                "Some mosaic content was skipped",
                skipped_cells=skipped_cells,
                skipped_primitives=skipped_primitives,
            )
        self._stats.segment_count = segment_count
        self._stats.skipped_cells = skipped_cells
        self._stats.skipped_primitives = skipped_primitives

    def log_stitch(self, path_count: int, tolerance: float, duration_ms: float) -> None:
        """Log stitching results."""
        self._logger.info(
            "Segments stitched",
            segments=self._stats.segment_count,
            paths=path_count,
            tolerance=tolerance,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.path_count = path_count

    def log_fallback(self, error: Exception, traceback: str | None = None) -> None:
        """Log a failed composite render and the switch to tile-by-tile output."""
        self._logger.error(
            "Composite rendering failed, falling back to tile-by-tile output",
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.fallback_used = True

    @property
    def stats(self) -> ExportStats:
        """Get current export statistics."""
        return self._stats
