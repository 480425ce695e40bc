"""Configuration settings for Tilestitch."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

# Aspect factor used for the non-square grid shapes
WIDE_GRID_FACTOR = 1.6


class GridShape(str, Enum):
    """Overall shape of the generated mosaic."""

    SQUARE = "square"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class StitchConfig(BaseModel):
    """Configuration for segment stitching.

    The tolerance is expressed in tile design units (a tile is 600 units wide),
    independent of the output size.
    """

    tolerance: float = Field(
        default=5.0,
        ge=0.0,
        description="Maximum endpoint distance for joining two segments (design units)",
    )


class MosaicConfig(BaseModel):
    """Configuration for mosaic grid generation."""

    grid_size: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Number of tiles along the short side of the grid",
    )
    shape: GridShape = Field(
        default=GridShape.SQUARE,
        description="Grid shape (square, horizontal or vertical)",
    )
    equiprobable: bool = Field(
        default=True,
        description="Pick tiles uniformly instead of by their probability weight",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Random seed (None = draw a new one)",
    )

    def dimensions(self) -> tuple[int, int]:
        """Get grid dimensions for the configured size and shape.

        Returns:
            Tuple of (cols, rows)
        """
        if self.shape == GridShape.HORIZONTAL:
            return round(self.grid_size * WIDE_GRID_FACTOR), self.grid_size
        if self.shape == GridShape.VERTICAL:
            return self.grid_size, round(self.grid_size * WIDE_GRID_FACTOR)
        return self.grid_size, self.grid_size


class RenderConfig(BaseModel):
    """Configuration for vector output."""

    tile_size: float = Field(
        default=100.0,
        gt=0.0,
        le=10000.0,
        description="Size of one tile in the output document",
    )
    composite_paths: bool = Field(
        default=True,
        description="Stitch tile strokes into continuous paths instead of drawing tile by tile",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TileStitchSettings(BaseModel):
    """Main application settings."""

    stitch: StitchConfig = Field(default_factory=StitchConfig)
    mosaic: MosaicConfig = Field(default_factory=MosaicConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TileStitchSettings:
    """Get default application settings."""
    return TileStitchSettings()
