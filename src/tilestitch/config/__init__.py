"""Configuration management for tilestitch.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StitchConfig: Segment stitching settings
- MosaicConfig: Grid generation settings
- RenderConfig: Output rendering settings
- LoggingConfig: Logging settings
- TileStitchSettings: Main application settings
"""

from tilestitch.config.settings import (
    GridShape,
    LoggingConfig,
    MosaicConfig,
    RenderConfig,
    StitchConfig,
    TileStitchSettings,
    get_default_settings,
)

__all__ = [
    "GridShape",
    "LoggingConfig",
    "MosaicConfig",
    "RenderConfig",
    "StitchConfig",
    "TileStitchSettings",
    "get_default_settings",
]
