"""Utility functions for tilestitch.

This module provides utility functions including:

- Logging setup and configuration
- Export statistics tracking
"""

from tilestitch.utils.logging import (
    ExportLogger,
    ExportStats,
    configure_logging,
)

__all__ = [
    "ExportLogger",
    "ExportStats",
    "configure_logging",
]
