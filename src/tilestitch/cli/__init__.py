"""Command-line interface for tilestitch.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Seeded, reproducible mosaic generation
- Stitched or tile-by-tile SVG export
- Verbose/quiet output modes
- Detailed error reporting
"""

from tilestitch.cli.app import cli, main

__all__ = ["cli", "main"]
