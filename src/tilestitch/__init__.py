"""Tilestitch - Stitch Truchet tile mosaics into continuous vector paths.

Tilestitch arranges tile designs (points, quadratic and cubic curves) into a
randomized, rotated grid and merges the per-tile strokes into long continuous
paths, so the exported SVG is a clean set of cross-tile curves rather than a
pile of tile fragments.

Example:
    $ tilestitch --size 8 --seed 42

This will create truchet_mosaic_8x8.svg with stitched paths drawn in two
passes (secondary "tube" stroke, then primary stroke).
"""

__version__ = "0.1.0"
__author__ = "Tilestitch contributors"

__all__ = ["__author__", "__version__"]
