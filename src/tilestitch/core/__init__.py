"""Core algorithms for tilestitch.

This module contains the core algorithms for:

- Geometry operations (cell transforms, point placement, distances)
- Mosaic generation (seeded tile and rotation choice)
- Segment extraction (tile primitives to world-space segments)
- Segment stitching (greedy endpoint joining into long paths)
- Path rendering (two-pass SVG markup and surface drawing)

Key functions:
- cell_transform: Build the placement transform of a grid cell
- extract_segments: Extract segments from a grid
- stitch_segments: Join segments into stitched paths

Key classes:
- MosaicGenerator: Generates random mosaic grids
- SegmentExtractor: Extracts world-space segments
- SegmentStitcher: Stitches segments with result caching
- PathRenderer: Renders stitched paths
- PathTracer: Extraction, stitching and rendering service
- MosaicExporter: Writes mosaic SVG documents
"""

from tilestitch.core.exporter import MosaicExporter
from tilestitch.core.extractor import SegmentExtractor, extract_segments
from tilestitch.core.generator import MosaicGenerator, select_weighted_tile
from tilestitch.core.geometry import cell_transform, squared_distance, transform_point
from tilestitch.core.renderer import DrawOp, PathRenderer, RenderPasses, path_data
from tilestitch.core.stitcher import JoinAction, SegmentStitcher, stitch_segments
from tilestitch.core.surface import DrawingSurface, RecordingSurface
from tilestitch.core.tracer import DEFAULT_TOLERANCE, PathTracer

__all__ = [
    "DEFAULT_TOLERANCE",
    # Renderer classes
    "DrawOp",
    "DrawingSurface",
    # Stitcher classes
    "JoinAction",
    # Exporter classes
    "MosaicExporter",
    # Generator classes
    "MosaicGenerator",
    "PathRenderer",
    # Tracer classes
    "PathTracer",
    "RecordingSurface",
    "RenderPasses",
    # Extractor classes
    "SegmentExtractor",
    "SegmentStitcher",
    # Geometry functions
    "cell_transform",
    "extract_segments",
    "path_data",
    "select_weighted_tile",
    "squared_distance",
    "stitch_segments",
    "transform_point",
]
