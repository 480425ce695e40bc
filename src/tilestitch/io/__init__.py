"""Document I/O layer for tilestitch.

This module assembles SVG documents from renderer output and writes them to
disk.

Key classes:
- SvgDocumentWriter: Composite and tile-by-tile SVG export
"""

from tilestitch.io.markup import escape_attr, format_number
from tilestitch.io.writer import SvgDocumentWriter

__all__ = [
    "SvgDocumentWriter",
    "escape_attr",
    "format_number",
]
