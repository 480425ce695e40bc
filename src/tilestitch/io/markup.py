"""Small helpers for writing SVG markup.

All numbers written to markup go through format_number, which rounds to at
most three decimals and strips trailing zeros, so output coordinates are
quantized to 0.001 output units.
"""

from xml.sax.saxutils import escape

_ATTR_ENTITIES = {'"': "&quot;"}


def format_number(value: float) -> str:
    """Format a coordinate for markup with at most three decimals.

    Examples:
        >>> format_number(100.0)
        '100'
        >>> format_number(33.333333)
        '33.333'
        >>> format_number(-0.0001)
        '0'
    """
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def escape_attr(value: str) -> str:
    """Escape a string for use inside a double-quoted attribute."""
    return escape(value, _ATTR_ENTITIES)
