"""Glyphpath - Convert TrueType glyph outlines to SVG paths.

Glyphpath reads the quadratic-spline contours of TrueType glyphs and
reconstructs them as SVG path data (move, line, quadratic curve and close
statements), optionally flattening curves into line segments.

Example:
    $ glyphpath DejaVuSans.ttf "Hello" -o hello.svg

This writes hello.svg with one <path> element per character.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
