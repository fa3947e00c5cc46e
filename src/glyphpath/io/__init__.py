"""I/O layer for glyphpath.

This module handles reading fonts using fonttools and writing SVG
documents. It provides a clean abstraction layer between fonttools and the
domain models.

Key responsibilities:
- Load TrueType fonts and resolve codepoints to glyphs
- Convert glyf outlines to domain models
- Assemble SVG documents around rendered paths

Key classes:
- FontReader: Load fonts and extract glyph outlines
- SvgWriter: Build and save SVG documents

Key functions:
- render_text_document: Font + codepoints to a complete SVG document
"""

from glyphpath.io.document import render_text_document
from glyphpath.io.reader import FontReader
from glyphpath.io.svg import (
    SvgWriter,
    axes,
    document_frame,
    metrics_box,
    point_labels,
    point_lines,
    point_markers,
)

__all__ = [
    "FontReader",
    "SvgWriter",
    "axes",
    "document_frame",
    "metrics_box",
    "point_labels",
    "point_lines",
    "point_markers",
    "render_text_document",
]
