"""Domain models for glyphpath.

This module contains the domain models representing glyph outlines and the
path operations reconstructed from them. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel rendering)
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point with on/off-curve metadata
- Outline: Points and contour end indices of one glyph
- Glyph: An outline with its metrics
- MoveTo, LineTo, QuadCurveTo, ClosePath: Reconstructed path operations
"""

from glyphpath.domain.glyph import Glyph, GlyphMetadata
from glyphpath.domain.outline import FLAG_ON_CURVE, Outline, Point, PointType
from glyphpath.domain.path import ClosePath, LineTo, MoveTo, PathOp, QuadCurveTo

__all__: list[str] = [
    # Enums
    "PointType",
    "FLAG_ON_CURVE",
    # Core types
    "Point",
    "Outline",
    "GlyphMetadata",
    "Glyph",
    # Path operations
    "PathOp",
    "MoveTo",
    "LineTo",
    "QuadCurveTo",
    "ClosePath",
]
