"""Core rendering algorithms for glyphpath.

This module contains the core algorithms for:

- Layout (y-axis inversion, per-glyph translation, pen advance)
- Contour reconstruction (on/off-curve classification, implied midpoints)
- Curve flattening (fixed-step quadratic Bezier sampling)
- Path emission (SVG path data serialization)

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects beyond optional injected logging)

Key functions:
- apply_layout: Flip and translate an outline
- reconstruct: Turn an outline into path operations
- quadratic_point: Evaluate a quadratic Bezier curve
- render_glyph_path: Full single-glyph pipeline

Key classes:
- ContourWalker: Reconstructs path operations per contour
- QuadraticSamples: Lazy samples of a quadratic segment
- PathEmitter: Serializes path operations
- TextRenderer: Renders a laid-out run of glyphs
"""

from glyphpath.core.emitter import PathEmitter, format_coordinate, placeholder_for
from glyphpath.core.flatten import QuadraticSamples, quadratic_point, sample_count
from glyphpath.core.layout import advance_for, apply_layout, layout_glyphs
from glyphpath.core.renderer import TextRenderer, render_glyph_path, render_glyph_task
from glyphpath.core.walker import ContourWalker, reconstruct

__all__ = [
    # Walker
    "ContourWalker",
    # Emitter
    "PathEmitter",
    # Flattening
    "QuadraticSamples",
    # Rendering
    "TextRenderer",
    # Layout functions
    "advance_for",
    "apply_layout",
    "format_coordinate",
    "layout_glyphs",
    "placeholder_for",
    "quadratic_point",
    "reconstruct",
    "render_glyph_path",
    "render_glyph_task",
    "sample_count",
]
