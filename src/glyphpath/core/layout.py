"""Coordinate transforms applied before reconstruction.

TrueType outlines grow upward from the baseline while SVG's y axis grows
downward, so every y coordinate is negated before the glyph is shifted to
its position in the line of text.
"""

from collections.abc import Iterable, Iterator

from glyphpath.config import LayoutConfig
from glyphpath.domain import Glyph, GlyphMetadata, Outline, Point


def apply_layout(outline: Outline, offset_x: float = 0.0, offset_y: float = 0.0) -> Outline:
    """Flip an outline into SVG orientation and translate it.

    Args:
        outline: Outline in font design units (y up)
        offset_x: Horizontal translation
        offset_y: Vertical translation

    Returns:
        New outline with each point mapped to (x + offset_x, -y + offset_y)

    Examples:
        >>> o = Outline((Point(10, 20),), (0,))
        >>> apply_layout(o, 100, 50).points[0].to_tuple()
        (110, 30)
    """
    points = tuple(
        Point(p.x + offset_x, -p.y + offset_y, p.point_type) for p in outline.points
    )
    return Outline(points=points, contour_ends=outline.contour_ends)


def advance_for(metadata: GlyphMetadata, config: LayoutConfig) -> float:
    """Horizontal pen advance after drawing a glyph.

    Args:
        metadata: Glyph metrics
        config: Layout settings

    Returns:
        Scaled advance width, or the fallback advance for glyphs
        without a positive advance width
    """
    if metadata.advance_width <= 0:
        return config.fallback_advance
    return metadata.advance_width * config.advance_factor


def layout_glyphs(
    glyphs: Iterable[Glyph], config: LayoutConfig
) -> Iterator[tuple[Glyph, float, float]]:
    """Place glyphs left to right on a single baseline.

    Args:
        glyphs: Glyphs in text order
        config: Layout settings

    Yields:
        (glyph, offset_x, offset_y) tuples, the first at the origin
    """
    offset_x = 0.0
    offset_y = 0.0
    for glyph in glyphs:
        yield glyph, offset_x, offset_y
        offset_x += advance_for(glyph.metadata, config)
