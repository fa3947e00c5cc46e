"""Text-to-SVG document pipeline.

Reads the glyphs for a run of codepoints, renders their paths and wraps
them in an SVG document. The font is open only while glyphs are read.
"""

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from glyphpath.config import GlyphPathSettings
from glyphpath.core.layout import advance_for, apply_layout, layout_glyphs
from glyphpath.core.renderer import TextRenderer
from glyphpath.domain import Glyph
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
from glyphpath.utils import RenderLogger


def render_text_document(
    font_path: Path,
    codepoints: Iterable[int],
    settings: GlyphPathSettings,
    logger: RenderLogger | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> str:
    """Render a run of codepoints as a standalone SVG document.

    Args:
        font_path: Path to a TrueType font
        codepoints: Codepoints in text order
        settings: Glyphpath settings
        logger: Optional render logger (also receives statistics)
        progress_callback: Optional callback(completed, total)

    Returns:
        SVG document text

    Raises:
        FileNotFoundError: If the font does not exist
        FontFormatError: If the font has no quadratic outlines
        GlyphRenderError: If a glyph failed to render
    """
    with FontReader(font_path, logger=logger) as reader:
        glyphs = list(reader.iter_codepoints(codepoints))
        bounding_box = reader.bounding_box

    renderer = TextRenderer(settings, logger=logger)
    paths = renderer.render(glyphs, progress_callback=progress_callback)

    total_advance = sum(advance_for(g.metadata, settings.layout) for g in glyphs)
    frame = document_frame(bounding_box, total_advance)
    overlays = build_overlays(glyphs, settings, bounding_box, frame)
    return SvgWriter(border=settings.document.border).build(paths, frame, overlays)


def build_overlays(
    glyphs: Sequence[Glyph],
    settings: GlyphPathSettings,
    bounding_box: tuple[int, int, int, int],
    frame: tuple[int, int, float, float],
) -> list[str]:
    """Build the inspection overlays enabled in the document settings.

    Args:
        glyphs: Glyphs in text order
        settings: Glyphpath settings
        bounding_box: Font bounding box (x_min, y_min, x_max, y_max)
        frame: Document frame from document_frame

    Returns:
        Overlay markup, axes first, then per glyph in text order
    """
    doc = settings.document
    overlays = []
    if doc.show_axes:
        width, height, _, _ = frame
        overlays.append(axes(width, height))

    _, y_min, _, y_max = bounding_box
    for glyph, offset_x, offset_y in layout_glyphs(glyphs, settings.layout):
        if doc.show_metrics:
            overlays.append(metrics_box(glyph.metadata, offset_x, y_min, y_max))
        if not (doc.show_points or doc.show_point_lines or doc.label_points):
            continue
        placed = apply_layout(glyph.outline, offset_x, offset_y)
        if doc.show_point_lines:
            overlays.append(point_lines(placed))
        if doc.show_points:
            overlays.append(point_markers(placed))
        if doc.label_points:
            overlays.append(point_labels(placed))
    return overlays
