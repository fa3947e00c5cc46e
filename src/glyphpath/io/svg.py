"""SVG document assembly.

This module wraps rendered glyph paths in a standalone SVG document and
produces the optional inspection overlays.
"""

import math
from collections.abc import Sequence
from pathlib import Path

from glyphpath.config import CoordinateFormat
from glyphpath.core.emitter import format_coordinate
from glyphpath.domain import GlyphMetadata, Outline

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Marker radii for the point overlay
FIRST_POINT_RADIUS = 10
POINT_RADIUS = 5
MIDPOINT_RADIUS = 2


def _num(value: float) -> str:
    return format_coordinate(value, CoordinateFormat())


def document_frame(
    bounding_box: tuple[int, int, int, int], total_advance: float
) -> tuple[int, int, float, float]:
    """Compute document size and the translation that makes glyphs visible.

    Glyph coordinates are y-flipped, so the ascender sits at -y_max; the
    translation moves it to the top edge and the leftmost ink to x=0.

    Args:
        bounding_box: Font bounding box (x_min, y_min, x_max, y_max)
        total_advance: Sum of glyph advances along the line

    Returns:
        Tuple of (width, height, translate_x, translate_y)
    """
    x_min, y_min, x_max, y_max = bounding_box
    shift_x = float(max(0, -x_min))
    width = math.ceil(max(total_advance, x_max - x_min) + shift_x)
    height = math.ceil(y_max - y_min)
    return width, height, shift_x, float(y_max)


def svg_header(width: int, height: int) -> str:
    """Open the root <svg> element."""
    return (
        f"<svg width='{width}px' height='{height}px'"
        f" xmlns='{SVG_NAMESPACE}' version='1.1'>"
    )


def svg_border(width: int, height: int) -> str:
    """Draw a rectangle along the document frame."""
    return (
        "<!-- draw border -->\n"
        f"<rect fill='none' stroke='black' width='{width - 1}' height='{height - 1}'/>"
    )


def group_open(translate_x: float, translate_y: float) -> str:
    """Open the non-zero fill group holding all glyph paths."""
    return (
        f"<g fill-rule='nonzero'"
        f" transform='translate({_num(translate_x)} {_num(translate_y)})'>"
    )


def point_markers(outline: Outline) -> str:
    """Draw every outline point as a circle.

    On-curve points are filled, control points hollow, and the first point
    of each contour is drawn larger. Implied midpoints between consecutive
    control points get a small filled dot.

    Args:
        outline: Outline already in output coordinates

    Returns:
        Circle elements, one per line
    """
    lines = []
    for contour in outline.contours():
        n = len(contour)
        for i, point in enumerate(contour):
            nxt = contour[(i + 1) % n]
            if not point.on_curve and not nxt.on_curve:
                mid = point.midpoint(nxt)
                lines.append(
                    f"<circle fill='blue' stroke='black' cx='{_num(mid.x)}'"
                    f" cy='{_num(mid.y)}' r='{MIDPOINT_RADIUS}'/>"
                )
            fill = "blue" if point.on_curve else "none"
            radius = FIRST_POINT_RADIUS if i == 0 else POINT_RADIUS
            lines.append(
                f"<circle fill='{fill}' stroke='black' cx='{_num(point.x)}'"
                f" cy='{_num(point.y)}' r='{radius}'/>"
            )
    return "\n".join(lines)


def axes(width: float, height: float) -> str:
    """Draw dashed x and y axes through the glyph origin.

    Args:
        width: Half-length of the x axis
        height: Half-length of the y axis
    """
    return (
        "<!-- draw axes -->\n"
        "<path stroke='blue' stroke-dasharray='5,5' fill='none'"
        f" d='M {_num(-width)},0 L {_num(width)},0"
        f" M 0,{_num(-height)} L 0,{_num(height)}'/>"
    )


def metrics_box(metadata: GlyphMetadata, offset_x: float, y_min: float, y_max: float) -> str:
    """Draw the advance box of one glyph.

    The box spans the glyph's advance width horizontally and the font's
    descender to ascender vertically, in flipped output coordinates.

    Args:
        metadata: Glyph metrics
        offset_x: Pen position of the glyph
        y_min: Font descender (font units, y up)
        y_max: Font ascender (font units, y up)
    """
    x1 = offset_x
    x2 = offset_x + metadata.advance_width
    top = -y_max
    bottom = -y_min
    return (
        f"<!-- {metadata.name} advance box -->\n"
        "<path stroke='blue' fill='none' stroke-dasharray='10,16'"
        f" d='M {_num(x1)},{_num(bottom)} L {_num(x1)},{_num(top)}"
        f" L {_num(x2)},{_num(top)} L {_num(x2)},{_num(bottom)} Z'/>"
    )


def point_lines(outline: Outline) -> str:
    """Draw straight lines between consecutive outline points.

    The segment closing each contour is dashed.

    Args:
        outline: Outline already in output coordinates
    """
    lines = []
    for contour in outline.contours():
        n = len(contour)
        for i, point in enumerate(contour):
            nxt = contour[(i + 1) % n]
            dash = " stroke-dasharray='3'" if i == n - 1 else ""
            lines.append(
                f"<path fill='none' stroke='green'{dash}"
                f" d='M {_num(point.x)},{_num(point.y)} L {_num(nxt.x)},{_num(nxt.y)}'/>"
            )
    return "\n".join(lines)


def point_labels(outline: Outline) -> str:
    """Label every outline point with its output coordinates."""
    lines = []
    for point in outline.points:
        lines.append(
            "<text font-family='sans-serif' font-size='10' stroke='none' fill='darkgreen'"
            f" x='{_num(point.x + 5)}' y='{_num(point.y - 5)}'>"
            f"{_num(point.x)},{_num(point.y)}</text>"
        )
    return "\n".join(lines)


class SvgWriter:
    """Assembles glyph paths into an SVG document.

    Example:
        writer = SvgWriter(border=True)
        text = writer.build(paths, frame)
        writer.save(text, Path("out.svg"))
    """

    def __init__(self, border: bool = False) -> None:
        self.border = border

    def build(
        self,
        paths: Sequence[str],
        frame: tuple[int, int, float, float],
        overlays: Sequence[str] = (),
    ) -> str:
        """Build the complete document text.

        Args:
            paths: <path> elements or placeholder comments, in text order
            frame: (width, height, translate_x, translate_y) from document_frame
            overlays: Extra markup drawn above the glyphs

        Returns:
            SVG document text ending with a newline
        """
        width, height, translate_x, translate_y = frame
        parts = [svg_header(width, height)]
        if self.border:
            parts.append(svg_border(width, height))
        parts.append(group_open(translate_x, translate_y))
        parts.extend(paths)
        parts.extend(o for o in overlays if o)
        parts.append("</g>")
        parts.append("</svg>")
        return "\n".join(parts) + "\n"

    @staticmethod
    def save(document: str, output_path: Path) -> None:
        """Write document text to a file.

        Args:
            document: SVG document text
            output_path: Destination path
        """
        output_path.write_text(document, encoding="utf-8")
