"""Shared fixtures: a small TrueType font built in memory with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

ADVANCE_WIDTHS = {".notdef": 500, "space": 250, "A": 600, "D": 600}


def _notdef_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def _triangle_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((300, 700))
    pen.lineTo((600, 0))
    pen.closePath()
    return pen.glyph()


def _d_glyph():
    # Bowl uses two consecutive off-curve points with an implied midpoint
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((300, 0))
    pen.qCurveTo((500, 0), (500, 700), (300, 700))
    pen.lineTo((100, 700))
    pen.closePath()
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Write a tiny TrueType font with .notdef, space, A and D."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(ADVANCE_WIDTHS))
    fb.setupCharacterMap({0x20: "space", 0x41: "A", 0x44: "D"})
    fb.setupGlyf(
        {
            ".notdef": _notdef_glyph(),
            "space": TTGlyphPen(None).glyph(),
            "A": _triangle_glyph(),
            "D": _d_glyph(),
        }
    )
    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (width, glyph_table[name].xMin) for name, width in ADVANCE_WIDTHS.items()}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Glyphpath Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_font_path(tmp_path: Path) -> Path:
    """Path to a freshly built test font."""
    return build_test_font(tmp_path / "GlyphpathTest-Regular.ttf")
