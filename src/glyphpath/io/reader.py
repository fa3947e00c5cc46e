"""Font reader for loading TrueType fonts.

This module provides the FontReader class for loading font files and
extracting quadratic glyph outlines into domain models.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from fontTools.ttLib import TTFont

from glyphpath.domain import Glyph, GlyphMetadata, Outline
from glyphpath.exceptions import FontFormatError, FontLoadError, GlyphNotFoundError
from glyphpath.utils import RenderLogger


class FontReader:
    """Loads TrueType fonts and extracts glyph outlines.

    Only fonts with a ``glyf`` table are supported, since reconstruction
    expects quadratic contours. The font handle lives only between load()
    and close(); the outlines handed out are independent of it.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for glyph in reader.iter_text("Hello"):
                print(glyph.name)
    """

    def __init__(self, font_path: Path, logger: RenderLogger | None = None) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF font file
            logger: Optional render logger for missing-codepoint warnings
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._logger = logger

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file cannot be parsed as a font
            FontFormatError: If the font has no glyf table
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            font = TTFont(str(self._font_path))
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e
        if "glyf" not in font:
            font.close()
            raise FontFormatError(
                str(self._font_path), "no glyf table (only quadratic TrueType outlines are supported)"
            )
        self._font = font

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def bounding_box(self) -> tuple[int, int, int, int]:
        """Return the font-wide bounding box from the head table.

        Returns:
            Tuple of (x_min, y_min, x_max, y_max) in font units

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        head = self._require_font()["head"]
        return (head.xMin, head.yMin, head.xMax, head.yMax)  # type: ignore[attr-defined]

    def glyph_name_for(self, codepoint: int) -> str:
        """Resolve a codepoint to a glyph name.

        Unmapped codepoints resolve to the first glyph (usually .notdef).

        Args:
            codepoint: Unicode codepoint

        Returns:
            Glyph name

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        cmap = font.getBestCmap() or {}
        name = cmap.get(codepoint)
        if name is None:
            name = font.getGlyphOrder()[0]
            if self._logger is not None:
                self._logger.log_missing_codepoint(codepoint, name)
        return name

    def get_glyph(self, name: str, codepoint: int | None = None) -> Glyph:
        """Get a specific glyph by name.

        Composite glyphs are resolved into their flattened outline.

        Args:
            name: Name of the glyph to retrieve
            codepoint: Codepoint the glyph was requested for, if any

        Returns:
            Glyph domain model with its outline in font units

        Raises:
            GlyphNotFoundError: If the font has no glyph with this name
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if name not in font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        glyf_table = font["glyf"]
        tt_glyph = glyf_table[name]
        coordinates, end_pts, flags = tt_glyph.getCoordinates(glyf_table)

        outline = Outline.from_flags(
            [(x, y) for x, y in coordinates],
            list(flags),
            list(end_pts),
        )

        advance_width, lsb = font["hmtx"].metrics.get(name, (0, 0))
        metadata = GlyphMetadata(
            name=name,
            unicode=codepoint,
            advance_width=advance_width,
            left_side_bearing=lsb,
        )
        return Glyph(metadata=metadata, outline=outline)

    def glyph_for_codepoint(self, codepoint: int) -> Glyph:
        """Get the glyph the font maps a codepoint to."""
        return self.get_glyph(self.glyph_name_for(codepoint), codepoint=codepoint)

    def iter_codepoints(self, codepoints: Iterable[int]) -> Iterator[Glyph]:
        """Yield one glyph per codepoint, in order."""
        for codepoint in codepoints:
            yield self.glyph_for_codepoint(codepoint)

    def iter_text(self, text: str) -> Iterator[Glyph]:
        """Yield one glyph per character of text, in order."""
        return self.iter_codepoints(ord(ch) for ch in text)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
