"""Exception hierarchy for Glyphpath."""


class GlyphPathError(Exception):
    """Base exception for all Glyphpath errors."""

    pass


class OutlineError(GlyphPathError):
    """Outline data violates the points/flags/contour-ends contract."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FontError(GlyphPathError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class GlyphError(GlyphPathError):
    """Errors related to glyph rendering."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class GlyphRenderError(GlyphError):
    """Error rendering a specific glyph."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error rendering glyph '{glyph_name}': {reason}")
