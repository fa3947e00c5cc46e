"""Glyph representation and metadata.

This module defines the glyph domain model, which pairs a single glyph's
outline with the metrics needed to lay it out in a line of text.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphpath.domain.outline import Outline


@dataclass
class GlyphMetadata:
    """Metadata about a glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        unicode: Codepoint the glyph was requested for (None if requested by name)
        advance_width: Horizontal advance width in font units
        left_side_bearing: Left side bearing in font units
    """

    name: str
    unicode: int | None
    advance_width: int
    left_side_bearing: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of metadata
        """
        return {
            "name": self.name,
            "unicode": self.unicode,
            "advance_width": self.advance_width,
            "lsb": self.left_side_bearing
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphMetadata":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of metadata

        Returns:
            GlyphMetadata instance
        """
        return cls(
            name=data["name"],
            unicode=data["unicode"],
            advance_width=data["advance_width"],
            left_side_bearing=data["lsb"]
        )


@dataclass
class Glyph:
    """Represents a single glyph with its outline.

    Designed for efficient serialization for parallel rendering.

    Attributes:
        metadata: Glyph metadata (name, unicode, metrics)
        outline: Outline in font design units (y up)
    """

    metadata: GlyphMetadata
    outline: Outline = field(default_factory=Outline)

    @property
    def name(self) -> str:
        """Get glyph name from metadata."""
        return self.metadata.name

    def is_empty(self) -> bool:
        """Check if glyph has no outline.

        Empty glyphs include spaces and other non-printing characters.

        Returns:
            True if the outline has no points or no contours
        """
        return self.outline.is_degenerate()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "metadata": self.metadata.to_dict(),
            "outline": self.outline.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance
        """
        return cls(
            metadata=GlyphMetadata.from_dict(data["metadata"]),
            outline=Outline.from_dict(data["outline"]),
        )
