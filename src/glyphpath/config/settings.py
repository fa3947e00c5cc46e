"""Configuration settings for Glyphpath."""

from pathlib import Path

from pydantic import BaseModel, Field


class CoordinateFormat(BaseModel):
    """How coordinates are written into SVG path data.

    By default coordinates keep their full precision: integral values are
    written without a decimal point and fractional values (synthesized
    midpoints, flattened samples) keep their digits.
    """

    precision: int | None = Field(
        default=None,
        ge=0,
        le=12,
        description="Fixed number of decimals (None = shortest exact representation)",
    )
    truncate: bool = Field(
        default=False,
        description="Truncate coordinates toward zero to integers",
    )


class PathStyle(BaseModel):
    """Presentation attributes of each emitted <path> element."""

    fill: str = Field(default="black", description="Fill color")
    stroke: str = Field(default="black", description="Stroke color")
    fill_opacity: float = Field(
        default=0.45,
        ge=0.0,
        le=1.0,
        description="Fill opacity",
    )
    stroke_width: float = Field(
        default=2.0,
        ge=0.0,
        description="Stroke width in output units",
    )


class RenderConfig(BaseModel):
    """Configuration for path reconstruction and serialization."""

    generate_curve_statements: bool = Field(
        default=True,
        description="Emit native Q statements (False = flatten curves to line segments)",
    )
    flatten_step: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Parametric step used when flattening quadratic curves",
    )
    coordinates: CoordinateFormat = Field(default_factory=CoordinateFormat)
    style: PathStyle = Field(default_factory=PathStyle)


class LayoutConfig(BaseModel):
    """Configuration for laying glyphs out along a line of text."""

    advance_factor: float = Field(
        default=1.1,
        gt=0.0,
        description="Multiplier applied to each glyph's advance width",
    )
    fallback_advance: float = Field(
        default=200.0,
        ge=0.0,
        description="Advance used for glyphs without a positive advance width",
    )


class DocumentConfig(BaseModel):
    """Configuration for the surrounding SVG document."""

    show_points: bool = Field(
        default=False,
        description="Draw outline points as circles (control points hollow)",
    )
    border: bool = Field(
        default=False,
        description="Draw a border around the document frame",
    )
    show_axes: bool = Field(
        default=False,
        description="Draw dashed axes through the origin",
    )
    show_metrics: bool = Field(
        default=False,
        description="Draw each glyph's advance box",
    )
    show_point_lines: bool = Field(
        default=False,
        description="Draw straight lines between consecutive outline points",
    )
    label_points: bool = Field(
        default=False,
        description="Label outline points with their coordinates",
    )


class ProcessingConfig(BaseModel):
    """Configuration for glyph rendering."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker processes for rendering (None or 1 = render in-process)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphPathSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    document: DocumentConfig = Field(default_factory=DocumentConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphPathSettings:
    """Get default application settings."""
    return GlyphPathSettings()
