"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Curve emission, flattening and coordinate formatting
- LayoutConfig: Glyph advance settings
- DocumentConfig: SVG document overlays
- ProcessingConfig: Worker settings
- LoggingConfig: Logging settings
- GlyphPathSettings: Main application settings
"""

from glyphpath.config.settings import (
    CoordinateFormat,
    DocumentConfig,
    GlyphPathSettings,
    LayoutConfig,
    LoggingConfig,
    PathStyle,
    ProcessingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "CoordinateFormat",
    "DocumentConfig",
    "GlyphPathSettings",
    "LayoutConfig",
    "LoggingConfig",
    "PathStyle",
    "ProcessingConfig",
    "RenderConfig",
    "get_default_settings",
]
