"""Utility functions for glyphpath.

This module provides utility functions including:

- Logging setup and configuration
- Rendering statistics helpers
"""

from glyphpath.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
    "get_logger",
]
