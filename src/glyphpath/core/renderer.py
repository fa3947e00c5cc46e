"""Glyph rendering pipeline.

This module runs outlines through layout, reconstruction and emission, one
glyph at a time or many glyphs in parallel using ProcessPoolExecutor.

Key components:
- render_glyph_path: Pure single-glyph pipeline
- render_glyph_task: Top-level picklable function for parallel execution
- TextRenderer: Lays out a run of glyphs and renders their paths
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from glyphpath.config import GlyphPathSettings, RenderConfig
from glyphpath.core.emitter import PathEmitter
from glyphpath.core.layout import apply_layout, layout_glyphs
from glyphpath.core.walker import ContourWalker
from glyphpath.domain import Glyph, Outline, PathOp
from glyphpath.exceptions import GlyphRenderError
from glyphpath.utils import RenderLogger, RenderStats, get_logger


def _render_outline(
    outline: Outline,
    offset_x: float,
    offset_y: float,
    config: RenderConfig,
    logger: structlog.stdlib.BoundLogger | None,
) -> tuple[Outline, list[PathOp], str]:
    """Place an outline, reconstruct its path and emit the element.

    Returns:
        Tuple of (placed outline, path operations, SVG text)
    """
    placed = apply_layout(outline, offset_x, offset_y)
    ops = ContourWalker(logger=logger).reconstruct(placed)
    return placed, ops, PathEmitter(config).emit(placed, ops)


def render_glyph_path(
    outline: Outline,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
    config: RenderConfig | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> str:
    """Render one outline as an SVG <path> element.

    Args:
        outline: Outline in font design units (y up)
        offset_x: Horizontal position of the glyph origin
        offset_y: Vertical position of the glyph origin
        config: Render settings (defaults if None)
        logger: Optional structured logger for reconstruction steps

    Returns:
        A <path> element, or a placeholder comment for degenerate outlines
    """
    _, _, svg = _render_outline(outline, offset_x, offset_y, config or RenderConfig(), logger)
    return svg


def render_glyph_task(
    glyph_dict: dict[str, Any],
    offset_x: float,
    offset_y: float,
    config_dict: dict[str, Any],
    logger: structlog.stdlib.BoundLogger | None = None,
) -> dict[str, Any]:
    """Render a single glyph.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Workers run without a logger; in-process rendering may pass one through
    to the contour walker.

    Args:
        glyph_dict: Serialized glyph (from Glyph.to_dict())
        offset_x: Horizontal position of the glyph origin
        offset_y: Vertical position of the glyph origin
        config_dict: Serialized render configuration
        logger: Optional structured logger for reconstruction steps

    Returns:
        Dictionary containing either:
        - Success: {"glyph_name", "svg", "contours", "path_ops", "empty", "duration_ms"}
        - Error: {"error", "glyph_name", "traceback", "duration_ms"}
    """
    start_time = time.time()

    try:
        glyph = Glyph.from_dict(glyph_dict)
        config = RenderConfig(**config_dict)

        placed, ops, svg = _render_outline(glyph.outline, offset_x, offset_y, config, logger)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "glyph_name": glyph.name,
            "svg": svg,
            "contours": len(placed.contours()),
            "path_ops": len(ops),
            "empty": glyph.is_empty(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "glyph_name": glyph_dict.get("metadata", {}).get("name", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class TextRenderer:
    """Renders a run of glyphs laid out left to right.

    Example:
        settings = GlyphPathSettings()
        renderer = TextRenderer(settings)
        paths = renderer.render(glyphs)
    """

    def __init__(
        self,
        settings: GlyphPathSettings,
        logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Glyphpath settings
            logger: Render logger (plain stdlib-backed package logger if None)
        """
        self.settings = settings
        self.logger = logger or RenderLogger(get_logger())

    @property
    def stats(self) -> RenderStats:
        """Statistics collected so far."""
        return self.logger.stats

    def render(
        self,
        glyphs: Sequence[Glyph],
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> list[str]:
        """Render glyphs to SVG path elements in text order.

        Args:
            glyphs: Glyphs in text order
            progress_callback: Optional callback(completed, total)

        Returns:
            One <path> element or placeholder comment per glyph

        Raises:
            GlyphRenderError: If any glyph failed to render
        """
        stats = self.logger.stats
        stats.start_time = time.time()

        placed = list(layout_glyphs(glyphs, self.settings.layout))
        config_dict = self.settings.render.model_dump()
        total = len(placed)
        results: dict[int, dict[str, Any]] = {}

        max_workers = self.settings.processing.max_workers
        if max_workers is None or max_workers <= 1 or total <= 1:
            for idx, (glyph, offset_x, offset_y) in enumerate(placed):
                self.logger.log_glyph_start(glyph.name, offset_x, offset_y)
                results[idx] = render_glyph_task(
                    glyph.to_dict(), offset_x, offset_y, config_dict, logger=self.logger.logger
                )
                if progress_callback:
                    progress_callback(idx + 1, total)
        else:
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                futures = {}
                for idx, (glyph, offset_x, offset_y) in enumerate(placed):
                    self.logger.log_glyph_start(glyph.name, offset_x, offset_y)
                    future = executor.submit(
                        render_glyph_task, glyph.to_dict(), offset_x, offset_y, config_dict
                    )
                    futures[future] = idx

                for completed, future in enumerate(as_completed(futures), start=1):
                    results[futures[future]] = future.result()
                    if progress_callback:
                        progress_callback(completed, total)

        paths: list[str] = []
        first_error: dict[str, Any] | None = None
        for idx in range(total):
            result = results[idx]
            if "error" in result:
                self.logger.log_glyph_error(
                    result["glyph_name"], result["error"], result.get("traceback")
                )
                first_error = first_error or result
                continue
            if result["empty"]:
                self.logger.log_glyph_placeholder(result["glyph_name"], result["svg"])
            else:
                self.logger.log_glyph_rendered(
                    result["glyph_name"],
                    contours=result["contours"],
                    path_ops=result["path_ops"],
                    duration_ms=result["duration_ms"],
                )
            paths.append(result["svg"])

        stats.end_time = time.time()

        if first_error is not None:
            raise GlyphRenderError(first_error["glyph_name"], first_error["error"])
        return paths
