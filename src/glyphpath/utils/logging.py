"""Logging utilities for Glyphpath."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

LOGGER_NAME = "glyphpath"


def get_logger() -> structlog.stdlib.BoundLogger:
    """Package logger that goes through stdlib logging without configuring it.

    Library callers that never call configure_logging() get standard
    logging behaviour: nothing below WARNING unless they add handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger(LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    rendered_count: int = 0
    placeholder_count: int = 0
    error_count: int = 0
    contour_count: int = 0
    path_op_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so that SVG written to stdout stays clean.
    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(LOGGER_NAME)
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking rendering progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Underlying bound logger, for passing into core functions."""
        return self._logger

    def log_glyph_start(self, glyph_name: str, offset_x: float, offset_y: float) -> None:
        """Log start of glyph rendering."""
        self._logger.debug(
            "Rendering glyph", glyph=glyph_name, offset_x=offset_x, offset_y=offset_y
        )

    def log_glyph_rendered(
        self,
        glyph_name: str,
        contours: int,
        path_ops: int,
        duration_ms: float,
    ) -> None:
        """Log successful glyph rendering."""
        self._logger.info(
            "Glyph rendered",
            glyph=glyph_name,
            contours=contours,
            path_ops=path_ops,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.contour_count += contours
        self._stats.path_op_count += path_ops

    def log_glyph_placeholder(self, glyph_name: str, reason: str) -> None:
        """Log glyph rendered as a placeholder comment."""
        self._logger.debug("Glyph has no outline", glyph=glyph_name, reason=reason)
        self._stats.placeholder_count += 1

    def log_missing_codepoint(self, codepoint: int, fallback: str) -> None:
        """Log a codepoint the font does not map."""
        self._logger.warning(
            "Codepoint not in cmap",
            codepoint=f"U+{codepoint:04X}",
            fallback=fallback,
        )

    def log_glyph_error(
        self,
        glyph_name: str,
        error: str,
        traceback: str | None = None,
    ) -> None:
        """Log glyph rendering error."""
        self._logger.error(
            "Glyph rendering failed",
            glyph=glyph_name,
            error=error,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((glyph_name, error))

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
