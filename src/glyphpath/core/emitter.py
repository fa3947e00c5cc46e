"""Serialization of path operations into SVG path data."""

import math
from collections.abc import Iterable
from xml.sax.saxutils import escape

from glyphpath.config import CoordinateFormat, RenderConfig
from glyphpath.core.flatten import QuadraticSamples
from glyphpath.domain import ClosePath, LineTo, MoveTo, Outline, PathOp, Point, QuadCurveTo

PLACEHOLDER_NO_POINTS = "<!-- font had 0 points -->"
PLACEHOLDER_NO_CONTOURS = "<!-- font had 0 contours -->"


def format_coordinate(value: float, fmt: CoordinateFormat) -> str:
    """Format a single coordinate for path data.

    Args:
        value: Coordinate value
        fmt: Formatting options

    Returns:
        Text form of the value; negative zero is written as "0"

    Examples:
        >>> format_coordinate(5.0, CoordinateFormat())
        '5'
        >>> format_coordinate(2.5, CoordinateFormat())
        '2.5'
        >>> format_coordinate(-2.5, CoordinateFormat(truncate=True))
        '-2'
        >>> format_coordinate(1 / 3, CoordinateFormat(precision=2))
        '0.33'
    """
    if fmt.truncate:
        text = str(math.trunc(value))
    elif fmt.precision is not None:
        text = f"{value:.{fmt.precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    elif float(value).is_integer():
        text = str(int(value))
    else:
        text = repr(float(value))

    if text == "-0":
        return "0"
    return text


def placeholder_for(outline: Outline) -> str | None:
    """Placeholder comment for an outline with nothing to draw.

    Returns:
        The comment for degenerate outlines, None otherwise
    """
    if not outline.points:
        return PLACEHOLDER_NO_POINTS
    if not outline.contour_ends:
        return PLACEHOLDER_NO_CONTOURS
    return None


class PathEmitter:
    """Writes path operations as SVG path data.

    Operations are written in order, one statement each, except that
    quadratic curves become runs of line statements when curve statements
    are disabled. No reordering, deduplication or simplification happens.

    Example:
        emitter = PathEmitter(RenderConfig())
        d = emitter.serialize(ops)  # "M 0,0 L 10,0 L 10,10 Z"
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def serialize(self, ops: Iterable[PathOp]) -> str:
        """Serialize operations into path data.

        Args:
            ops: Path operations in drawing order

        Returns:
            Space-separated path data statements
        """
        tokens: list[str] = []
        current: Point | None = None
        subpath_start: Point | None = None

        for op in ops:
            if isinstance(op, MoveTo):
                tokens.append(f"M {self._xy(op.point)}")
                current = subpath_start = op.point
            elif isinstance(op, LineTo):
                tokens.append(f"L {self._xy(op.point)}")
                current = op.point
            elif isinstance(op, QuadCurveTo):
                if self.config.generate_curve_statements:
                    tokens.append(f"Q {self._xy(op.control)} {self._xy(op.end)}")
                else:
                    if current is None:
                        raise ValueError("QuadCurveTo without a current point")
                    tokens.extend(f"L {self._xy(p)}" for p in self._flatten(current, op))
                current = op.end
            elif isinstance(op, ClosePath):
                tokens.append("Z")
                current = subpath_start
            else:
                raise TypeError(f"Unknown path operation: {op!r}")

        return " ".join(tokens)

    def element(self, ops: Iterable[PathOp]) -> str:
        """Wrap serialized operations in a <path> element.

        Args:
            ops: Path operations in drawing order

        Returns:
            Self-closing <path> element with the configured style
        """
        style = self.config.style
        return (
            f"<path fill={_attr(style.fill)} stroke={_attr(style.stroke)}"
            f" fill-opacity={_attr(_number(style.fill_opacity))}"
            f" stroke-width={_attr(_number(style.stroke_width))}"
            f" d={_attr(self.serialize(ops))}/>"
        )

    def emit(self, outline: Outline, ops: Iterable[PathOp]) -> str:
        """Produce the output for one glyph.

        Args:
            outline: Outline the operations were reconstructed from
            ops: Path operations in drawing order

        Returns:
            A <path> element, or a placeholder comment for degenerate outlines
        """
        placeholder = placeholder_for(outline)
        if placeholder is not None:
            return placeholder
        return self.element(ops)

    def _flatten(self, current: Point, op: QuadCurveTo) -> list[Point]:
        samples = iter(QuadraticSamples(current, op.control, op.end, self.config.flatten_step))
        # The t=0 sample is the current point itself
        next(samples)
        return [*samples, op.end]

    def _xy(self, point: Point) -> str:
        fmt = self.config.coordinates
        return f"{format_coordinate(point.x, fmt)},{format_coordinate(point.y, fmt)}"


def _number(value: float) -> str:
    return format_coordinate(value, CoordinateFormat())


def _attr(value: str) -> str:
    return "'" + escape(value, {"'": "&apos;"}) + "'"
