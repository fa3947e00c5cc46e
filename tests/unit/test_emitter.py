"""Unit tests for path data serialization."""

import pytest

from glyphpath.config import CoordinateFormat, PathStyle, RenderConfig
from glyphpath.core.emitter import (
    PLACEHOLDER_NO_CONTOURS,
    PLACEHOLDER_NO_POINTS,
    PathEmitter,
    format_coordinate,
    placeholder_for,
)
from glyphpath.core.walker import reconstruct
from glyphpath.domain import ClosePath, LineTo, MoveTo, Outline, Point, PointType, QuadCurveTo


def _square_ops() -> list:
    return [
        MoveTo(Point(0, 0)),
        LineTo(Point(10, 0)),
        LineTo(Point(10, 10)),
        LineTo(Point(0, 10)),
        ClosePath(),
    ]


def _curve_ops() -> list:
    return [
        MoveTo(Point(0, 0)),
        QuadCurveTo(control=Point(10, 10, PointType.OFF_CURVE), end=Point(20, 0)),
        ClosePath(),
    ]


def _coords(token: str) -> tuple[float, float]:
    x, y = token.split(",")
    return float(x), float(y)


class TestFormatCoordinate:
    """Tests for coordinate formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(5, "5"), (5.0, "5"), (-700.0, "-700"), (2.5, "2.5"), (-0.0, "0"), (0.125, "0.125")],
    )
    def test_default_is_exact(self, value: float, expected: str) -> None:
        assert format_coordinate(value, CoordinateFormat()) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.7, "2"), (-2.7, "-2"), (-0.4, "0"), (10.0, "10")],
    )
    def test_truncate(self, value: float, expected: str) -> None:
        assert format_coordinate(value, CoordinateFormat(truncate=True)) == expected

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [(1 / 3, 2, "0.33"), (2.5, 3, "2.5"), (4.0, 2, "4"), (-0.001, 2, "0"), (7.25, 0, "7")],
    )
    def test_precision(self, value: float, precision: int, expected: str) -> None:
        fmt = CoordinateFormat(precision=precision)
        assert format_coordinate(value, fmt) == expected


class TestSerialize:
    """Tests for PathEmitter.serialize."""

    def test_square(self) -> None:
        assert PathEmitter().serialize(_square_ops()) == "M 0,0 L 10,0 L 10,10 L 0,10 Z"

    def test_quadratic(self) -> None:
        assert PathEmitter().serialize(_curve_ops()) == "M 0,0 Q 10,10 20,0 Z"

    def test_fractional_midpoint_kept(self) -> None:
        ops = [MoveTo(Point(0, 0)), LineTo(Point(2.5, -0.5)), ClosePath()]
        assert PathEmitter().serialize(ops) == "M 0,0 L 2.5,-0.5 Z"

    def test_truncated_output(self) -> None:
        config = RenderConfig(coordinates=CoordinateFormat(truncate=True))
        ops = [MoveTo(Point(0, 0)), LineTo(Point(2.5, -0.5)), ClosePath()]
        assert PathEmitter(config).serialize(ops) == "M 0,0 L 2,0 Z"

    def test_empty(self) -> None:
        assert PathEmitter().serialize([]) == ""

    def test_unknown_operation(self) -> None:
        with pytest.raises(TypeError, match="Unknown path operation"):
            PathEmitter().serialize([MoveTo(Point(0, 0)), "L 1,1"])  # type: ignore[list-item]


class TestFlattenedSerialize:
    """Tests for serialization with curve statements disabled."""

    @pytest.fixture
    def emitter(self) -> PathEmitter:
        return PathEmitter(RenderConfig(generate_curve_statements=False))

    def test_no_curve_statements(self, emitter: PathEmitter) -> None:
        d = emitter.serialize(_curve_ops())
        assert "Q" not in d

    def test_segment_count(self, emitter: PathEmitter) -> None:
        """Step 0.1 gives exactly ten line segments per curve."""
        tokens = emitter.serialize(_curve_ops()).split()
        assert tokens.count("L") == 10

    @pytest.mark.parametrize(("step", "segments"), [(0.25, 4), (0.5, 2), (1.0, 1)])
    def test_segment_count_per_step(self, step: float, segments: int) -> None:
        emitter = PathEmitter(RenderConfig(generate_curve_statements=False, flatten_step=step))
        assert emitter.serialize(_curve_ops()).split().count("L") == segments

    def test_continuous(self, emitter: PathEmitter) -> None:
        """Segments chain from the current point and finish on the curve end."""
        tokens = emitter.serialize(_curve_ops()).split()
        assert tokens[:2] == ["M", "0,0"]
        line_points = [_coords(tokens[i + 1]) for i, t in enumerate(tokens) if t == "L"]
        assert line_points[0] == (pytest.approx(2.0), pytest.approx(1.8))
        assert line_points[-1] == (20.0, 0.0)
        xs = [x for x, _ in line_points]
        assert xs == sorted(xs)
        assert tokens[-1] == "Z"

    def test_lines_untouched(self, emitter: PathEmitter) -> None:
        assert emitter.serialize(_square_ops()) == "M 0,0 L 10,0 L 10,10 L 0,10 Z"

    def test_curve_without_current_point(self, emitter: PathEmitter) -> None:
        ops = [QuadCurveTo(control=Point(1, 1, PointType.OFF_CURVE), end=Point(2, 0))]
        with pytest.raises(ValueError, match="current point"):
            emitter.serialize(ops)

    def test_flatten_starts_from_previous_end(self, emitter: PathEmitter) -> None:
        """A second curve flattens from where the first one ended."""
        ops = [
            MoveTo(Point(0, 0)),
            QuadCurveTo(control=Point(10, 10, PointType.OFF_CURVE), end=Point(20, 0)),
            QuadCurveTo(control=Point(30, -10, PointType.OFF_CURVE), end=Point(40, 0)),
            ClosePath(),
        ]
        tokens = emitter.serialize(ops).split()
        line_points = [_coords(tokens[i + 1]) for i, t in enumerate(tokens) if t == "L"]
        assert len(line_points) == 20
        assert line_points[10] == (pytest.approx(22.0), pytest.approx(-1.8))


class TestElement:
    """Tests for path element output."""

    def test_default_style(self) -> None:
        element = PathEmitter().element(_square_ops())
        assert element == (
            "<path fill='black' stroke='black' fill-opacity='0.45' stroke-width='2'"
            " d='M 0,0 L 10,0 L 10,10 L 0,10 Z'/>"
        )

    def test_custom_style_escaped(self) -> None:
        style = PathStyle(fill="url('#g')", stroke="none", fill_opacity=1.0, stroke_width=0.5)
        element = PathEmitter(RenderConfig(style=style)).element(_square_ops())
        assert "fill='url(&apos;#g&apos;)'" in element
        assert "fill-opacity='1'" in element
        assert "stroke-width='0.5'" in element


class TestPlaceholders:
    """Degenerate outlines produce comments, not paths."""

    def test_no_points(self) -> None:
        outline = Outline()
        assert placeholder_for(outline) == PLACEHOLDER_NO_POINTS
        assert PathEmitter().emit(outline, []) == PLACEHOLDER_NO_POINTS

    def test_no_points_with_contour_ends(self) -> None:
        outline = Outline(points=(), contour_ends=(0,))
        assert PathEmitter().emit(outline, []) == PLACEHOLDER_NO_POINTS

    def test_no_contours(self) -> None:
        outline = Outline.from_flags([(0, 0), (1, 1)], [1, 1], [])
        assert PathEmitter().emit(outline, reconstruct(outline)) == PLACEHOLDER_NO_CONTOURS

    def test_regular_outline(self) -> None:
        outline = Outline.from_flags([(0, 0), (10, 10), (20, 0)], [1, 0, 1], [2])
        assert placeholder_for(outline) is None
        assert PathEmitter().emit(outline, reconstruct(outline)).startswith("<path ")
