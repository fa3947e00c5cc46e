"""Unit tests for contour reconstruction."""

from unittest.mock import MagicMock

import pytest

from glyphpath.core.walker import ContourWalker, reconstruct
from glyphpath.domain import (
    ClosePath,
    LineTo,
    MoveTo,
    Outline,
    Point,
    PointType,
    QuadCurveTo,
)

ON = PointType.ON_CURVE
OFF = PointType.OFF_CURVE


def on(x: float, y: float) -> Point:
    return Point(x, y, ON)


def off(x: float, y: float) -> Point:
    return Point(x, y, OFF)


def assert_well_formed(ops: list, npts: int) -> None:
    """One MoveTo first, one ClosePath last, at most npts drawing ops between."""
    assert isinstance(ops[0], MoveTo)
    assert isinstance(ops[-1], ClosePath)
    drawing = ops[1:-1]
    assert all(isinstance(op, (LineTo, QuadCurveTo)) for op in drawing)
    assert len(drawing) <= npts


@pytest.fixture
def walker() -> ContourWalker:
    return ContourWalker()


class TestAllOnCurve:
    """Contours made only of anchors."""

    def test_square(self, walker: ContourWalker) -> None:
        """Square produces a move, three lines and a close."""
        ops = list(walker.walk([on(0, 0), on(10, 0), on(10, 10), on(0, 10)]))
        assert ops == [
            MoveTo(on(0, 0)),
            LineTo(on(10, 0)),
            LineTo(on(10, 10)),
            LineTo(on(0, 10)),
            ClosePath(),
        ]

    def test_no_curves(self, walker: ContourWalker) -> None:
        ops = list(walker.walk([on(0, 0), on(10, 0), on(5, 10)]))
        assert not any(isinstance(op, QuadCurveTo) for op in ops)

    def test_single_point(self, walker: ContourWalker) -> None:
        """A lone anchor is a move followed by a close."""
        assert list(walker.walk([on(3, 4)])) == [MoveTo(on(3, 4)), ClosePath()]

    def test_empty_contour(self, walker: ContourWalker) -> None:
        assert list(walker.walk([])) == []


class TestCurves:
    """Contours with control points."""

    def test_single_control_point(self, walker: ContourWalker) -> None:
        """on/off/on is one curve through the control point, no midpoint."""
        ops = list(walker.walk([on(0, 0), off(10, 10), on(20, 0)]))
        quads = [op for op in ops if isinstance(op, QuadCurveTo)]
        assert quads == [QuadCurveTo(control=off(10, 10), end=on(20, 0))]
        assert ops[0] == MoveTo(on(0, 0))
        assert ops[-1] == ClosePath()

    def test_consecutive_control_points(self, walker: ContourWalker) -> None:
        """Two control points imply an anchor at their exact midpoint."""
        ops = list(walker.walk([on(-10, 5), off(0, 0), off(10, 0), on(20, 5)]))
        assert ops == [
            MoveTo(on(-10, 5)),
            QuadCurveTo(control=off(0, 0), end=on(5, 0)),
            QuadCurveTo(control=off(10, 0), end=on(20, 5)),
            ClosePath(),
        ]

    def test_midpoint_not_rounded(self, walker: ContourWalker) -> None:
        ops = list(walker.walk([on(0, 0), off(0, 5), off(5, 5), on(5, 0)]))
        assert ops[1] == QuadCurveTo(control=off(0, 5), end=on(2.5, 5))

    def test_line_after_curve(self, walker: ContourWalker) -> None:
        """A line that follows a curve starts from the curve's end anchor."""
        ops = list(walker.walk([on(0, 0), off(10, 10), on(20, 0), on(20, -10)]))
        assert ops == [
            MoveTo(on(0, 0)),
            QuadCurveTo(control=off(10, 10), end=on(20, 0)),
            LineTo(on(20, -10)),
            ClosePath(),
        ]

    def test_curve_closing_the_contour(self, walker: ContourWalker) -> None:
        """A control point at the end wraps around to the first anchor."""
        ops = list(walker.walk([on(0, 0), on(10, 0), off(5, 10)]))
        assert ops == [
            MoveTo(on(0, 0)),
            LineTo(on(10, 0)),
            QuadCurveTo(control=off(5, 10), end=on(0, 0)),
            ClosePath(),
        ]


class TestFirstPointOffCurve:
    """Contours whose first point is a control point."""

    def test_first_off_next_on(self, walker: ContourWalker) -> None:
        """The walk starts at the next anchor and closes with the curve."""
        ops = list(walker.walk([off(5, 10), on(10, 0), on(0, 0)]))
        assert ops == [
            MoveTo(on(10, 0)),
            LineTo(on(0, 0)),
            QuadCurveTo(control=off(5, 10), end=on(10, 0)),
            ClosePath(),
        ]

    def test_leading_control_point_closes_contour(self, walker: ContourWalker) -> None:
        """The leading control point is used by the curve that closes the contour."""
        ops = list(walker.walk([off(0, 10), on(10, 0), off(0, -10), on(-10, 0)]))
        assert ops[0] == MoveTo(on(10, 0))
        assert ops[-1] == ClosePath()
        quads = [op for op in ops if isinstance(op, QuadCurveTo)]
        assert quads[-1] == QuadCurveTo(control=off(0, 10), end=on(10, 0))

    def test_first_two_off(self, walker: ContourWalker) -> None:
        """Leading control points start the path at their midpoint."""
        ops = list(walker.walk([off(0, 0), off(10, 0), on(10, 10)]))
        assert ops[0] == MoveTo(on(5, 0))
        assert ops[-2] == QuadCurveTo(control=off(0, 0), end=on(5, 0))

    def test_all_off_curve(self, walker: ContourWalker) -> None:
        """A contour of control points only is all curves between midpoints."""
        ops = list(walker.walk([off(0, 0), off(10, 0), off(10, 10), off(0, 10)]))
        assert ops == [
            MoveTo(on(5, 0)),
            QuadCurveTo(control=off(10, 0), end=on(10, 5)),
            QuadCurveTo(control=off(10, 10), end=on(5, 10)),
            QuadCurveTo(control=off(0, 10), end=on(0, 5)),
            QuadCurveTo(control=off(0, 0), end=on(5, 0)),
            ClosePath(),
        ]

    def test_path_returns_to_start(self, walker: ContourWalker) -> None:
        ops = list(walker.walk([off(0, 0), on(10, 0), off(20, 0), off(20, 10), on(0, 10)]))
        last_drawn = ops[-2]
        end = last_drawn.end if isinstance(last_drawn, QuadCurveTo) else last_drawn.point
        assert end == ops[0].point


class TestWellFormedness:
    """Structural properties over varied contours."""

    @pytest.mark.parametrize(
        "contour",
        [
            [on(0, 0), on(10, 0), on(10, 10), on(0, 10)],
            [on(0, 0), off(10, 10), on(20, 0)],
            [off(0, 0), off(10, 0), off(10, 10), off(0, 10)],
            [off(5, 10), on(10, 0), on(0, 0)],
            [on(0, 0), off(1, 1), off(2, 2), off(3, 3), on(4, 0), on(2, -2)],
            [off(0, 0), off(10, 0)],
            [on(0, 0)],
        ],
    )
    def test_single_move_and_close(self, walker: ContourWalker, contour: list) -> None:
        ops = list(walker.walk(contour))
        assert_well_formed(ops, len(contour))
        assert sum(isinstance(op, MoveTo) for op in ops) == 1
        assert sum(isinstance(op, ClosePath) for op in ops) == 1


class TestReconstruct:
    """Multi-contour outlines."""

    def test_contours_are_independent(self, walker: ContourWalker) -> None:
        outline = Outline.from_flags(
            [(0, 0), (10, 0), (10, 10), (20, 20), (30, 30), (40, 20)],
            [1, 1, 1, 1, 0, 1],
            [2, 5],
        )
        ops = walker.reconstruct(outline)
        assert [type(op) for op in ops] == [
            MoveTo, LineTo, LineTo, ClosePath,
            MoveTo, QuadCurveTo, ClosePath,
        ]
        assert ops[4] == MoveTo(on(20, 20))

    def test_degenerate_outline(self, walker: ContourWalker) -> None:
        assert walker.reconstruct(Outline()) == []

    def test_idempotent(self, walker: ContourWalker) -> None:
        outline = Outline.from_flags(
            [(0, 0), (10, 10), (20, 0), (10, -10)], [1, 0, 0, 1], [3]
        )
        assert walker.reconstruct(outline) == walker.reconstruct(outline)

    def test_module_function(self) -> None:
        outline = Outline.from_flags([(0, 0), (10, 10), (20, 0)], [1, 0, 1], [2])
        assert reconstruct(outline) == ContourWalker().reconstruct(outline)

    def test_logger_receives_steps(self) -> None:
        """An injected logger sees contour and step events."""
        logger = MagicMock()
        outline = Outline.from_flags([(0, 0), (10, 10), (20, 0)], [1, 0, 1], [2])
        ContourWalker(logger=logger).reconstruct(outline)

        events = [c.args[0] for c in logger.debug.call_args_list]
        assert events[0] == "Contour started"
        assert "Contour step" in events
        steps = [c.kwargs["step"] for c in logger.debug.call_args_list if "step" in c.kwargs]
        assert steps == ["curve", "skip", "close"]
