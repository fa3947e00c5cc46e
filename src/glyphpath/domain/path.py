"""Path operations produced by contour reconstruction.

The ordered sequence of these operations is the only output of the
reconstruction step; serialization to SVG path data happens afterwards.
"""

from dataclasses import dataclass

from glyphpath.domain.outline import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``point``."""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``point``."""

    point: Point


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier from the current point to ``end``.

    Attributes:
        control: Off-curve control point
        end: On-curve end anchor (possibly a synthesized midpoint)
    """

    control: Point
    end: Point


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath back to its MoveTo point."""


PathOp = MoveTo | LineTo | QuadCurveTo | ClosePath
