"""Quadratic Bezier flattening.

Renderers without curve primitives draw each quadratic segment as a short
polyline. Samples are taken at a fixed parametric step rather than by
adaptive subdivision, so every curve produces the same number of segments.
"""

import math
from collections.abc import Iterator

from glyphpath.domain import Point


def quadratic_point(start: Point, control: Point, end: Point, t: float) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t.

    B(t) = (1-t)^2 * start + 2(1-t)t * control + t^2 * end

    Args:
        start: Start anchor
        control: Control point
        end: End anchor
        t: Curve parameter in [0, 1]

    Returns:
        On-curve point at t
    """
    u = 1.0 - t
    a = u * u
    b = 2.0 * u * t
    c = t * t
    return Point(
        a * start.x + b * control.x + c * end.x,
        a * start.y + b * control.y + c * end.y,
    )


def sample_count(step: float) -> int:
    """Number of samples taken over [0, 1) with the given step.

    Raises:
        ValueError: If step is not in (0, 1]
    """
    if not 0.0 < step <= 1.0:
        raise ValueError(f"Flattening step must be in (0, 1], got {step}")
    # 1/step can fall just short of an integer (e.g. step=1/3)
    return max(1, math.floor(1.0 / step + 1e-9))


class QuadraticSamples:
    """Lazy, restartable samples of one quadratic Bezier segment.

    Iterating yields B(i * step) for i in range(len(self)), which covers
    t in [0, 1) and excludes ``end``. Each call to iter() starts over.

    Example:
        samples = QuadraticSamples(Point(0, 0), Point(10, 10), Point(20, 0))
        len(samples)  # 10
        list(samples)[0]  # Point(0.0, 0.0)
    """

    def __init__(self, start: Point, control: Point, end: Point, step: float = 0.1) -> None:
        self.start = start
        self.control = control
        self.end = end
        self.step = step
        self._count = sample_count(step)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Point]:
        for i in range(self._count):
            yield quadratic_point(self.start, self.control, self.end, i * self.step)
