"""Contour-to-path reconstruction for quadratic TrueType outlines.

A TrueType contour is a closed loop of on-curve anchors and off-curve
control points. Two consecutive control points imply an on-curve anchor
halfway between them, so the walker looks at each point together with the
next two and decides which path operation, if any, starts there:

- on, on: straight line to the next point
- on, off, on: quadratic curve through the control point to the next anchor
- on, off, off: quadratic curve ending at the implied midpoint
- off, off: the implied midpoint becomes the current anchor, then as above
- off, on: nothing; the control point was consumed by the previous curve

Every contour is treated as cyclic, and contours never interact.
"""

from collections.abc import Iterator, Sequence

import structlog

from glyphpath.domain import ClosePath, LineTo, MoveTo, Outline, PathOp, Point, QuadCurveTo


class ContourWalker:
    """Reconstructs path operations from contour points.

    Stateless apart from the optional logger, so one walker can be shared
    across glyphs and worker processes.

    Example:
        walker = ContourWalker()
        ops = walker.reconstruct(outline)
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        """Initialize the walker.

        Args:
            logger: Optional structured logger receiving one debug event per
                classification step
        """
        self._logger = logger

    def walk(self, points: Sequence[Point]) -> Iterator[PathOp]:
        """Walk one contour and yield its path operations.

        The MoveTo targets the first anchor the walk reaches: the first
        point when it is on-curve, otherwise the midpoint synthesized from
        two leading control points or the next on-curve point. The walk
        makes exactly one cyclic pass, so the path ends where it started.

        Args:
            points: Points of a single contour, already in output coordinates

        Yields:
            MoveTo, then LineTo/QuadCurveTo operations, then ClosePath.
            Nothing is yielded for an empty contour.
        """
        npts = len(points)
        if npts == 0:
            return

        start: Point | None = None
        for j in range(npts):
            current = points[j]
            nxt = points[(j + 1) % npts]
            nxt_nxt = points[(j + 2) % npts]

            if not current.on_curve:
                if nxt.on_curve:
                    self._trace(j, "skip", current)
                    continue
                current = current.midpoint(nxt)
                self._trace(j, "synthesize", current)

            if start is None:
                start = current
                yield MoveTo(current)

            if nxt.on_curve:
                # ClosePath draws the final edge back to the start anchor
                if j == npts - 1:
                    self._trace(j, "close", nxt)
                    continue
                self._trace(j, "line", nxt)
                yield LineTo(nxt)
            elif nxt_nxt.on_curve:
                self._trace(j, "curve", nxt_nxt)
                yield QuadCurveTo(control=nxt, end=nxt_nxt)
            else:
                end = nxt.midpoint(nxt_nxt)
                self._trace(j, "curve_to_midpoint", end)
                yield QuadCurveTo(control=nxt, end=end)

        yield ClosePath()

    def reconstruct(self, outline: Outline) -> list[PathOp]:
        """Reconstruct the path operations of every contour in an outline.

        Args:
            outline: Outline already transformed into output coordinates

        Returns:
            Operations of all contours in contour order
        """
        ops: list[PathOp] = []
        for idx, contour in enumerate(outline.contours()):
            if self._logger is not None:
                self._logger.debug("Contour started", contour=idx, points=len(contour))
            ops.extend(self.walk(contour))
        return ops

    def _trace(self, index: int, step: str, point: Point) -> None:
        if self._logger is not None:
            self._logger.debug("Contour step", index=index, step=step, x=point.x, y=point.y)


def reconstruct(
    outline: Outline, logger: structlog.stdlib.BoundLogger | None = None
) -> list[PathOp]:
    """Reconstruct path operations for an outline.

    Convenience wrapper around ContourWalker.reconstruct.

    Args:
        outline: Outline already transformed into output coordinates
        logger: Optional structured logger

    Returns:
        Ordered list of path operations
    """
    return ContourWalker(logger=logger).reconstruct(outline)
