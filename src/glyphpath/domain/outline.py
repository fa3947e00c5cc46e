"""Core geometric types for outline representation.

This module defines the raw outline data handed over by the font reader:
- Point: A 2D point with on/off-curve information
- PointType: Enum for the TrueType on-curve flag
- Outline: Points plus contour end indices for one glyph
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from glyphpath.exceptions import OutlineError

# Bit 0 of a TrueType point flag marks an on-curve point
FLAG_ON_CURVE = 0x01


class PointType(Enum):
    """Point type on a quadratic contour.

    Points can be:
    - ON_CURVE: Anchor the rendered path passes through
    - OFF_CURVE: Quadratic Bezier control point; two consecutive control
      points imply an on-curve point halfway between them
    """

    ON_CURVE = auto()
    OFF_CURVE = auto()

    @classmethod
    def from_flag(cls, flag: int) -> "PointType":
        """Classify a raw point flag. Only bit 0 is interpreted."""
        return cls.ON_CURVE if flag & FLAG_ON_CURVE else cls.OFF_CURVE

    @property
    def flag(self) -> int:
        """Raw flag value with only the on-curve bit set or cleared."""
        return FLAG_ON_CURVE if self is PointType.ON_CURVE else 0


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with curve metadata.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
        point_type: On-curve anchor or off-curve control point
    """

    x: float
    y: float
    point_type: PointType = PointType.ON_CURVE

    @property
    def on_curve(self) -> bool:
        return self.point_type is PointType.ON_CURVE

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def midpoint(self, other: "Point") -> "Point":
        """Return the on-curve point exactly halfway to another point.

        Args:
            other: The second point

        Returns:
            New on-curve point at the arithmetic mean of both coordinates
        """
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2, PointType.ON_CURVE)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y, "flag": self.point_type.flag}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], point_type=PointType.from_flag(data["flag"]))


def _integral_ends(ends: Sequence[Any]) -> tuple[int, ...]:
    """Convert contour end indices to ints, rejecting fractional values."""
    result = []
    for idx, end in enumerate(ends):
        try:
            value = int(end)
        except (TypeError, ValueError) as e:
            raise OutlineError(f"Contour {idx} end index {end!r} is not an integer") from e
        if value != end:
            raise OutlineError(f"Contour {idx} end index {end!r} is not an integer")
        result.append(value)
    return tuple(result)


@dataclass(frozen=True)
class Outline:
    """Quadratic outline of one glyph.

    Contours are contiguous runs of ``points``; each entry of
    ``contour_ends`` is the index of the last point of a contour, and the
    next contour starts right after it. The contract is checked on
    construction so that no contour slice can read out of bounds.

    An outline without points or without contours is degenerate. That is
    valid input and renders as a placeholder.

    Attributes:
        points: All points of the glyph in contour order
        contour_ends: Index of the last point of each contour
    """

    points: tuple[Point, ...] = ()
    contour_ends: tuple[int, ...] = ()
    _contours: tuple[tuple[Point, ...], ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "contour_ends", _integral_ends(self.contour_ends))
        if self.is_degenerate():
            return

        n_points = len(self.points)
        previous = -1
        for idx, end in enumerate(self.contour_ends):
            if end < 0 or end >= n_points:
                raise OutlineError(
                    f"Contour {idx} ends at index {end}, outside 0..{n_points - 1}"
                )
            if end <= previous:
                raise OutlineError(
                    f"Contour end indices must be strictly increasing: "
                    f"contour {idx} ends at {end} after {previous}"
                )
            previous = end
        if previous != n_points - 1:
            raise OutlineError(
                f"Last contour ends at index {previous} but outline has {n_points} points"
            )

        contours = []
        start = 0
        for end in self.contour_ends:
            contours.append(self.points[start : end + 1])
            start = end + 1
        object.__setattr__(self, "_contours", tuple(contours))

    @classmethod
    def from_flags(
        cls,
        coordinates: Sequence[tuple[float, float]],
        flags: Sequence[int],
        contour_ends: Sequence[int],
    ) -> "Outline":
        """Build an outline from the parallel sequences of a glyf outline.

        Args:
            coordinates: (x, y) pairs in font design units
            flags: One flag per point; bit 0 set means on-curve
            contour_ends: Index of the last point of each contour

        Returns:
            Outline instance

        Raises:
            OutlineError: If flags and coordinates differ in length, or the
                contour end indices do not partition the points
        """
        if len(coordinates) != len(flags):
            raise OutlineError(
                f"Got {len(coordinates)} points but {len(flags)} flags"
            )
        points = tuple(
            Point(x, y, PointType.from_flag(flag))
            for (x, y), flag in zip(coordinates, flags)
        )
        return cls(points=points, contour_ends=tuple(contour_ends))

    @property
    def flags(self) -> tuple[int, ...]:
        """On-curve flags parallel to ``points``."""
        return tuple(p.point_type.flag for p in self.points)

    def is_degenerate(self) -> bool:
        """Check if the outline has no points or no contours."""
        return not self.points or not self.contour_ends

    def contours(self) -> tuple[tuple[Point, ...], ...]:
        """Split the points into contours.

        Returns:
            One tuple of points per contour, empty for degenerate outlines
        """
        return self._contours

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "points": [p.to_dict() for p in self.points],
            "contour_ends": list(self.contour_ends),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outline":
        """Deserialize from dictionary."""
        return cls(
            points=tuple(Point.from_dict(p) for p in data["points"]),
            contour_ends=tuple(data["contour_ends"]),
        )
