"""Point and tangent value types."""

from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D point, also used for tangent vectors."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def as_tuple(self) -> Tuple[float, float]:
        """Return point as (x, y)."""
        return (self.x, self.y)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Point":
        """Create point from the first two entries of an array."""
        return cls(float(array[0]), float(array[1]))


ORIGIN = Point(0.0, 0.0)


class TangentPair(NamedTuple):
    """Tangents at the start (P0) and the end (P1) of the segment."""

    start: Point
    end: Point


ZERO_TANGENTS = TangentPair(ORIGIN, ORIGIN)


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Stack points into a (n, 2) float array."""
    return np.array([point.as_tuple() for point in points], dtype=float).reshape(len(points), 2)
