"""Monomial form of the Hermite segment."""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np
from numba import jit

from hermite_curve.data import DISPLAY_PRECISION
from hermite_curve.data.point import Point, points_to_array

# Maps the geometry [p0, p1, t0, t1] to the coefficients [a, b, c, d].
HERMITE_MATRIX = np.array(
    [
        [2, -2, 1, 1],
        [-3, 3, -2, -1],
        [0, 0, 1, 0],
        [1, 0, 0, 0],
    ],
    dtype=float,
)


@dataclass(frozen=True)
class PolynomialCoeffs:
    """Coefficients of a*u^3 + b*u^2 + c*u + d for one axis."""

    a: float
    b: float
    c: float
    d: float

    def __call__(self, u: float) -> float:
        return self.a * u**3 + self.b * u**2 + self.c * u + self.d

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return (a, b, c, d)."""
        return (self.a, self.b, self.c, self.d)

    def rounded(self, precision: int = DISPLAY_PRECISION) -> "PolynomialCoeffs":
        """Return a copy rounded for display."""
        return PolynomialCoeffs(*(round(value, precision) + 0.0 for value in self.as_tuple()))


class CurvePolynomial(NamedTuple):
    """Polynomial coefficients per axis."""

    x: PolynomialCoeffs
    y: PolynomialCoeffs

    def __call__(self, u: float) -> Point:
        return Point(self.x(u), self.y(u))


@jit(nopython=True)
def hermite_coefficients(y: np.ndarray, dydu: np.ndarray) -> np.ndarray:  # pylint: disable=invalid-name
    """Calculate the monomial coefficients of a unit interval hermite spline.

    y holds the two endpoints, dydu the two tangents, both stacked along the first axis.
    Equivalent to HERMITE_MATRIX @ [y0, y1, dydu0, dydu1].
    Returns the coefficients [a, b, c, d] stacked along the first axis.
    """
    slope = y[1] - y[0]
    t = dydu[0] + dydu[1] - 2 * slope

    c = np.empty((4,) + y.shape[1:], dtype=y.dtype)
    c[0] = t
    c[1] = slope - dydu[0] - t
    c[2] = dydu[0]
    c[3] = y[0]
    return c


def to_polynomial(p0: Point, p1: Point, t0: Point, t1: Point) -> CurvePolynomial:
    """Expand the segment into per axis polynomial coefficients."""
    coefficients = hermite_coefficients(points_to_array([p0, p1]), points_to_array([t0, t1]))
    return CurvePolynomial(
        x=PolynomialCoeffs(*(float(value) for value in coefficients[:, 0])),
        y=PolynomialCoeffs(*(float(value) for value in coefficients[:, 1])),
    )
