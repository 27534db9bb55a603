"""Compute everything shown for one curve."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from hermite_curve.data import PLOT_STEPS, TABLE_PARAMETERS, TENSION
from hermite_curve.data.point import Point, TangentPair
from hermite_curve.spline import derive_tangents, sample_path, sample_table, svg_path
from hermite_curve.spline.formatting import format_equation
from hermite_curve.spline.polynomial import CurvePolynomial, to_polynomial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveResult:  # pylint: disable=too-many-instance-attributes
    """Derived data of one curve computation."""

    control_points: Tuple[Point, ...]
    tension: float
    tangents: TangentPair
    path: Tuple[Point, ...]
    svg_path: str
    points: Tuple[Point, ...]
    polynomial: Optional[CurvePolynomial]
    equations: Tuple[str, str]


def compute_curve(
    control_points: Sequence[Point],
    tension: float = TENSION,
    steps: int = PLOT_STEPS,
    parameters: Sequence[float] = TABLE_PARAMETERS,
) -> CurveResult:
    """Derive tangents, sample the curve and expand its polynomial."""
    tangents = derive_tangents(control_points, tension)
    path = sample_path(control_points, tangents, steps)
    points = sample_table(control_points, tangents, parameters)

    polynomial = None
    equations = ("0", "0")
    if len(control_points) >= 2:
        polynomial = to_polynomial(control_points[0], control_points[1], tangents.start, tangents.end)
        equations = (format_equation(polynomial.x), format_equation(polynomial.y))

    logger.info(
        "Computed curve with %(n_path)s path points and %(n_points)s table points",
        {"n_path": len(path), "n_points": len(points)},
    )
    return CurveResult(
        control_points=tuple(control_points),
        tension=tension,
        tangents=tangents,
        path=tuple(path),
        svg_path=svg_path(path),
        points=tuple(points),
        polynomial=polynomial,
        equations=equations,
    )
