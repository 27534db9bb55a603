"""Tangent derivation and Hermite basis evaluation for one curve segment.

The segment runs from P0 to P1. The third control point P2 only shapes the
tangents and does not lie on the curve.
"""

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from hermite_curve.data import PLOT_STEPS, TABLE_PARAMETERS, TENSION
from hermite_curve.data.point import ZERO_TANGENTS, Point, TangentPair, points_to_array

logger = logging.getLogger(__name__)


def derive_tangents(control_points: Sequence[Point], tension: float = TENSION) -> TangentPair:
    """Derive the tangents at P0 and P1 from the control set.

    The start tangent follows P0 -> P2, the end tangent follows P2 -> P1.
    Returns zero tangents if fewer than three points are given.
    """
    if len(control_points) < 3:
        return ZERO_TANGENTS
    p0, p1, p2 = control_points[:3]
    return TangentPair(start=tension * (p2 - p0), end=tension * (p1 - p2))


def hermite_basis(u: Union[float, Sequence[float], np.ndarray]) -> np.ndarray:
    """Return the basis weights for p0, p1, t0 and t1, shape (4, n)."""
    u = np.atleast_1d(np.asarray(u, dtype=float))
    u2 = u * u
    u3 = u2 * u
    return np.array(
        [
            2 * u3 - 3 * u2 + 1,  # h00, weight of p0
            -2 * u3 + 3 * u2,  # h10, weight of p1
            u3 - 2 * u2 + u,  # h01, weight of t0
            u3 - u2,  # h11, weight of t1
        ]
    )


def _evaluate_many(p0: Point, p1: Point, t0: Point, t1: Point, u: np.ndarray) -> np.ndarray:
    """Evaluate the segment for all u at once, shape (n, 2)."""
    geometry = points_to_array([p0, p1, t0, t1])
    return hermite_basis(u).T @ geometry


def evaluate(p0: Point, p1: Point, t0: Point, t1: Point, u: float) -> Point:
    """Evaluate the segment at parameter u in [0, 1]."""
    return Point.from_array(_evaluate_many(p0, p1, t0, t1, np.array([u]))[0])


def _endpoints_and_tangents(control_points: Sequence[Point], tangents: Optional[TangentPair]):
    """Return p0, p1 and the tangents to evaluate with."""
    if tangents is None:
        tangents = derive_tangents(control_points)
    return control_points[0], control_points[1], tangents.start, tangents.end


def sample_path(
    control_points: Sequence[Point], tangents: Optional[TangentPair] = None, steps: int = PLOT_STEPS
) -> List[Point]:
    """Sample the segment densely for plotting.

    The first vertex is P0 itself, followed by one point per step at u = i / steps.
    """
    if steps < 1:
        raise ValueError(f"steps has to be positive, got {steps}")
    if len(control_points) < 2:
        logger.info("Not enough control points to sample a path: %(n)s", {"n": len(control_points)})
        return []

    p0, p1, t0, t1 = _endpoints_and_tangents(control_points, tangents)
    u = np.arange(1, steps + 1) / steps
    return [p0] + [Point.from_array(row) for row in _evaluate_many(p0, p1, t0, t1, u)]


def sample_table(
    control_points: Sequence[Point],
    tangents: Optional[TangentPair] = None,
    parameters: Sequence[float] = TABLE_PARAMETERS,
) -> List[Point]:
    """Sample the segment at the table parameters in increasing u order."""
    if len(control_points) < 2:
        logger.info("Not enough control points to sample a table: %(n)s", {"n": len(control_points)})
        return []

    p0, p1, t0, t1 = _endpoints_and_tangents(control_points, tangents)
    u = np.array(sorted(parameters), dtype=float)
    return [Point.from_array(row) for row in _evaluate_many(p0, p1, t0, t1, u)]


def _svg_number(value: float) -> str:
    return f"{value:.10g}"


def svg_path(points: Sequence[Point]) -> str:
    """Return an SVG path drawing straight lines through the points."""
    if not points:
        return ""
    first, *rest = points
    commands = [f"M {_svg_number(first.x)} {_svg_number(first.y)}"]
    commands.extend(f"L {_svg_number(point.x)} {_svg_number(point.y)}" for point in rest)
    return " ".join(commands)
