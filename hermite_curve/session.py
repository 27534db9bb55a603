"""Editable control point state with explicit recomputation."""

import logging
import math
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from hermite_curve.data import INITIAL_POINTS, PLOT_STEPS, TENSION
from hermite_curve.data.axis import Axis
from hermite_curve.data.point import Point, TangentPair
from hermite_curve.spline import derive_tangents
from hermite_curve.spline.curve import CurveResult, compute_curve

logger = logging.getLogger(__name__)


class CurveSession:
    """Hold the current control points and the last computed curve.

    Any edit hides the computed curve until make_curve is called again.
    """

    def __init__(
        self,
        initial_points: Sequence[Tuple[float, float]] = INITIAL_POINTS,
        tension: float = TENSION,
        steps: int = PLOT_STEPS,
    ) -> None:
        self._initial_points = tuple(Point(float(x), float(y)) for x, y in initial_points)
        self.tension = tension
        self.steps = steps
        self._points: List[Point] = list(self._initial_points)
        self._result: Optional[CurveResult] = None

    @property
    def points(self) -> Tuple[Point, ...]:
        """Current control points."""
        return tuple(self._points)

    @property
    def tangents(self) -> TangentPair:
        """Tangents of the current control points."""
        return derive_tangents(self._points, self.tension)

    @property
    def result(self) -> Optional[CurveResult]:
        """Last computed curve, None if invalidated."""
        return self._result

    @property
    def visible(self) -> bool:
        """Return True if a computed curve is shown."""
        return self._result is not None

    def update_point(self, index: int, axis: Axis, value: float) -> None:
        """Set one coordinate of one control point.

        Raise IndexError if there is no control point at index.
        """
        if not 0 <= index < len(self._points):
            raise IndexError(f"No control point with index {index}")

        if not math.isfinite(value):
            logger.warning("Invalid value %(value)s for P%(index)s, using 0", {"value": value, "index": index})
            value = 0.0

        self._points[index] = replace(self._points[index], **{axis.value: float(value)})
        self._result = None

    def reset(self) -> None:
        """Restore the initial points and hide the curve."""
        self._points = list(self._initial_points)
        self._result = None

    def make_curve(self) -> CurveResult:
        """Compute the curve for the current points and show it."""
        self._result = compute_curve(self._points, self.tension, self.steps)
        return self._result
