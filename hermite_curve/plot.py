"""Module for plotting a computed curve."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from hermite_curve.data.point import Point, points_to_array
from hermite_curve.spline.curve import CurveResult
from hermite_curve.spline.formatting import label_points

logger = logging.getLogger(__name__)

MARGIN_RATIO = 0.15
MIN_MARGIN = 2.0


def view_bounds(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    """Return (min_x, max_x, min_y, max_y) around the points with a margin."""
    coords = points_to_array(points)
    _min = coords.min(axis=0)
    _max = coords.max(axis=0)
    margin = np.maximum((_max - _min) * MARGIN_RATIO, MIN_MARGIN)
    return (
        float(_min[0] - margin[0]),
        float(_max[0] + margin[0]),
        float(_min[1] - margin[1]),
        float(_max[1] + margin[1]),
    )


def plot_curve(result: CurveResult, output: Optional[Path] = None) -> Figure:
    """Plot the curve, its endpoints, tangents and table points.

    Saves the figure to output if given, shows it otherwise.
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    if len(result.control_points) < 2:
        logger.warning("Not enough control points to plot a curve.")
        ax.set_title("Not enough points")
    else:
        p0, p1 = result.control_points[:2]
        t0, t1 = result.tangents

        path = points_to_array(result.path)
        ax.plot(path[:, 0], path[:, 1], color="#FF7E67", label="Hermite Curve")

        # Draw begin and endpoint
        ax.scatter([p0.x, p1.x], [p0.y, p1.y], color="#1f2937", zorder=3)
        for name, point in (("P0", p0), ("P1", p1)):
            ax.annotate(name, point.as_tuple(), textcoords="offset points", xytext=(0, 8), ha="center")

        # Draw tangents
        ax.quiver(
            [p0.x, p1.x],
            [p0.y, p1.y],
            [t0.x, t1.x],
            [t0.y, t1.y],
            angles="xy",
            scale_units="xy",
            scale=1,
            color=["green", "blue"],
        )

        for name, point in label_points(result.points):
            ax.scatter([point.x], [point.y], color="#006A71", zorder=3)
            ax.annotate(
                f"{name} ({point.x:.1f}, {point.y:.1f})",
                point.as_tuple(),
                textcoords="offset points",
                xytext=(0, -14),
                ha="center",
                color="#00565c",
            )

        min_x, max_x, min_y, max_y = view_bounds([p0, p1, *result.points])
        ax.set_xlim(min_x, max_x)
        ax.set_ylim(min_y, max_y)
        ax.legend()

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.grid(True)
    ax.set_aspect("equal", adjustable="datalim")

    if output is not None:
        fig.savefig(output)
        logger.info("Saved plot to %(output)s", {"output": output})
    else:
        plt.show()
    return fig
