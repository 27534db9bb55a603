"""Default configuration for curve generation."""

from typing import Tuple

# Cardinal spline tension used to scale the tangents.
TENSION = 0.5

# Number of equal parameter steps used for the plotted polyline.
PLOT_STEPS = 100

# Parameter values of the labelled points shown in the point table.
TABLE_PARAMETERS: Tuple[float, ...] = (0.2, 0.4, 0.6, 0.8, 1.0)

# Decimal places used when displaying coordinates and coefficients.
DISPLAY_PRECISION = 2

# P0 (start), P1 (end), P2 (shape)
INITIAL_POINTS: Tuple[Tuple[float, float], ...] = ((2.0, 2.0), (12.0, 10.0), (4.0, 8.0))
