"""Shared fixtures."""

import matplotlib
import pytest

from hermite_curve.data.point import Point

matplotlib.use("Agg")


@pytest.fixture
def control_points():
    """P0, P1 and P2 of the default curve."""
    return [Point(2, 2), Point(12, 10), Point(4, 8)]
