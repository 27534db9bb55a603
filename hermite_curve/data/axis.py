"""Enum for the coordinate axes of a point."""
from enum import Enum


class Axis(Enum):
    """Enum for axis."""

    X = "x"
    Y = "y"
