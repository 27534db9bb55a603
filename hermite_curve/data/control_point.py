"""Enum for the roles of the three control points."""
from enum import Enum


class ControlPointRole(Enum):
    """Enum for control point role, values are the control set indices."""

    START = 0
    END = 1
    SHAPE = 2

    @property
    def label(self) -> str:
        """Return label for display."""
        return _LABELS[self.value]


_LABELS = {
    ControlPointRole.START.value: "Start Point P0",
    ControlPointRole.END.value: "End Point P1",
    ControlPointRole.SHAPE.value: "Control Point P2",
}
