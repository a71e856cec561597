"""Named CSS transition timing curves."""

from __future__ import annotations

from enum import Enum

from easelut.core.curves.models import ControlPoints

_PRESET_POINTS: dict[str, tuple[float, float, float, float]] = {
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "linear": (0.0, 0.0, 1.0, 1.0),
}


class TransitionPreset(str, Enum):
    """Standard `transition-timing-function` keywords."""

    EASE = "ease"
    EASE_IN = "ease-in"
    EASE_IN_OUT = "ease-in-out"
    EASE_OUT = "ease-out"
    LINEAR = "linear"

    @property
    def control_points(self) -> ControlPoints:
        x0, y0, x1, y1 = _PRESET_POINTS[self.value]
        return ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1)
