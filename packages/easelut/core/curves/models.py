"""Curve schema models for fixed-point ease evaluators.

This module defines the core primitives shared by every evaluator strategy:
- ControlPoints: the two interior control points of an anchored cubic Bezier
- Sample: a single quantized (x, y) pair in the 16-bit domain
- EaseStrategy: the name of an evaluator construction strategy

All models are immutable.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MAX_FIXED16 = 65535


class ControlPoints(BaseModel):
    """Interior control points of a cubic Bezier anchored at (0,0) and (1,1).

    Coordinates are conventionally in [0, 1] but are not validated: values
    outside that range still describe a curve, which may not be monotonic in
    x. Keeping x monotonic is the caller's responsibility.

    Attributes:
        x0: First control point x.
        y0: First control point y.
        x1: Second control point x.
        y1: Second control point y.

    Example:
        >>> cp = ControlPoints(x0=0.42, y0=0.0, x1=0.58, y1=1.0)
        >>> cp.as_tuple()
        (0.42, 0.0, 0.58, 1.0)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x0: float
    y0: float
    x1: float
    y1: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return (x0, y0, x1, y1)."""
        return (self.x0, self.y0, self.x1, self.y1)

    def __str__(self) -> str:
        return f"({self.x0:g}, {self.y0:g}, {self.x1:g}, {self.y1:g})"


class Sample(BaseModel):
    """A quantized point on an ease curve.

    Both x and y are in [0, 65535].
    This model is immutable (frozen=True).

    Example:
        >>> str(Sample(x=13107, y=17061))
        '(13107, 17061)'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int = Field(..., ge=0, le=MAX_FIXED16, description="Quantized x [0,65535]")
    y: int = Field(..., ge=0, le=MAX_FIXED16, description="Quantized y [0,65535]")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class EaseStrategy(str, Enum):
    """Evaluator construction strategies."""

    PRECISE = "precise"  # No table, root-solve per call
    UNIFORM_LUT = "lut"  # y table at uniform x, sentinel-terminated
    POINTS_TRIMMED = "points_trimmed"  # (x, y) pairs at uniform t, anchors implied
    POINTS_FULL = "points_full"  # (x, y) pairs at uniform t, anchors stored
    TABLE_TRIMMED = "table_trimmed"  # y table at uniform x, anchors implied
    TABLE_FULL = "table_full"  # y table at uniform x, anchors stored
