"""Point-list evaluators.

Samples are taken uniformly in the curve parameter t, so their x positions
are not uniform: each sample stores its own quantized x and evaluation finds
the bracketing pair by binary search. No root solve happens at construction;
x(t) and y(t) are read straight off the curve.

PointsTrimmed stores steps - 2 interior samples and implies the anchors.
PointsFull also stores (0, 0) and (65535, 65535).
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
import logging

import numpy as np

from easelut.core.config.models import DEFAULT_STEPS, SolverConfig
from easelut.core.curves.evaluators.base import ANCHOR_END, ANCHOR_START, normalize_steps, render
from easelut.core.curves.fixed16 import lerp_fixed16, to_fixed16_array
from easelut.core.curves.models import MAX_FIXED16, ControlPoints, Sample
from easelut.core.curves.reference import points_at

logger = logging.getLogger(__name__)


def _interior_points(control: ControlPoints, steps: int) -> tuple[list[int], list[int]]:
    """Quantized samples at t = i / (steps - 1) for 0 < i < steps - 1."""
    t = np.arange(1, steps - 1) / (steps - 1)
    xs, ys = points_at(control, t)
    return [int(x) for x in to_fixed16_array(xs)], [int(y) for y in to_fixed16_array(ys)]


@dataclass(frozen=True)
class PointsTrimmed:
    """Interior (x, y) samples; the anchors are implied."""

    xs: tuple[int, ...]
    ys: tuple[int, ...]

    @classmethod
    def build(
        cls,
        control: ControlPoints,
        steps: int | None = DEFAULT_STEPS,
        solver: SolverConfig | None = None,
        *,
        default_steps: int = DEFAULT_STEPS,
    ) -> PointsTrimmed:
        """Sample the curve at the steps - 2 interior parameters t = i / (steps - 1)."""
        steps = normalize_steps(steps, default_steps)
        xs, ys = _interior_points(control, steps)
        logger.debug("Built trimmed point list for %s with %d points", control, len(xs))
        return cls(xs=tuple(xs), ys=tuple(ys))

    def eval(self, x: int) -> int:
        """Interpolate y for x in [0, 65535].

        0 and 65535 return the implied anchors. Otherwise the bracketing pair
        is found by binary search over the stored x, with the anchors standing
        in below the first and above the last stored sample.

        Example:
            >>> make_points_trimmed(0, 0, 0.58, 1, 6).eval(4173)
            6816
        """
        if x <= 0:
            return 0
        if x >= MAX_FIXED16:
            return MAX_FIXED16
        xs = self.xs
        i = bisect_left(xs, x)
        if i < len(xs) and xs[i] == x:
            return self.ys[i]
        x0, y0 = (xs[i - 1], self.ys[i - 1]) if i else (0, 0)
        x1, y1 = (xs[i], self.ys[i]) if i < len(xs) else (MAX_FIXED16, MAX_FIXED16)
        return lerp_fixed16(x, x0, y0, x1, y1)

    def samples(self) -> list[Sample]:
        """Stored pairs framed by the implied anchors."""
        return [ANCHOR_START, *self._stored(), ANCHOR_END]

    def knots(self) -> list[Sample]:
        """Same as samples(): every stored pair is an exact knot."""
        return self.samples()

    def _stored(self) -> list[Sample]:
        return [Sample(x=x, y=y) for x, y in zip(self.xs, self.ys, strict=True)]

    def __len__(self) -> int:
        return len(self.xs)

    def __str__(self) -> str:
        return render("PointsTrimmed", self.samples())


@dataclass(frozen=True)
class PointsFull:
    """(x, y) samples with both anchors stored explicitly."""

    xs: tuple[int, ...]
    ys: tuple[int, ...]

    @classmethod
    def build(
        cls,
        control: ControlPoints,
        steps: int | None = DEFAULT_STEPS,
        solver: SolverConfig | None = None,
        *,
        default_steps: int = DEFAULT_STEPS,
    ) -> PointsFull:
        """Sample like PointsTrimmed and store both anchors around the result."""
        steps = normalize_steps(steps, default_steps)
        xs, ys = _interior_points(control, steps)
        logger.debug("Built full point list for %s with %d points", control, len(xs) + 2)
        return cls(xs=(0, *xs, MAX_FIXED16), ys=(0, *ys, MAX_FIXED16))

    def eval(self, x: int) -> int:
        """Interpolate y for x in [0, 65535] by binary search over the stored x."""
        xs = self.xs
        # The top anchor wins over interior samples that quantized onto it.
        if x >= xs[-1]:
            return self.ys[-1]
        i = bisect_left(xs, x)
        if xs[i] == x:
            return self.ys[i]
        return lerp_fixed16(x, xs[i - 1], self.ys[i - 1], xs[i], self.ys[i])

    def samples(self) -> list[Sample]:
        """Stored pairs, anchors included."""
        return [Sample(x=x, y=y) for x, y in zip(self.xs, self.ys, strict=True)]

    def knots(self) -> list[Sample]:
        """Same as samples()."""
        return self.samples()

    def __len__(self) -> int:
        return len(self.xs)

    def __str__(self) -> str:
        return render("PointsFull", self.samples())


def make_points_trimmed(
    x0: float, y0: float, x1: float, y1: float, steps: int | None = 0
) -> PointsTrimmed:
    """Build a PointsTrimmed from raw control point coordinates.

    Example:
        >>> p = make_points_trimmed(0, 0, 0.58, 1, 6)
        >>> len(p), p.eval(1000)
        (4, 1633)
    """
    return PointsTrimmed.build(ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1), steps)


def make_points_full(
    x0: float, y0: float, x1: float, y1: float, steps: int | None = 0
) -> PointsFull:
    """Build a PointsFull from raw control point coordinates."""
    return PointsFull.build(ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1), steps)
