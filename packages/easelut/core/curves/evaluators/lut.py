"""Uniform lookup-table evaluator.

The table holds `steps` quantized y values sampled at uniformly spaced x
positions, followed by one extra 65535. The duplicate end value lets eval()
treat x == 65535 like any other input instead of special-casing it.

Memory is steps + 1 entries.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from easelut.core.config.models import DEFAULT_STEPS, SolverConfig
from easelut.core.curves.evaluators.base import normalize_steps, render
from easelut.core.curves.fixed16 import to_fixed16_array
from easelut.core.curves.models import MAX_FIXED16, ControlPoints, Sample
from easelut.core.curves.reference import ease

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UniformLUT:
    """Fast evaluator over a sentinel-terminated y table.

    Values are constrained to [0, 65535] for both x and y. The first and last
    real entries are the curve anchors 0 and 65535.
    """

    table: tuple[int, ...]

    @classmethod
    def build(
        cls,
        control: ControlPoints,
        steps: int | None = DEFAULT_STEPS,
        solver: SolverConfig | None = None,
        *,
        default_steps: int = DEFAULT_STEPS,
    ) -> UniformLUT:
        """Sample the curve at `steps` uniform x positions.

        Args:
            control: Curve control points.
            steps: Number of samples, anchors included. Values below 3 are
                replaced by `default_steps`.
            solver: Root solver settings.
            default_steps: Replacement for an unusable `steps`.
        """
        steps = normalize_steps(steps, default_steps)
        positions = np.arange(steps) / (steps - 1)
        ys = to_fixed16_array(ease(control, positions, solver))
        table = (*(int(y) for y in ys), MAX_FIXED16)
        logger.debug("Built uniform LUT for %s with %d entries", control, len(table))
        return cls(table=table)

    @property
    def intervals(self) -> int:
        """Number of uniform x intervals; the sentinel is not counted."""
        return len(self.table) - 2

    def eval(self, x: int) -> int:
        """Interpolate y for x in [0, 65535].

        The bracketing interval is found by integer division. At x == 65535
        the index lands on the last real entry and the sentinel supplies the
        right-hand neighbor.

        Example:
            >>> make_lut(0, 0, 0.58, 1, 6).eval(13107)
            20209
        """
        intervals = self.intervals
        index = x * intervals // MAX_FIXED16
        next_x = (index + 1) * MAX_FIXED16 // intervals
        base_x = index * MAX_FIXED16 // intervals
        a = self.table[index] * (next_x - x)
        b = self.table[index + 1] * (x - base_x)
        return (a + b) // (next_x - base_x)

    def samples(self) -> list[Sample]:
        """Stored entries at their nominal x, sentinel omitted."""
        intervals = self.intervals
        return [
            Sample(x=i * MAX_FIXED16 // intervals, y=y)
            for i, y in enumerate(self.table[: intervals + 1])
        ]

    def knots(self) -> list[Sample]:
        """Same as samples(): every table entry is an exact knot."""
        return self.samples()

    def __len__(self) -> int:
        return len(self.table)

    def __str__(self) -> str:
        return render("LUT", self.samples())


def make_lut(x0: float, y0: float, x1: float, y1: float, steps: int | None = 0) -> UniformLUT:
    """Build a UniformLUT from raw control point coordinates.

    Example:
        >>> lut = make_lut(0, 0, 0.58, 1, 6)
        >>> len(lut), lut.eval(1000)
        (7, 1541)
    """
    return UniformLUT.build(ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1), steps)
