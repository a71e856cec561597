"""Y-only table evaluators solved at uniform x.

Unlike the point lists, the x position of every entry is implied by its
index, so only y is stored. Each entry is a root solve at construction time,
which makes the index arithmetic exact rather than an approximation.

TableTrimmed stores steps - 2 entries at x = k / steps (k = 1 .. steps - 2)
and implies the anchors; the last stored knot interpolates straight to
(65535, 65535). TableFull stores steps entries at x = i / (steps - 1) with
the anchors written literally and no sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from easelut.core.config.models import DEFAULT_STEPS, SolverConfig
from easelut.core.curves.evaluators.base import ANCHOR_END, ANCHOR_START, normalize_steps, render
from easelut.core.curves.fixed16 import lerp_fixed16, to_fixed16_array
from easelut.core.curves.models import MAX_FIXED16, ControlPoints, Sample
from easelut.core.curves.reference import ease

logger = logging.getLogger(__name__)


def _solve_table(
    control: ControlPoints, positions: np.ndarray, solver: SolverConfig | None
) -> list[int]:
    return [int(y) for y in to_fixed16_array(ease(control, positions, solver))]


@dataclass(frozen=True)
class TableTrimmed:
    """Interior y values at uniform x; the anchors are implied."""

    table: tuple[int, ...]

    @classmethod
    def build(
        cls,
        control: ControlPoints,
        steps: int | None = DEFAULT_STEPS,
        solver: SolverConfig | None = None,
        *,
        default_steps: int = DEFAULT_STEPS,
    ) -> TableTrimmed:
        steps = normalize_steps(steps, default_steps)
        positions = np.arange(1, steps - 1) / steps
        table = tuple(_solve_table(control, positions, solver))
        logger.debug("Built trimmed table for %s with %d entries", control, len(table))
        return cls(table=table)

    @property
    def divisions(self) -> int:
        """Number of uniform x divisions, counting the two implied anchors."""
        return len(self.table) + 2

    def eval(self, x: int) -> int:
        """Interpolate y for x between the implied anchors and the stored values.

        The final segment runs from the last stored value straight to
        (65535, 65535), so it spans two divisions.
        """
        if x <= 0:
            return 0
        if x >= MAX_FIXED16:
            return MAX_FIXED16
        n = len(self.table)
        divisions = n + 2
        index = x * divisions // MAX_FIXED16
        if index >= n:
            base_x = n * MAX_FIXED16 // divisions
            return lerp_fixed16(x, base_x, self.table[-1], MAX_FIXED16, MAX_FIXED16)
        base_x = index * MAX_FIXED16 // divisions
        next_x = (index + 1) * MAX_FIXED16 // divisions
        base_y = self.table[index - 1] if index else 0
        return lerp_fixed16(x, base_x, base_y, next_x, self.table[index])

    def samples(self) -> list[Sample]:
        """Stored values laid out over len + 1 nominal intervals.

        This is the historical dump layout; the values are not located at
        these x positions. Use knots() for the interpolation anchors.
        """
        intervals = len(self.table) + 1
        stored = [
            Sample(x=(k + 1) * MAX_FIXED16 // intervals, y=y) for k, y in enumerate(self.table)
        ]
        return [ANCHOR_START, *stored, ANCHOR_END]

    def knots(self) -> list[Sample]:
        """Stored values at the x positions they were solved for."""
        divisions = self.divisions
        stored = [
            Sample(x=(k + 1) * MAX_FIXED16 // divisions, y=y) for k, y in enumerate(self.table)
        ]
        return [ANCHOR_START, *stored, ANCHOR_END]

    def __len__(self) -> int:
        return len(self.table)

    def __str__(self) -> str:
        return render("TableTrimmed", self.samples())


@dataclass(frozen=True)
class TableFull:
    """Y values at uniform x with both anchors stored."""

    table: tuple[int, ...]

    @classmethod
    def build(
        cls,
        control: ControlPoints,
        steps: int | None = DEFAULT_STEPS,
        solver: SolverConfig | None = None,
        *,
        default_steps: int = DEFAULT_STEPS,
    ) -> TableFull:
        steps = normalize_steps(steps, default_steps)
        positions = np.arange(1, steps - 1) / (steps - 1)
        table = (0, *_solve_table(control, positions, solver), MAX_FIXED16)
        logger.debug("Built full table for %s with %d entries", control, len(table))
        return cls(table=table)

    def eval(self, x: int) -> int:
        """Interpolate y for x over the stored table.

        The interval index is clamped to the last interval, so x = 65535
        lands on the stored top anchor without a sentinel entry.

        Example:
            >>> make_table_full(0, 0, 0.58, 1, 6).eval(MAX_FIXED16)
            65535
        """
        intervals = len(self.table) - 1
        index = min(x * intervals // MAX_FIXED16, intervals - 1)
        base_x = index * MAX_FIXED16 // intervals
        next_x = (index + 1) * MAX_FIXED16 // intervals
        return lerp_fixed16(x, base_x, self.table[index], next_x, self.table[index + 1])

    def samples(self) -> list[Sample]:
        """Every stored value at its uniform x position, anchors included."""
        intervals = len(self.table) - 1
        return [Sample(x=i * MAX_FIXED16 // intervals, y=y) for i, y in enumerate(self.table)]

    def knots(self) -> list[Sample]:
        """Same as samples(); each stored value is an interpolation anchor."""
        return self.samples()

    def __len__(self) -> int:
        return len(self.table)

    def __str__(self) -> str:
        return render("TableFull", self.samples())


def make_table_trimmed(
    x0: float, y0: float, x1: float, y1: float, steps: int | None = 0
) -> TableTrimmed:
    """Build a TableTrimmed from raw control point coordinates.

    Example:
        >>> t = make_table_trimmed(0, 0, 0.58, 1, 6)
        >>> str(t)
        'TableTrimmed{(0, 0), (13107, 17061), (26214, 32004), (39321, 44868), (52428, 55301), (65535, 65535)}'
        >>> len(t), t.eval(1000)
        (4, 1562)
    """
    return TableTrimmed.build(ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1), steps)


def make_table_full(
    x0: float, y0: float, x1: float, y1: float, steps: int | None = 0
) -> TableFull:
    """Build a TableFull from raw control point coordinates."""
    return TableFull.build(ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1), steps)
