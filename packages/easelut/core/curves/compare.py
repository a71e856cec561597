"""Side-by-side comparison of evaluator strategies.

The Precise strategy is the ground truth. Deltas are reported as
reference - candidate, so a positive delta means the candidate undershoots.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from easelut.core.config.models import SolverConfig
from easelut.core.curves.evaluators import Evaluator
from easelut.core.curves.models import MAX_FIXED16, ControlPoints
from easelut.core.curves.reference import solve_y_for_x_array


def relative_percent(delta: int) -> float:
    """Delta as a percentage of the full 16-bit range."""
    return 100.0 * delta / MAX_FIXED16


@dataclass(frozen=True)
class ComparisonRow:
    """One x position of a comparison report."""

    x: int
    reference: int
    values: tuple[int, ...]

    @property
    def deltas(self) -> tuple[int, ...]:
        return tuple(self.reference - v for v in self.values)

    @property
    def percents(self) -> tuple[float, ...]:
        return tuple(relative_percent(d) for d in self.deltas)


@dataclass(frozen=True)
class Deviation:
    """Worst-case deviation of an evaluator from the ground truth."""

    x: int
    delta: int

    @property
    def percent(self) -> float:
        return relative_percent(self.delta)


def compare_evaluators(
    reference: Evaluator,
    candidates: Sequence[Evaluator],
    n_points: int = 50,
) -> list[ComparisonRow]:
    """Evaluate every candidate on a uniform x grid.

    Args:
        reference: Ground-truth evaluator, usually Precise.
        candidates: Evaluators to compare against the reference.
        n_points: Number of intervals; n_points + 1 rows are produced at
            x = i * 65535 // n_points.

    Returns:
        One ComparisonRow per grid position.

    Raises:
        ValueError: If n_points < 1.
    """
    if n_points < 1:
        raise ValueError("n_points must be >= 1")

    rows: list[ComparisonRow] = []
    for i in range(n_points + 1):
        x = i * MAX_FIXED16 // n_points
        rows.append(
            ComparisonRow(
                x=x,
                reference=reference.eval(x),
                values=tuple(c.eval(x) for c in candidates),
            )
        )
    return rows


def max_deviation(
    evaluator: Evaluator,
    control: ControlPoints,
    solver: SolverConfig | None = None,
) -> Deviation:
    """Largest |eval(x) - precise(x)| over the full domain.

    The ground truth is solved for all 65536 inputs at once, so this stays
    fast even though the Precise evaluator itself is not.
    """
    xs = np.arange(MAX_FIXED16 + 1, dtype=np.int64)
    expected = solve_y_for_x_array(control, xs, solver)
    actual = np.fromiter((evaluator.eval(x) for x in range(MAX_FIXED16 + 1)), dtype=np.int64)
    deltas = np.abs(actual - expected)
    worst = int(np.argmax(deltas))
    return Deviation(x=worst, delta=int(deltas[worst]))
