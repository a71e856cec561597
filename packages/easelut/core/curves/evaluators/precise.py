"""Precise evaluator: no table, full root solve on every call."""

from __future__ import annotations

from dataclasses import dataclass, field

from easelut.core.config.models import DEFAULT_STEPS, SolverConfig
from easelut.core.curves.evaluators.base import ANCHOR_END, ANCHOR_START
from easelut.core.curves.models import ControlPoints, Sample
from easelut.core.curves.reference import solve_y_for_x


@dataclass(frozen=True)
class Precise:
    """Ground-truth evaluator.

    Holds only the control points. Too slow for high-volume queries; used as
    the accuracy reference the table strategies are measured against.
    """

    control: ControlPoints
    solver: SolverConfig = field(default_factory=SolverConfig)

    @classmethod
    def build(
        cls,
        control: ControlPoints,
        steps: int | None = None,
        solver: SolverConfig | None = None,
        *,
        default_steps: int = DEFAULT_STEPS,
    ) -> Precise:
        """Build from control points. Step settings are accepted and ignored."""
        return cls(control=control, solver=solver or SolverConfig())

    def eval(self, x: int) -> int:
        return solve_y_for_x(self.control, x, self.solver)

    def samples(self) -> list[Sample]:
        return [ANCHOR_START, ANCHOR_END]

    def knots(self) -> list[Sample]:
        return [ANCHOR_START, ANCHOR_END]

    def __len__(self) -> int:
        return 0

    def __str__(self) -> str:
        return f"Precise{self.control}"


def make_precise(x0: float, y0: float, x1: float, y1: float) -> Precise:
    """Build a Precise evaluator from raw control point coordinates."""
    return Precise.build(ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1))
