"""Configuration models for easelut."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STEPS = 32
MIN_STEPS = 3
MAX_STEPS = 65535


class SolverConfig(BaseModel):
    """Root solver settings used to recover t for a target x.

    Newton iterations run first; any sample still off by more than
    `tolerance` is re-solved by bisection. Both loops are bounded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    newton_iterations: int = Field(
        default=8, ge=1, le=64, description="Newton-Raphson iterations per solve"
    )

    bisection_iterations: int = Field(
        default=60, ge=1, le=200, description="Bisection rounds for unconverged samples"
    )

    tolerance: float = Field(
        default=1e-9, gt=0.0, description="Accepted |x(t) - x| after Newton"
    )


class EaseConfig(BaseModel):
    """Top-level configuration for building evaluators."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_steps: int = Field(
        default=DEFAULT_STEPS,
        ge=MIN_STEPS,
        le=MAX_STEPS,
        description="Step count used when a requested count is unset or out of range",
    )

    solver: SolverConfig = Field(default_factory=SolverConfig)
