"""Evaluator registry and strategy resolution."""

from __future__ import annotations

from collections.abc import Callable
import logging

from easelut.core.config.models import EaseConfig
from easelut.core.curves.evaluators import (
    Evaluator,
    PointsFull,
    PointsTrimmed,
    Precise,
    TableFull,
    TableTrimmed,
    UniformLUT,
)
from easelut.core.curves.models import ControlPoints, EaseStrategy

logger = logging.getLogger(__name__)

# Builder signature: (control, steps, solver, *, default_steps) -> Evaluator
EvaluatorBuilder = Callable[..., Evaluator]


class EvaluatorRegistry:
    """Registry mapping strategies to evaluator builders."""

    def __init__(self) -> None:
        self._registry: dict[EaseStrategy, EvaluatorBuilder] = {}

    def register(self, strategy: EaseStrategy | str, builder: EvaluatorBuilder) -> None:
        strategy = EaseStrategy(strategy)
        if strategy in self._registry:
            raise ValueError(f"Strategy '{strategy.value}' already registered")
        self._registry[strategy] = builder

    def get(self, strategy: EaseStrategy | str) -> EvaluatorBuilder:
        try:
            return self._registry[EaseStrategy(strategy)]
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Strategy '{strategy}' is not registered") from exc

    def strategies(self) -> list[EaseStrategy]:
        return list(self._registry)

    def build(
        self,
        strategy: EaseStrategy | str,
        control: ControlPoints,
        steps: int | None = 0,
        config: EaseConfig | None = None,
    ) -> Evaluator:
        """Build an evaluator for the given strategy.

        Args:
            strategy: Strategy or its string value (e.g. "lut").
            control: Curve control points.
            steps: Requested step count. Unset or out-of-range values fall
                back to the configured default.
            config: Optional configuration; defaults to EaseConfig().

        Returns:
            An immutable evaluator.

        Raises:
            ValueError: If the strategy is not registered.
        """
        config = config or EaseConfig()
        builder = self.get(strategy)
        return builder(control, steps, config.solver, default_steps=config.default_steps)


def build_default_registry() -> EvaluatorRegistry:
    """Create a registry with every built-in strategy."""
    registry = EvaluatorRegistry()
    registry.register(EaseStrategy.PRECISE, Precise.build)
    registry.register(EaseStrategy.UNIFORM_LUT, UniformLUT.build)
    registry.register(EaseStrategy.POINTS_TRIMMED, PointsTrimmed.build)
    registry.register(EaseStrategy.POINTS_FULL, PointsFull.build)
    registry.register(EaseStrategy.TABLE_TRIMMED, TableTrimmed.build)
    registry.register(EaseStrategy.TABLE_FULL, TableFull.build)
    return registry


def build(
    strategy: EaseStrategy | str,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    steps: int | None = 0,
    *,
    config: EaseConfig | None = None,
) -> Evaluator:
    """Build an evaluator from raw control point coordinates.

    Example:
        >>> e = build("table_trimmed", 0, 0, 0.58, 1, 6)
        >>> e.eval(0), e.eval(1000), e.eval(65535)
        (0, 1562, 65535)
    """
    control = ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1)
    evaluator = build_default_registry().build(strategy, control, steps, config)
    logger.debug("Built %s evaluator for %s", EaseStrategy(strategy).value, control)
    return evaluator
