"""Fixed-point cubic Bezier ease curves."""

from easelut.core.curves.evaluators import (
    Evaluator,
    PointsFull,
    PointsTrimmed,
    Precise,
    TableFull,
    TableTrimmed,
    UniformLUT,
)
from easelut.core.curves.models import MAX_FIXED16, ControlPoints, EaseStrategy, Sample
from easelut.core.curves.presets import TransitionPreset
from easelut.core.curves.registry import EvaluatorRegistry, build, build_default_registry

__all__ = [
    "MAX_FIXED16",
    "ControlPoints",
    "EaseStrategy",
    "Evaluator",
    "EvaluatorRegistry",
    "PointsFull",
    "PointsTrimmed",
    "Precise",
    "Sample",
    "TableFull",
    "TableTrimmed",
    "TransitionPreset",
    "UniformLUT",
    "build",
    "build_default_registry",
]
