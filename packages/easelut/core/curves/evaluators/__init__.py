"""Ease curve evaluator strategies."""

from easelut.core.curves.evaluators.base import Evaluator, normalize_steps
from easelut.core.curves.evaluators.lut import UniformLUT, make_lut
from easelut.core.curves.evaluators.points import (
    PointsFull,
    PointsTrimmed,
    make_points_full,
    make_points_trimmed,
)
from easelut.core.curves.evaluators.precise import Precise, make_precise
from easelut.core.curves.evaluators.table import (
    TableFull,
    TableTrimmed,
    make_table_full,
    make_table_trimmed,
)

__all__ = [
    "Evaluator",
    "PointsFull",
    "PointsTrimmed",
    "Precise",
    "TableFull",
    "TableTrimmed",
    "UniformLUT",
    "make_lut",
    "make_points_full",
    "make_points_trimmed",
    "make_precise",
    "make_table_full",
    "make_table_trimmed",
    "normalize_steps",
]
