"""Configuration management for easelut."""

from easelut.core.config.loader import detect_format, load_config, load_ease_config
from easelut.core.config.models import (
    DEFAULT_STEPS,
    MAX_STEPS,
    MIN_STEPS,
    EaseConfig,
    SolverConfig,
)

__all__ = [
    "DEFAULT_STEPS",
    "MAX_STEPS",
    "MIN_STEPS",
    "EaseConfig",
    "SolverConfig",
    "detect_format",
    "load_config",
    "load_ease_config",
]
